"""forgefit: personal workout log with PRs, goals and XP levels."""

__version__ = "0.1.0"
