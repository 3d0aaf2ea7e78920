"""CLI commands for forgefit."""

from .app_settings import app_settings
from .exercises import exercises
from .goals import goals
from .init import init
from .profile import profile
from .records import prs
from .serve import serve
from .stats import stats
from .workout import workout

__all__ = [
    "app_settings",
    "exercises",
    "goals",
    "init",
    "profile",
    "prs",
    "serve",
    "stats",
    "workout",
]
