"""Display preference management."""

import logging
from dataclasses import replace
from enum import Enum

from ..db.repositories import AppSettingsRepository
from ..errors import StorageError, ValidationError
from ..models.settings import AppSettings

logger = logging.getLogger(__name__)


class AppSettingsService:
    """Loads and updates the stored display preferences."""

    def __init__(self, repo: AppSettingsRepository):
        self.repo = repo
        self.settings = AppSettings()

    async def load(self) -> AppSettings:
        try:
            self.settings = await self.repo.get()
        except StorageError as e:
            logger.error("Failed to load settings: %s", e)
        return self.settings

    async def update(self, **changes) -> AppSettings:
        """Change one or more preferences.

        Values for enum fields may be given as their string value.
        """
        current = self.settings
        values = {}
        for name, value in changes.items():
            if name not in AppSettings.field_names():
                raise ValidationError(f"Unknown setting '{name}'")
            default = getattr(current, name)
            if isinstance(default, Enum):
                try:
                    value = type(default)(value)
                except ValueError:
                    allowed = ", ".join(m.value for m in type(default))
                    raise ValidationError(
                        f"Invalid value '{value}' for {name} (choose from: {allowed})"
                    ) from None
            elif not isinstance(value, str) or not value.strip():
                raise ValidationError(f"{name} must be a non-empty string")
            values[name] = value

        updated = replace(current, **values)
        try:
            await self.repo.save(updated)
        except StorageError as e:
            logger.error("Failed to save settings: %s", e)
            return self.settings

        self.settings = updated
        logger.debug("Settings updated: %s", ", ".join(values))
        return updated
