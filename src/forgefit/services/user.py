"""User profile management and XP accrual."""

import logging
from datetime import datetime, timezone

from ..db.repositories import UserProfileRepository
from ..errors import StorageError, ValidationError
from ..models.user import AuthMethod, UserProfile
from .progression import apply_workout, stats_from_counters

logger = logging.getLogger(__name__)

DEFAULT_NAMES = {
    AuthMethod.GUEST: "Guest",
    AuthMethod.PHONE: "User",
}


class UserService:
    """Loads and updates the local profile and its training stats.

    The service keeps the last loaded profile and stats in memory; stored
    records are only replaced after a successful write.
    """

    def __init__(self, repo: UserProfileRepository):
        self.repo = repo
        self.profile: UserProfile | None = None
        self.stats = stats_from_counters(0, 0, 0)

    async def load(self) -> None:
        """Load the profile and stats, recomputing the derived level fields."""
        try:
            self.profile = await self.repo.get_profile()
            stored = await self.repo.get_stats()
        except StorageError as e:
            logger.error("Failed to load user data: %s", e)
            return

        if stored is not None:
            self.stats = stats_from_counters(
                stored.total_exercises, stored.total_sets, stored.total_reps
            )
            logger.debug("User stats loaded, level %d", self.stats.level)
        if self.profile is not None:
            logger.info("User profile loaded: %s", self.profile.name)

    async def create_profile(
        self,
        auth_method: AuthMethod = AuthMethod.GUEST,
        name: str | None = None,
        phone_number: str | None = None,
        now: datetime | None = None,
    ) -> UserProfile | None:
        """Create a fresh profile with zeroed stats.

        Returns:
            The new profile, or None if it could not be saved
        """
        if auth_method == AuthMethod.PHONE and not phone_number:
            raise ValidationError("A phone number is required for phone profiles")

        now = now or datetime.now(timezone.utc)
        profile = UserProfile(
            id=f"{auth_method.value}_{int(now.timestamp() * 1000)}",
            name=name or DEFAULT_NAMES[auth_method],
            auth_method=auth_method,
            created_at=now,
            phone_number=phone_number if auth_method == AuthMethod.PHONE else None,
        )
        initial_stats = stats_from_counters(0, 0, 0)

        try:
            await self.repo.save_profile(profile)
            await self.repo.save_stats(initial_stats)
        except StorageError as e:
            logger.error("Failed to save %s profile: %s", auth_method.value, e)
            return None

        self.profile = profile
        self.stats = initial_stats
        logger.info("Created %s profile %s", auth_method.value, profile.id)
        return profile

    async def update_profile(
        self, name: str | None = None, photo_uri: str | None = None
    ) -> UserProfile | None:
        """Change the display name and/or photo."""
        if self.profile is None:
            return None
        if name is not None and not name.strip():
            raise ValidationError("Name cannot be empty")

        updated = UserProfile(
            id=self.profile.id,
            name=name.strip() if name is not None else self.profile.name,
            auth_method=self.profile.auth_method,
            created_at=self.profile.created_at,
            photo_uri=photo_uri if photo_uri is not None else self.profile.photo_uri,
            phone_number=self.profile.phone_number,
        )
        try:
            await self.repo.save_profile(updated)
        except StorageError as e:
            logger.error("Failed to update profile: %s", e)
            return self.profile

        self.profile = updated
        return updated

    async def add_workout_xp(self, exercise_count: int, set_count: int, rep_count: int) -> int:
        """Add one workout's counts to the running totals.

        Returns:
            XP gained, or 0 if the updated stats could not be saved
        """
        new_stats, xp_gained = apply_workout(self.stats, exercise_count, set_count, rep_count)
        try:
            await self.repo.save_stats(new_stats)
        except StorageError as e:
            logger.error("Failed to update stats: %s", e)
            return 0

        self.stats = new_stats
        logger.info("XP added, level %d, gained %d", new_stats.level, xp_gained)
        return xp_gained

    async def reset(self) -> bool:
        """Remove the profile and stats."""
        try:
            await self.repo.delete()
        except StorageError as e:
            logger.error("Failed to remove profile: %s", e)
            return False

        self.profile = None
        self.stats = stats_from_counters(0, 0, 0)
        return True
