"""Tests for the profile, catalog and settings services."""

from datetime import datetime, timezone

import pytest

from forgefit.db.repositories import (
    AppSettingsRepository,
    CustomExerciseRepository,
    UserProfileRepository,
)
from forgefit.errors import ValidationError
from forgefit.models.exercises import ExerciseCategory, MuscleGroup
from forgefit.models.settings import Language, ThemeAccent
from forgefit.models.user import AuthMethod, UserStats
from forgefit.services.app_settings import AppSettingsService
from forgefit.services.exercises import ExerciseCatalog
from forgefit.services.user import UserService

NOW = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


class TestUserService:
    """Tests for UserService."""

    @pytest.fixture
    def service(self, store):
        return UserService(UserProfileRepository(store))

    async def test_guest_profile(self, service):
        profile = await service.create_profile(now=NOW)

        assert profile.name == "Guest"
        assert profile.auth_method == AuthMethod.GUEST
        assert profile.id == f"guest_{int(NOW.timestamp() * 1000)}"
        assert service.stats == UserStats()

    async def test_phone_profile_needs_number(self, service):
        with pytest.raises(ValidationError):
            await service.create_profile(AuthMethod.PHONE)

        profile = await service.create_profile(AuthMethod.PHONE, phone_number="+34600000000")
        assert profile.name == "User"
        assert profile.phone_number == "+34600000000"

    async def test_add_workout_xp(self, service):
        await service.create_profile(name="Ana", now=NOW)

        gained = await service.add_workout_xp(1, 5, 25)

        assert gained == 125
        assert service.stats.current_xp == 125
        assert service.stats.level == 0

    async def test_load_recomputes_level(self, service, store):
        """Stats written with stale derived fields are corrected on load."""
        await store.set(
            "user_stats",
            {"totalExercises": 10, "totalSets": 0, "totalReps": 0, "level": 9, "currentXp": 1},
        )
        await service.load()

        assert service.stats.level == 1
        assert service.stats.current_xp == 0
        assert service.stats.xp_to_next_level == 600

    async def test_xp_not_counted_when_save_fails(self, failing_store):
        service = UserService(UserProfileRepository(failing_store))

        assert await service.add_workout_xp(2, 6, 30) == 0
        assert service.stats.total_sets == 0

    async def test_update_profile(self, service):
        await service.create_profile(name="Ana", now=NOW)

        updated = await service.update_profile(name="  Ana Maria ")
        assert updated.name == "Ana Maria"

        with pytest.raises(ValidationError):
            await service.update_profile(name="   ")

    async def test_reset(self, service, store):
        await service.create_profile(now=NOW)
        await service.add_workout_xp(1, 1, 1)

        assert await service.reset() is True
        assert service.profile is None
        assert service.stats.total_sets == 0
        assert await store.get("user_profile") is None


class TestExerciseCatalog:
    """Tests for ExerciseCatalog."""

    @pytest.fixture
    def catalog(self, store):
        return ExerciseCatalog(CustomExerciseRepository(store))

    async def test_add_custom_persists(self, catalog, store):
        exercise = await catalog.add_custom(
            "Sled Push", ExerciseCategory.EXTRAS, MuscleGroup.LEGS, now=NOW
        )

        assert exercise.id == f"custom_{int(NOW.timestamp() * 1000)}"
        assert exercise.primary_muscle == "legs"
        assert catalog.get(exercise.id) == exercise

        reloaded = ExerciseCatalog(CustomExerciseRepository(store))
        await reloaded.load()
        assert reloaded.find("sled push") == exercise

    async def test_blank_name_rejected(self, catalog):
        with pytest.raises(ValidationError):
            await catalog.add_custom("   ")

    async def test_builtin_cannot_be_deleted(self, catalog):
        assert await catalog.delete_custom("bench_press") is False
        assert catalog.get("bench_press") is not None

    async def test_delete_custom(self, catalog):
        exercise = await catalog.add_custom("Sled Push", now=NOW)
        assert await catalog.delete_custom(exercise.id) is True
        assert catalog.get(exercise.id) is None

    async def test_same_millisecond_ids_are_distinct(self, catalog):
        first = await catalog.add_custom("Sled Push", now=NOW)
        second = await catalog.add_custom("Sled Pull", now=NOW)

        assert first.id != second.id
        assert await catalog.delete_custom(first.id) is True
        assert catalog.get(second.id) == second

    def test_search_by_category(self, catalog):
        results = catalog.search(category=ExerciseCategory.CALISTHENICS)
        assert results
        assert all(e.category == ExerciseCategory.CALISTHENICS for e in results)

        assert [e.id for e in catalog.search("dip", ExerciseCategory.CALISTHENICS)] == [
            "parallel_bar_dip"
        ]


class TestAppSettingsService:
    """Tests for AppSettingsService."""

    @pytest.fixture
    def service(self, store):
        return AppSettingsService(AppSettingsRepository(store))

    async def test_update_persists(self, service, store):
        updated = await service.update(language="en", theme_accent=ThemeAccent.NAVY)

        assert updated.language == Language.ENGLISH
        assert updated.theme_accent == ThemeAccent.NAVY

        reloaded = AppSettingsService(AppSettingsRepository(store))
        assert (await reloaded.load()) == updated

    async def test_invalid_value_rejected(self, service):
        with pytest.raises(ValidationError):
            await service.update(xp_bar_theme="sparkly")
        assert service.settings.xp_bar_theme.value == "gradient"

    async def test_unknown_setting_rejected(self, service):
        with pytest.raises(ValidationError):
            await service.update(volume_units="lb")

    async def test_fill_color(self, service):
        updated = await service.update(xp_bar_fill_color="#00FF00")
        assert updated.xp_bar_fill_color == "#00FF00"

        with pytest.raises(ValidationError):
            await service.update(xp_bar_fill_color="")
