"""Tests for utility functions."""

import pytest

from forgefit.errors import ValidationError
from forgefit.models.exercises import BUILTIN_EXERCISES, Exercise, ExerciseCategory, MuscleGroup
from forgefit.models.workout import WorkoutSet
from forgefit.utils.exercise_utils import (
    find_matching_exercise,
    normalize_exercise_name,
    parse_exercise_spec,
    parse_set_spec,
    search_exercises,
)


class TestNormalizeExerciseName:
    """Tests for normalize_exercise_name function."""

    def test_lowercase_and_strip(self):
        """Test basic normalization."""
        assert normalize_exercise_name("  Bench Press  ") == "bench press"

    def test_separators(self):
        assert normalize_exercise_name("pull-up") == "pull up"
        assert normalize_exercise_name("bench_press") == "bench press"

    def test_inline_abbreviation(self):
        """Test abbreviation expansion within name."""
        assert normalize_exercise_name("BB Curl") == "barbell curl"
        assert normalize_exercise_name("DB Row") == "dumbbell row"

    def test_whole_name_aliases(self):
        assert normalize_exercise_name("bench") == "bench press"
        assert normalize_exercise_name("OHP") == "overhead press"
        assert normalize_exercise_name("bench dip") == "bench dip"

    def test_extra_whitespace(self):
        """Test extra whitespace removal."""
        assert normalize_exercise_name("Bench   Press") == "bench press"


class TestFindMatchingExercise:
    """Tests for find_matching_exercise function."""

    def test_id_match(self):
        assert find_matching_exercise("low_bar_squat").name == "Low Bar Squat"

    def test_case_insensitive(self):
        """Test case insensitive matching."""
        result = find_matching_exercise("bench press")
        assert result is not None
        assert result.id == "bench_press"

    def test_alias_match(self):
        assert find_matching_exercise("ohp").id == "overhead_press"
        assert find_matching_exercise("Squat").id == "low_bar_squat"

    def test_abbreviation_match(self):
        assert find_matching_exercise("BB Curl").id == "barbell_curl"

    def test_fuzzy_match(self):
        """Test fuzzy matching for typos."""
        assert find_matching_exercise("Bench Pres").id == "bench_press"

    def test_no_match(self):
        """Test no match returns None."""
        assert find_matching_exercise("Underwater Basket Weaving") is None

    def test_custom_list(self):
        custom = Exercise("custom_1", "Sled Push", ExerciseCategory.EXTRAS, MuscleGroup.LEGS)
        assert find_matching_exercise("sled push", BUILTIN_EXERCISES + [custom]) == custom


class TestSearchExercises:
    """Tests for search_exercises."""

    def test_matches_name_muscle_and_equipment(self):
        results = search_exercises("lats", BUILTIN_EXERCISES)
        assert "lat_pulldown" in [e.id for e in results]
        assert "pull_up" in [e.id for e in results]

        results = search_exercises("cable", BUILTIN_EXERCISES)
        assert all("Cable" in (e.equipment or "") or "Cable" in e.name for e in results)

    def test_no_results(self):
        assert search_exercises("zzz", BUILTIN_EXERCISES) == []


class TestParsing:
    """Tests for set and exercise spec parsing."""

    @pytest.mark.parametrize(
        "spec,expected",
        [
            ("100x5", WorkoutSet(reps=5, weight=100)),
            ("62.5 x 8", WorkoutSet(reps=8, weight=62.5)),
            ("0X12", WorkoutSet(reps=12, weight=0)),
            ("40*10", WorkoutSet(reps=10, weight=40)),
        ],
    )
    def test_parse_set_spec(self, spec, expected):
        assert parse_set_spec(spec) == expected

    @pytest.mark.parametrize("spec", ["", "100", "x5", "-5x5", "100x", "heavy x 5"])
    def test_parse_set_spec_invalid(self, spec):
        with pytest.raises(ValidationError):
            parse_set_spec(spec)

    def test_parse_exercise_spec(self):
        name, sets = parse_exercise_spec("Bench Press: 100x5, 100x5,90x8")
        assert name == "Bench Press"
        assert sets == [
            WorkoutSet(reps=5, weight=100),
            WorkoutSet(reps=5, weight=100),
            WorkoutSet(reps=8, weight=90),
        ]

    @pytest.mark.parametrize("spec", ["Bench Press", ":100x5", "Bench Press:", "Bench:100"])
    def test_parse_exercise_spec_invalid(self, spec):
        with pytest.raises(ValidationError):
            parse_exercise_spec(spec)
