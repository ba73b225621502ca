"""Tests for BMR and calorie target calculation."""

from macro_tracker.domain.profile import UserProfile
from macro_tracker.services.calories import (
    calculate_bmr,
    calculate_calories,
    calories_for_profile,
)


def test_calculate_bmr_uses_mifflin_st_jeor() -> None:
    assert calculate_bmr(70, 175, 25) == 1673.75


def test_calculate_calories_applies_activity_factor() -> None:
    # bmr 1673.75 * 1.2 = 2008.5, halves round up
    assert calculate_calories("70", "175", "25", "1.2") == 2009
    assert calculate_calories("70", "175", "25", "1.55") == 2594


def test_calculate_calories_returns_none_for_bad_input() -> None:
    assert calculate_calories("", "175", "25", "1.2") is None
    assert calculate_calories("70", "tall", "25", "1.2") is None
    assert calculate_calories("70", "175", "old", "1.2") is None


def test_calories_for_profile_rounds_half_up() -> None:
    profile = UserProfile(weight="80", height="180", age="30", activity="1.375")

    # bmr 1780 * 1.375 = 2447.5
    assert calories_for_profile(profile) == 2448
