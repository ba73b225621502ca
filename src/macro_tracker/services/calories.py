"""Basal metabolic rate and daily calorie target."""

from macro_tracker.domain.profile import UserProfile
from macro_tracker.services.numbers import parse_decimal, round_half_up


def calculate_bmr(weight_kg: float, height_cm: float, age_years: float) -> float:
    """Mifflin-St Jeor BMR using the male coefficients."""
    return 10 * weight_kg + 6.25 * height_cm - 5 * age_years + 5


def calculate_calories(
    weight: str, height: str, age: str, activity: str
) -> int | None:
    """Return the rounded daily calorie target, or None on unparsable input."""
    weight_kg = parse_decimal(weight)
    height_cm = parse_decimal(height)
    age_years = parse_decimal(age)
    if weight_kg is None or height_cm is None or age_years is None:
        return None
    factor = parse_decimal(activity)
    if factor is None:
        return None
    bmr = calculate_bmr(weight_kg, height_cm, age_years)
    return round_half_up(bmr * factor)


def calories_for_profile(profile: UserProfile) -> int | None:
    """Return the calorie target for a profile, or None on unparsable input."""
    return calculate_calories(
        profile.weight, profile.height, profile.age, profile.activity
    )
