"""Tests for macro gram targets."""

from macro_tracker.domain.nutrition import MacroTargets
from macro_tracker.domain.profile import MacroSplit
from macro_tracker.services.macros import calculate_targets


def test_targets_for_default_split() -> None:
    targets = calculate_targets(MacroSplit(), 2016)

    assert targets == MacroTargets(protein_g=151, carbs_g=202, fat_g=67)


def test_targets_none_without_calories() -> None:
    assert calculate_targets(MacroSplit(), None) is None


def test_targets_none_when_split_not_100() -> None:
    assert calculate_targets(MacroSplit("30", "40", "29"), 2016) is None
    assert calculate_targets(MacroSplit("30", "40", "31"), 2016) is None


def test_targets_none_when_split_unparsable() -> None:
    assert calculate_targets(MacroSplit("thirty", "40", "30"), 2016) is None
    assert calculate_targets(MacroSplit("30", "", "70"), 2016) is None


def test_targets_accept_fractional_split_summing_to_100() -> None:
    targets = calculate_targets(MacroSplit("25.5", "50", "24.5"), 2400)

    assert targets == MacroTargets(protein_g=153, carbs_g=300, fat_g=65)
