"""
Formula-focused unit tests for the weight resolver and rep table.

Values are hand-computed from

    weight = round_half_up(1RM × pct / increment) × increment

so the tests double as a reference for the rounding rules.
"""

import math

import pytest

from lift_planner.core.config import DEFAULT_REP_PERCENTAGE, REP_SCHEME_TABLE
from lift_planner.core.errors import InvalidInput, LiftPlannerError
from lift_planner.core.weights import (
    adjust_for_feedback,
    nudge_one_rep_max,
    percent_to_fraction,
    percentage_for_reps,
    resolve_weight,
    round_to_increment,
)


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

class TestRoundToIncrement:
    """round_to_increment: nearest multiple, halves round up."""

    def test_exact_multiple_unchanged(self):
        assert round_to_increment(150.0) == 150.0

    def test_rounds_down_below_half(self):
        # 121 / 2.5 = 48.4 → 48
        assert round_to_increment(121.0) == 120.0

    def test_half_rounds_up(self):
        # 101.25 / 2.5 = 40.5 → 41
        assert round_to_increment(101.25) == 102.5

    def test_custom_increment(self):
        # 144 / 5 = 28.8 → 29
        assert round_to_increment(144.0, 5.0) == 145.0

    def test_zero_increment_rejected(self):
        with pytest.raises(InvalidInput):
            round_to_increment(100.0, 0)


# ---------------------------------------------------------------------------
# Weight resolver
# ---------------------------------------------------------------------------

class TestResolveWeight:
    """resolve_weight(one_rep_max, percentage, increment)."""

    def test_clean_percentage(self):
        assert resolve_weight(200, 0.75) == 150.0

    def test_rounds_to_nearest_increment(self):
        # 185 × 0.65 = 120.25 → 48.1 steps → 120
        assert resolve_weight(185, 0.65) == 120.0

    def test_float_noise_half_still_rounds_up(self):
        # 225 × 0.85 is 191.24999... in floating point; still a half step
        assert resolve_weight(225, 0.85) == 192.5

    def test_zero_max_resolves_to_zero(self):
        assert resolve_weight(0, 0.8) == 0.0

    def test_zero_percentage(self):
        assert resolve_weight(200, 0.0) == 0.0

    def test_overload_percentage_not_clamped(self):
        assert resolve_weight(100, 1.1) == 110.0

    def test_custom_increment(self):
        assert resolve_weight(200, 0.72, 5.0) == 145.0

    @pytest.mark.parametrize("one_rep_max", [95, 137.5, 200, 315, 405])
    def test_result_is_multiple_of_increment(self, one_rep_max):
        for pct in (0.55, 0.65, 0.72, 0.85, 0.93):
            result = resolve_weight(one_rep_max, pct)
            steps = result / 2.5
            assert math.isclose(steps, round(steps))

    def test_result_within_half_increment_of_exact(self):
        exact = 187.5 * 0.77
        assert abs(resolve_weight(187.5, 0.77) - exact) <= 1.25

    def test_negative_max_rejected(self):
        with pytest.raises(InvalidInput):
            resolve_weight(-100, 0.5)

    def test_negative_percentage_rejected(self):
        with pytest.raises(InvalidInput):
            resolve_weight(100, -0.5)

    def test_nan_rejected(self):
        with pytest.raises(InvalidInput):
            resolve_weight(float("nan"), 0.5)

    def test_infinite_rejected(self):
        with pytest.raises(InvalidInput):
            resolve_weight(100, float("inf"))

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidInput):
            resolve_weight("100", 0.5)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            resolve_weight(-1, 0.5)
        assert issubclass(InvalidInput, LiftPlannerError)


# ---------------------------------------------------------------------------
# Rep table
# ---------------------------------------------------------------------------

class TestPercentageForReps:
    """percentage_for_reps: canonical %1RM per rep target."""

    def test_table_values(self):
        assert percentage_for_reps(1) == 1.0
        assert percentage_for_reps(5) == 0.86
        assert percentage_for_reps(8) == 0.8
        assert percentage_for_reps(12) == 0.7

    def test_every_low_rep_count_has_entry(self):
        for reps in range(1, 13):
            assert percentage_for_reps(reps) == REP_SCHEME_TABLE[reps]

    def test_above_twelve_uses_twelve_rep_value(self):
        assert percentage_for_reps(13) == 0.7
        assert percentage_for_reps(20) == 0.7
        assert percentage_for_reps(999) == 0.7

    def test_zero_falls_back_to_default(self):
        assert percentage_for_reps(0) == DEFAULT_REP_PERCENTAGE == 0.75

    def test_negative_falls_back_to_default(self):
        assert percentage_for_reps(-3) == 0.75

    def test_amrap_string_uses_numeric_part(self):
        assert percentage_for_reps("5+") == 0.86
        assert percentage_for_reps("8") == 0.8

    def test_missing_reps_fall_back_to_default(self):
        assert percentage_for_reps(None) == 0.75
        assert percentage_for_reps("") == 0.75

    def test_percent_to_fraction(self):
        assert percent_to_fraction(85) == 0.85
        with pytest.raises(InvalidInput):
            percent_to_fraction(-5)


# ---------------------------------------------------------------------------
# Feedback and 1RM steps
# ---------------------------------------------------------------------------

class TestFeedback:
    """adjust_for_feedback: easy +5 %, hard −5 %, re-rounded."""

    def test_easy_raises_five_percent(self):
        assert adjust_for_feedback(200, "easy") == 210.0

    def test_hard_lowers_five_percent(self):
        assert adjust_for_feedback(200, "hard") == 190.0

    def test_just_right_unchanged(self):
        assert adjust_for_feedback(135, "just_right") == 135.0

    def test_result_rerounded(self):
        # 135 × 1.05 = 141.75 → 56.7 steps → 142.5
        assert adjust_for_feedback(135, "easy") == 142.5

    def test_unknown_feedback_rejected(self):
        with pytest.raises(InvalidInput, match="Unknown feedback"):
            adjust_for_feedback(100, "medium")


class TestNudgeOneRepMax:
    """nudge_one_rep_max: ±step, never below zero."""

    def test_step_up(self):
        assert nudge_one_rep_max(100, 2.5) == 102.5

    def test_step_down(self):
        assert nudge_one_rep_max(100, -2.5) == 97.5

    def test_clamped_at_zero(self):
        assert nudge_one_rep_max(1.0, -2.5) == 0.0
