"""
Warm-up ladder generation.

Progression before the first working set:
  bar only × 10 → 50 % × 5 → 70 % × 3 → 85 % × 1 (working weight ≥ 100 lb)

Each step is rounded with round_to_increment, floored at the bar weight,
and only kept if it is heavier than the step before it.
"""

from dataclasses import dataclass

from .config import (
    DEFAULT_BARBELL_WEIGHT,
    WARMUP_BAR_REPS,
    WARMUP_EXERCISE_TYPES,
    WARMUP_HEAVY_STEP_MIN_WEIGHT,
    WARMUP_STEPS,
    WARMUP_SUGGEST_MIN_WEIGHT,
)
from .errors import validate_number
from .weights import round_to_increment


@dataclass(frozen=True)
class WarmupSet:
    """One warm-up set."""

    reps: int
    weight: float
    percentage: float  # Fraction of working weight; 0 for the bar-only set
    label: str = ""


def generate_warmup_sets(
    working_weight: float,
    bar_weight: float = DEFAULT_BARBELL_WEIGHT,
) -> list[WarmupSet]:
    """
    Build warm-up sets for a working weight.

    Args:
        working_weight: Weight of the first working set in lbs
        bar_weight: Empty bar weight in lbs

    Returns:
        Warm-up sets, lightest first.  A working weight at or below the bar
        gets a single bar-only set.
    """
    working_weight = validate_number(working_weight, "working_weight")
    bar_weight = validate_number(bar_weight, "bar_weight")

    if working_weight <= bar_weight:
        return [WarmupSet(reps=WARMUP_BAR_REPS, weight=bar_weight, percentage=0.0)]

    sets = [
        WarmupSet(
            reps=WARMUP_BAR_REPS,
            weight=bar_weight,
            percentage=0.0,
            label="Bar Only",
        )
    ]

    previous = bar_weight
    for fraction, reps, label in WARMUP_STEPS:
        weight = max(bar_weight, round_to_increment(working_weight * fraction))
        heavy_step = fraction == WARMUP_STEPS[-1][0]
        if heavy_step and working_weight < WARMUP_HEAVY_STEP_MIN_WEIGHT:
            break
        if weight > previous:
            sets.append(WarmupSet(reps=reps, weight=weight, percentage=fraction, label=label))
        # Compare against the computed step even when it was skipped
        previous = weight

    return sets


def should_suggest_warmup(exercise_type: str | None, first_set_weight: float | None) -> bool:
    """Return True for barbell/weighted exercises whose first set is ≥ 65 lb."""
    if not exercise_type or not first_set_weight:
        return False
    return (
        exercise_type.lower() in WARMUP_EXERCISE_TYPES
        and first_set_weight >= WARMUP_SUGGEST_MIN_WEIGHT
    )
