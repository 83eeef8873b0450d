"""
Weight resolver: one-rep max × percentage → working weight.

Every load the application shows is produced here, rounded to the nearest
practical increment (2.5 lb by default):

  weight = round_half_up(1RM × percentage / increment) × increment

Percentages are fractions (0.75 = 75 %).  Values above 1.0 are valid
"overload" prescriptions and are computed literally.  A 1RM of zero
(bodyweight or unset exercises) resolves to zero loaded weight.

Companion lookup: percentage_for_reps() maps a target rep count to a
canonical %1RM via REP_SCHEME_TABLE.
"""

import math

from .config import (
    DEFAULT_REP_PERCENTAGE,
    FEEDBACK_FACTORS,
    REP_SCHEME_TABLE,
    REP_TABLE_CAP,
    ROUNDING_NOISE_DIGITS,
    WEIGHT_INCREMENT_LBS,
)
from .errors import InvalidInput, validate_number
from .reps import RepValue, numeric_reps


def round_to_increment(value: float, increment: float = WEIGHT_INCREMENT_LBS) -> float:
    """
    Round a load to the nearest multiple of increment, halves rounding up.

    The quotient is first rounded to ROUNDING_NOISE_DIGITS places so that a
    value such as 101.25 / 2.5 = 40.49999999 still counts as an exact half.
    This differs from rounding the raw float quotient: 225 × 0.85 is stored
    as 191.24999999999997, which plain rounding takes down to 190 but this
    function takes up to 192.5.

    Args:
        value: Load in lbs
        increment: Rounding step (> 0)

    Returns:
        Rounded load (a multiple of increment)

    Raises:
        InvalidInput: If value is not finite or increment is not positive
    """
    value = validate_number(value, "value", allow_negative=True)
    increment = validate_number(increment, "increment", allow_zero=False)

    quotient = round(value / increment, ROUNDING_NOISE_DIGITS)
    steps = math.floor(quotient + 0.5)
    # Trim float tails such as 122.50000000000001
    return round(steps * increment, ROUNDING_NOISE_DIGITS) + 0.0


def resolve_weight(
    one_rep_max: float,
    percentage: float,
    increment: float = WEIGHT_INCREMENT_LBS,
) -> float:
    """
    Compute the working weight for a set.

    Args:
        one_rep_max: Lifter's 1RM in lbs (≥ 0)
        percentage: Fraction of 1RM (≥ 0; > 1 allowed, not clamped)
        increment: Rounding step in lbs

    Returns:
        Working weight, a multiple of increment; 0.0 when one_rep_max is 0

    Raises:
        InvalidInput: Negative/non-finite one_rep_max or percentage, or a
            non-positive increment
    """
    one_rep_max = validate_number(one_rep_max, "one_rep_max")
    percentage = validate_number(percentage, "percentage")
    increment = validate_number(increment, "increment", allow_zero=False)

    if one_rep_max == 0:
        return 0.0
    return round_to_increment(one_rep_max * percentage, increment)


def percentage_for_reps(reps: RepValue) -> float:
    """
    Look up the canonical training percentage for a target rep count.

    Rep counts above 12 all use the 12-rep value, so the sparse high-rep
    anchors (16, 20, 25, 30) in REP_SCHEME_TABLE are never returned.  A
    count of 12 or fewer with no table entry (0 or negative) falls back to
    DEFAULT_REP_PERCENTAGE.

    Args:
        reps: Target reps; AMRAP strings such as "5+" are accepted

    Returns:
        Percentage of 1RM as a fraction
    """
    count = numeric_reps(reps)
    if count > REP_TABLE_CAP:
        return REP_SCHEME_TABLE[REP_TABLE_CAP]
    return REP_SCHEME_TABLE.get(count, DEFAULT_REP_PERCENTAGE)


def percent_to_fraction(percent: float) -> float:
    """Convert a 0-100 template/editor percentage to a 0-1 fraction."""
    return validate_number(percent, "percent") / 100.0


def adjust_for_feedback(
    weight: float,
    feedback: str,
    increment: float = WEIGHT_INCREMENT_LBS,
) -> float:
    """
    Apply post-set feedback to a load.

    "easy" → +5 %, "hard" → −5 %, "just_right" → unchanged; the result is
    re-rounded to the increment.

    Raises:
        InvalidInput: Unknown feedback value or invalid weight
    """
    if feedback not in FEEDBACK_FACTORS:
        valid = ", ".join(FEEDBACK_FACTORS)
        raise InvalidInput(f"Unknown feedback '{feedback}'. Valid values: {valid}")
    weight = validate_number(weight, "weight")
    return round_to_increment(weight * FEEDBACK_FACTORS[feedback], increment)


def nudge_one_rep_max(one_rep_max: float, delta: float) -> float:
    """Step a 1RM up or down (review screen), never below zero."""
    one_rep_max = validate_number(one_rep_max, "one_rep_max")
    delta = validate_number(delta, "delta", allow_negative=True)
    return max(0.0, one_rep_max + delta)
