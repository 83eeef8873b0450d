"""
Error taxonomy for the computation core.

Both errors subclass ValueError so callers that only care about "bad
arguments" can catch that.  An unreachable exact plate target is not an
error: it is reported as ``PlateLoadout.exact == False``.
"""

import math


class LiftPlannerError(ValueError):
    """Base class for errors raised by the computation core."""

    pass


class InvalidInput(LiftPlannerError):
    """Raised for non-numeric, negative or non-finite arguments."""

    pass


class InvalidTarget(LiftPlannerError):
    """Raised when the target weight is below the weight of the bar alone."""

    def __init__(self, target_weight: float, barbell_weight: float):
        self.target_weight = target_weight
        self.barbell_weight = barbell_weight
        super().__init__(
            f"Target weight ({target_weight:g} lbs) cannot be less than "
            f"barbell weight ({barbell_weight:g} lbs)."
        )


def validate_number(
    value: object,
    name: str,
    *,
    allow_negative: bool = False,
    allow_zero: bool = True,
) -> float:
    """
    Coerce a numeric argument to float, rejecting unusable values.

    Args:
        value: Argument to check
        name: Argument name for the error message
        allow_negative: Accept values below zero
        allow_zero: Accept exactly zero

    Returns:
        The value as a float

    Raises:
        InvalidInput: If value is not a real number, is NaN/inf, or falls
            outside the allowed sign range
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{name} must be a number, got {value!r}")
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise InvalidInput(f"{name} must be finite, got {value!r}")
    if number < 0 and not allow_negative:
        raise InvalidInput(f"{name} must be non-negative, got {value!r}")
    if number == 0 and not allow_zero:
        raise InvalidInput(f"{name} must be positive, got {value!r}")
    return number
