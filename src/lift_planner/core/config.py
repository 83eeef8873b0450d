"""
Configuration constants for the lift-planner core.

All adjustable parameters are centralized here.  The pure computation
modules take these as default arguments; the CLI may override some of
them from settings.yaml (see engine/config_loader.py).
"""

from typing import Final

# =============================================================================
# WEIGHT ROUNDING
# =============================================================================

WEIGHT_INCREMENT_LBS: Final[float] = 2.5  # Smallest practical load step
ROUNDING_NOISE_DIGITS: Final[int] = 9  # Quotient is rounded to this before half-up

# =============================================================================
# ONE-REP MAX
# =============================================================================

DEFAULT_ONE_REP_MAX: Final[float] = 100.0  # Used when a lift has no recorded max
ONE_REP_MAX_STEP: Final[float] = 2.5  # Post-workout review stepper

# =============================================================================
# REPS → %1RM TABLE
# =============================================================================

# Canonical training percentage per target rep count.  Contiguous for 1-12,
# sparse high-rep anchors above that.
REP_SCHEME_TABLE: Final[dict[int, float]] = {
    1: 1.0,
    2: 0.95,
    3: 0.9,
    4: 0.88,
    5: 0.86,
    6: 0.85,
    7: 0.83,
    8: 0.8,
    9: 0.78,
    10: 0.75,
    11: 0.72,
    12: 0.7,
    16: 0.65,
    20: 0.6,
    25: 0.55,
    30: 0.5,
}

REP_TABLE_CAP: Final[int] = 12  # Rep counts above this use the value for 12
DEFAULT_REP_PERCENTAGE: Final[float] = 0.75  # Fallback for unmatched rep counts

# =============================================================================
# FEEDBACK ADJUSTMENT
# =============================================================================

FEEDBACK_FACTORS: Final[dict[str, float]] = {
    "easy": 1.05,
    "just_right": 1.0,
    "hard": 0.95,
}

# =============================================================================
# PLATE LOADING
# =============================================================================

DEFAULT_BARBELL_WEIGHT: Final[float] = 45.0
LOADING_EPSILON: Final[float] = 0.001  # Absorbs float error in the greedy fit
EXACT_TOLERANCE: Final[float] = 0.1  # |target - achieved| within this is exact

# Standard lb plate set: (weight, total plates owned)
DEFAULT_PLATE_SET: Final[list[tuple[float, int]]] = [
    (45.0, 8),
    (35.0, 2),
    (25.0, 4),
    (10.0, 4),
    (5.0, 4),
    (2.5, 4),
]

# =============================================================================
# WARM-UP LADDER
# =============================================================================

WARMUP_BAR_REPS: Final[int] = 10
# (fraction of working weight, reps, label)
WARMUP_STEPS: Final[list[tuple[float, int, str]]] = [
    (0.5, 5, "50%"),
    (0.7, 3, "70%"),
    (0.85, 1, "85%"),
]
WARMUP_HEAVY_STEP_MIN_WEIGHT: Final[float] = 100.0  # 85% single only from here up
WARMUP_SUGGEST_MIN_WEIGHT: Final[float] = 65.0
WARMUP_EXERCISE_TYPES: Final[tuple[str, ...]] = ("barbell", "weighted")
