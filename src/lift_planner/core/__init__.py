"""
Pure computation core: weight resolution, plate loading, warm-ups and
program templates.  Nothing in this package performs I/O.
"""

from .errors import InvalidInput, InvalidTarget, LiftPlannerError
from .models import Plate
from .plates import PlateLoadout, compute_plate_loadout
from .weights import percentage_for_reps, resolve_weight, round_to_increment

__all__ = [
    "InvalidInput",
    "InvalidTarget",
    "LiftPlannerError",
    "Plate",
    "PlateLoadout",
    "compute_plate_loadout",
    "percentage_for_reps",
    "resolve_weight",
    "round_to_increment",
]
