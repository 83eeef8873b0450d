"""
JSON serialization for lift-planner data models.

Handles conversion between dataclasses and JSON-compatible dicts.

Plates are stored as {"weight", "quantity"} and held in memory as
Plate(weight, count); the field names are remapped here and nowhere else.
"""

import re
from typing import Any

from ..core.errors import LiftPlannerError
from ..core.models import LifterProfile, Plate, PlannedExercise, PlannedSet, WorkoutPlan


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def validate_non_negative(value: int | float, name: str) -> int | float:
    """
    Validate that a value is non-negative.

    Args:
        value: Value to validate
        name: Name for error message

    Returns:
        The value if valid

    Raises:
        ValidationError: If value is negative
    """
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return value


def validate_positive(value: int | float, name: str) -> int | float:
    """
    Validate that a value is positive.

    Args:
        value: Value to validate
        name: Name for error message

    Returns:
        The value if valid

    Raises:
        ValidationError: If value is not positive
    """
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")
    return value


def _number(value: Any) -> float:
    """Storage numbers must be ints or floats (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Expected a number, got {value!r}")
    return float(value)


def _mapping(data: Any, name: str) -> dict[str, Any]:
    """Stored objects must be JSON objects."""
    if not isinstance(data, dict):
        raise ValidationError(f"{name} must be an object, got {data!r}")
    return data


def _list(data: Any, name: str) -> list[Any]:
    """Stored collections must be JSON arrays."""
    if not isinstance(data, list):
        raise ValidationError(f"{name} must be a list, got {data!r}")
    return data


# ---------------------------------------------------------------------------
# Plates
# ---------------------------------------------------------------------------

def plate_to_dict(plate: Plate) -> dict[str, Any]:
    """Convert Plate to its storage form {"weight", "quantity"}."""
    return {"weight": plate.weight, "quantity": plate.count}


def dict_to_plate(data: dict[str, Any]) -> Plate:
    """
    Convert a stored {"weight", "quantity"} dict to Plate.

    Raises:
        ValidationError: If fields are missing or invalid
    """
    data = _mapping(data, "Plate")
    try:
        weight = _number(data["weight"])
        quantity = data["quantity"]
    except KeyError as e:
        raise ValidationError(f"Plate missing required field: {e}") from e

    if isinstance(quantity, float) and quantity.is_integer():
        quantity = int(quantity)
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(f"Plate quantity must be an integer, got {quantity!r}")

    validate_positive(weight, "weight")
    validate_non_negative(quantity, "quantity")
    return Plate(weight=weight, count=quantity)


def parse_plate_spec(spec: str) -> Plate:
    """
    Parse a CLI plate spec "WEIGHTxCOUNT", e.g. "45x8" or "2.5x4".

    A bare weight ("45") means one pair (count 2).

    Raises:
        ValidationError: If the spec cannot be parsed
    """
    m = re.match(r"^\s*(\d+(?:\.\d+)?)\s*(?:[xX*]\s*(\d+))?\s*$", spec)
    if not m:
        raise ValidationError(
            f"Invalid plate spec: {spec!r}. Expected WEIGHTxCOUNT, e.g. 45x8"
        )
    weight = float(m.group(1))
    count = int(m.group(2)) if m.group(2) is not None else 2
    validate_positive(weight, "weight")
    return Plate(weight=weight, count=count)


# ---------------------------------------------------------------------------
# Workout plan
# ---------------------------------------------------------------------------

def planned_set_to_dict(planned_set: PlannedSet) -> dict[str, Any]:
    """Convert PlannedSet to JSON-compatible dict."""
    return {
        "reps": planned_set.reps,
        "percentage": planned_set.percentage,
        "weight": planned_set.weight,
    }


def dict_to_planned_set(data: dict[str, Any]) -> PlannedSet:
    """
    Convert dict to PlannedSet.

    Raises:
        ValidationError: If required fields are missing or invalid
    """
    data = _mapping(data, "Set")
    try:
        reps = data["reps"]
        percentage = _number(data["percentage"])
        weight = _number(data.get("weight", 0.0))
    except KeyError as e:
        raise ValidationError(f"Missing required field: {e}") from e

    if not isinstance(reps, (int, str)) or isinstance(reps, bool):
        raise ValidationError(f"Invalid reps value: {reps!r}")
    validate_non_negative(percentage, "percentage")
    validate_non_negative(weight, "weight")
    return PlannedSet(reps=reps, percentage=percentage, weight=weight)


def planned_exercise_to_dict(exercise: PlannedExercise) -> dict[str, Any]:
    """Convert PlannedExercise to JSON-compatible dict."""
    return {
        "name": exercise.name,
        "type": exercise.exercise_type,
        "oneRepMax": exercise.one_rep_max,
        "sets": [planned_set_to_dict(s) for s in exercise.sets],
    }


def dict_to_planned_exercise(data: dict[str, Any]) -> PlannedExercise:
    """
    Convert dict to PlannedExercise.

    Raises:
        ValidationError: If required fields are missing or invalid
    """
    data = _mapping(data, "Exercise")
    try:
        name = str(data["name"])
    except KeyError as e:
        raise ValidationError(f"Missing required field: {e}") from e

    one_rep_max = _number(data.get("oneRepMax", 0.0))
    validate_non_negative(one_rep_max, "oneRepMax")
    return PlannedExercise(
        name=name,
        exercise_type=str(data.get("type", "weighted")),
        one_rep_max=one_rep_max,
        sets=[dict_to_planned_set(s) for s in _list(data.get("sets", []), "sets")],
    )


def workout_plan_to_dict(plan: WorkoutPlan) -> dict[str, Any]:
    """Convert WorkoutPlan to {day: {"exercises": [...]}}."""
    return {
        day: {"exercises": [planned_exercise_to_dict(e) for e in exercises]}
        for day, exercises in plan.items()
    }


def dict_to_workout_plan(data: dict[str, Any]) -> WorkoutPlan:
    """Convert {day: {"exercises": [...]}} to WorkoutPlan."""
    plan: WorkoutPlan = {}
    for day, day_data in _mapping(data, "workoutPlan").items():
        if not isinstance(day_data, dict):
            raise ValidationError(f"Invalid workout day {day!r}")
        exercises = _list(day_data.get("exercises", []), f"{day} exercises")
        plan[day] = [dict_to_planned_exercise(e) for e in exercises]
    return plan


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

def lifter_profile_to_dict(profile: LifterProfile) -> dict[str, Any]:
    """
    Convert LifterProfile to JSON-compatible dict.

    Args:
        profile: LifterProfile to convert

    Returns:
        Dict representation
    """
    return {
        "oneRepMaxes": dict(profile.one_rep_maxes),
        "availablePlates": [plate_to_dict(p) for p in profile.plates],
        "barbellWeight": profile.barbell_weight,
        "programId": profile.program_id,
        "workoutPlan": workout_plan_to_dict(profile.workout_plan),
    }


def dict_to_lifter_profile(data: dict[str, Any]) -> LifterProfile:
    """
    Convert dict to LifterProfile.

    Args:
        data: Dict with profile data

    Returns:
        LifterProfile instance

    Raises:
        ValidationError: If data is invalid
    """
    maxes_raw = data.get("oneRepMaxes", {})
    if not isinstance(maxes_raw, dict):
        raise ValidationError("oneRepMaxes must be a mapping of exercise name to weight")

    one_rep_maxes: dict[str, float] = {}
    for name, value in maxes_raw.items():
        one_rep_maxes[str(name)] = float(validate_non_negative(_number(value), f"1RM for {name}"))

    barbell = _number(data.get("barbellWeight", 45.0))
    validate_non_negative(barbell, "barbellWeight")

    plates_raw = _list(data.get("availablePlates", []), "availablePlates")
    plan_raw = data.get("workoutPlan")

    program_id = data.get("programId")
    try:
        return LifterProfile(
            one_rep_maxes=one_rep_maxes,
            plates=[dict_to_plate(p) for p in plates_raw],
            barbell_weight=barbell,
            workout_plan=dict_to_workout_plan(plan_raw) if plan_raw is not None else {},
            program_id=str(program_id) if program_id is not None else None,
        )
    except LiftPlannerError as e:
        raise ValidationError(str(e)) from e
