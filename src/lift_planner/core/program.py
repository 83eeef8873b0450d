"""
Percentage-based programs → concrete workout plans.

Templates prescribe, per lift and day, a list of rep counts and matching
percentages (0-100).  Applying a template resolves every set against the
lifter's current one-rep maxes.  When a max changes, recalculate_plan()
re-derives every set weight for that exercise; set weights are never
edited independently.
"""

from .config import DEFAULT_ONE_REP_MAX, WEIGHT_INCREMENT_LBS
from .models import (
    LiftScheme,
    PlannedExercise,
    PlannedSet,
    ProgramTemplate,
    TemplateCatalog,
    WorkoutPlan,
    lookup_one_rep_max,
)
from .reps import RepValue
from .weights import percent_to_fraction, resolve_weight


def build_sets(
    one_rep_max: float,
    reps: list[RepValue] | tuple[RepValue, ...],
    percentages: list[float] | tuple[float, ...],
    increment: float = WEIGHT_INCREMENT_LBS,
) -> list[PlannedSet]:
    """
    Resolve a rep/percentage scheme into planned sets.

    A missing or zero percentage at position i falls back to the first
    percentage of the scheme.

    Args:
        one_rep_max: Lifter's 1RM in lbs
        reps: Rep counts per set (AMRAP strings allowed)
        percentages: Percent of 1RM per set, 0-100
        increment: Rounding step in lbs

    Returns:
        One PlannedSet per entry in reps
    """
    sets: list[PlannedSet] = []
    for i, rep in enumerate(reps):
        percent = percentages[i] if i < len(percentages) and percentages[i] else None
        if percent is None:
            percent = percentages[0] if percentages else 0.0
        fraction = percent_to_fraction(percent)
        sets.append(
            PlannedSet(
                reps=rep,
                percentage=fraction,
                weight=resolve_weight(one_rep_max, fraction, increment),
            )
        )
    return sets


def build_exercise(
    name: str,
    scheme: LiftScheme,
    one_rep_max: float,
    exercise_type: str = "weighted",
    increment: float = WEIGHT_INCREMENT_LBS,
) -> PlannedExercise:
    """Build one planned exercise from a template scheme."""
    return PlannedExercise(
        name=name,
        exercise_type=exercise_type,
        one_rep_max=one_rep_max,
        sets=build_sets(one_rep_max, scheme.reps, scheme.percentages, increment),
    )


def apply_template(
    program: ProgramTemplate,
    catalog: TemplateCatalog,
    one_rep_maxes: dict[str, float],
    default_max: float = DEFAULT_ONE_REP_MAX,
    increment: float = WEIGHT_INCREMENT_LBS,
) -> WorkoutPlan:
    """
    Build a workout plan from a program template.

    Lifts are matched to one_rep_maxes by display name (case-insensitive);
    a lift with no recorded max uses default_max.

    Args:
        program: Template to apply
        catalog: Catalog holding lift names and types
        one_rep_maxes: Current 1RMs keyed by exercise name
        default_max: 1RM assumed for unknown lifts
        increment: Rounding step in lbs

    Returns:
        New WorkoutPlan keyed by the template's day keys
    """
    plan: WorkoutPlan = {}
    for day_key, lifts in program.days.items():
        exercises: list[PlannedExercise] = []
        for lift_id, scheme in lifts.items():
            info = catalog.lifts.get(lift_id)
            name = info.name if info else lift_id
            lift_type = info.lift_type if info else "weighted"
            known = lookup_one_rep_max(one_rep_maxes, name)
            one_rep_max = known if known is not None else default_max
            exercises.append(build_exercise(name, scheme, one_rep_max, lift_type, increment))
        plan[day_key] = exercises
    return plan


def recalculate_exercise(
    exercise: PlannedExercise,
    one_rep_max: float,
    increment: float = WEIGHT_INCREMENT_LBS,
) -> PlannedExercise:
    """Return a copy of exercise with every set weight re-derived from one_rep_max."""
    return PlannedExercise(
        name=exercise.name,
        exercise_type=exercise.exercise_type,
        one_rep_max=one_rep_max,
        sets=[
            PlannedSet(
                reps=s.reps,
                percentage=s.percentage,
                weight=resolve_weight(one_rep_max, s.percentage, increment),
            )
            for s in exercise.sets
        ],
    )


def recalculate_plan(
    plan: WorkoutPlan,
    one_rep_maxes: dict[str, float],
    increment: float = WEIGHT_INCREMENT_LBS,
) -> WorkoutPlan:
    """
    Re-derive set weights across a whole plan from current one-rep maxes.

    Exercises without a known max are carried over unchanged.  The input
    plan is not modified.
    """
    updated: WorkoutPlan = {}
    for day_key, exercises in plan.items():
        day: list[PlannedExercise] = []
        for exercise in exercises:
            one_rep_max = lookup_one_rep_max(one_rep_maxes, exercise.name)
            if one_rep_max is None:
                day.append(
                    PlannedExercise(
                        name=exercise.name,
                        exercise_type=exercise.exercise_type,
                        one_rep_max=exercise.one_rep_max,
                        sets=[
                            PlannedSet(reps=s.reps, percentage=s.percentage, weight=s.weight)
                            for s in exercise.sets
                        ],
                    )
                )
            else:
                day.append(recalculate_exercise(exercise, one_rep_max, increment))
        updated[day_key] = day
    return updated


def validate_catalog(catalog: TemplateCatalog) -> list[str]:
    """
    Check that every lift referenced by a program exists in catalog.lifts.

    Returns:
        Error messages; empty when the catalog is consistent
    """
    errors: list[str] = []
    for program in catalog.programs.values():
        for day_key, lifts in program.days.items():
            for lift_id in lifts:
                if lift_id not in catalog.lifts:
                    errors.append(
                        f"Program '{program.name}' Day '{day_key}' "
                        f"references unknown lift ID: '{lift_id}'"
                    )
    return errors
