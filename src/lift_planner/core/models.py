"""
Data models for lift-planner.

Dataclasses for plates, planned sets, program templates and the lifter
profile snapshot the core reads from.  Set weights are always derived from
a one-rep max via core.weights.resolve_weight; they are never a source of
truth on their own.
"""

from dataclasses import dataclass, field

from .errors import InvalidInput, validate_number
from .reps import RepValue, format_reps, parse_reps


@dataclass(frozen=True)
class Plate:
    """
    One plate denomination in the inventory.

    count is the total number of physical plates owned, both sides combined.
    """

    weight: float
    count: int

    def __post_init__(self) -> None:
        """Validate plate data."""
        validate_number(self.weight, "plate weight", allow_zero=False)
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise InvalidInput(f"plate count must be an integer, got {self.count!r}")
        if self.count < 0:
            raise InvalidInput(f"plate count must be non-negative, got {self.count}")

    @property
    def usable_per_side(self) -> int:
        """Plates of this weight that can be loaded on one side."""
        return self.count // 2


@dataclass
class PlannedSet:
    """A prescribed set: reps at a percentage of 1RM, with the derived weight."""

    reps: RepValue  # int, or "5+" for AMRAP
    percentage: float  # Fraction of 1RM
    weight: float  # Derived: resolve_weight(one_rep_max, percentage)

    @property
    def is_amrap(self) -> bool:
        return parse_reps(self.reps).is_amrap

    @property
    def reps_label(self) -> str:
        parsed = parse_reps(self.reps)
        return format_reps(parsed.value, parsed.is_amrap)


@dataclass
class PlannedExercise:
    """One exercise inside a workout day."""

    name: str
    exercise_type: str = "weighted"
    one_rep_max: float = 0.0
    sets: list[PlannedSet] = field(default_factory=list)


# Day key (e.g. "day_1", "week_1_day_2") → exercises for that day
WorkoutPlan = dict[str, list[PlannedExercise]]


@dataclass(frozen=True)
class LiftInfo:
    """A lift referenced by program templates."""

    lift_id: str
    name: str
    lift_type: str = "barbell"


@dataclass(frozen=True)
class LiftScheme:
    """
    Rep/percentage scheme for one lift on one template day.

    percentages are 0-100 as written in templates.
    """

    reps: tuple[RepValue, ...]
    percentages: tuple[float, ...]


@dataclass(frozen=True)
class ProgramTemplate:
    """A named percentage-based program."""

    program_id: str
    name: str
    description: str = ""
    structure: str = ""
    # Day key → {lift_id: LiftScheme}
    days: dict[str, dict[str, LiftScheme]] = field(default_factory=dict)


@dataclass(frozen=True)
class TemplateCatalog:
    """Lifts plus the programs that reference them."""

    lifts: dict[str, LiftInfo]
    programs: dict[str, ProgramTemplate]

    def get_program(self, program_id: str) -> ProgramTemplate:
        """
        Return a program by id.

        Raises:
            KeyError: If program_id is not in the catalog
        """
        if program_id not in self.programs:
            valid = ", ".join(self.programs) or "(none)"
            raise KeyError(f"Unknown program '{program_id}'. Valid IDs: {valid}")
        return self.programs[program_id]


@dataclass
class LifterProfile:
    """
    Snapshot of a lifter's stored data.

    one_rep_maxes is keyed by exercise display name.  plates holds the
    in-memory Plate(weight, count) form; storage uses {weight, quantity}.
    """

    one_rep_maxes: dict[str, float] = field(default_factory=dict)
    plates: list[Plate] = field(default_factory=list)
    barbell_weight: float = 45.0
    workout_plan: WorkoutPlan = field(default_factory=dict)
    program_id: str | None = None

    def __post_init__(self) -> None:
        """Validate profile data."""
        validate_number(self.barbell_weight, "barbell_weight")
        for name, value in self.one_rep_maxes.items():
            validate_number(value, f"one-rep max for {name}")

    def get_one_rep_max(self, exercise_name: str) -> float | None:
        """Case-insensitive 1RM lookup; None when the exercise is unknown."""
        return lookup_one_rep_max(self.one_rep_maxes, exercise_name)


def lookup_one_rep_max(one_rep_maxes: dict[str, float], exercise_name: str) -> float | None:
    """Find a 1RM by exercise name, exact match first, then case-insensitive."""
    if exercise_name in one_rep_maxes:
        return one_rep_maxes[exercise_name]
    wanted = exercise_name.strip().lower()
    for name, value in one_rep_maxes.items():
        if name.strip().lower() == wanted:
            return value
    return None
