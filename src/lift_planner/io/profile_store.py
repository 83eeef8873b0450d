"""
JSON-based profile storage.

Holds the lifter's one-rep maxes, plate inventory, bar weight and the
current workout plan in a single profile.json document.  The core reads
snapshots from here and the CLI writes recalculated results back.
"""

import json
import logging
from pathlib import Path

from ..core.models import LifterProfile, Plate, WorkoutPlan
from .serializers import (
    ValidationError,
    dict_to_lifter_profile,
    lifter_profile_to_dict,
)

logger = logging.getLogger(__name__)


class ProfileStore:
    """
    Manages the lifter profile stored as JSON.

    The file holds one object:
      oneRepMaxes     {exercise name: lbs}
      availablePlates [{weight, quantity}, ...]
      barbellWeight   lbs
      programId       template id the plan was built from (or null)
      workoutPlan     {day: {exercises: [...]}}
    """

    def __init__(self, profile_path: str | Path):
        """
        Initialize the profile store.

        Args:
            profile_path: Path to the profile JSON file
        """
        self.profile_path = Path(profile_path)

    def exists(self) -> bool:
        """Check if the profile file exists."""
        return self.profile_path.exists()

    def init(self, profile: LifterProfile) -> None:
        """
        Write an initial profile, creating parent directories if needed.

        Args:
            profile: Profile to store
        """
        self.save_profile(profile)

    def load_profile(self) -> LifterProfile:
        """
        Load the lifter profile.

        Returns:
            LifterProfile

        Raises:
            FileNotFoundError: If the profile file doesn't exist
            ValidationError: If the file is not a valid profile document
        """
        if not self.profile_path.exists():
            raise FileNotFoundError(
                f"Profile not found: {self.profile_path}. Run 'init' first."
            )

        try:
            with open(self.profile_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ValidationError(f"Invalid JSON in {self.profile_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValidationError(f"{self.profile_path} does not contain a profile object")

        logger.debug("Loaded profile from %s", self.profile_path)
        return dict_to_lifter_profile(data)

    def save_profile(self, profile: LifterProfile) -> None:
        """
        Save the lifter profile, replacing the file contents.

        Args:
            profile: Profile to save
        """
        self.profile_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.profile_path, "w", encoding="utf-8") as f:
            json.dump(lifter_profile_to_dict(profile), f, indent=2)

        logger.debug("Saved profile to %s", self.profile_path)

    def get_one_rep_max(self, exercise_name: str) -> float | None:
        """Return the stored 1RM for an exercise, or None if unknown."""
        return self.load_profile().get_one_rep_max(exercise_name)

    def set_one_rep_max(self, exercise_name: str, one_rep_max: float) -> LifterProfile:
        """
        Store a 1RM, replacing a case-insensitive match if one exists.

        Args:
            exercise_name: Exercise display name
            one_rep_max: New 1RM in lbs

        Returns:
            The updated profile
        """
        profile = self.load_profile()
        key = _matching_key(profile.one_rep_maxes, exercise_name)
        profile.one_rep_maxes[key] = float(one_rep_max)
        self.save_profile(profile)
        logger.debug("Set 1RM %s = %s", key, one_rep_max)
        return profile

    def set_plates(self, plates: list[Plate]) -> None:
        """Replace the plate inventory."""
        profile = self.load_profile()
        profile.plates = list(plates)
        self.save_profile(profile)

    def set_barbell_weight(self, barbell_weight: float) -> None:
        """Update the default bar weight."""
        profile = self.load_profile()
        profile.barbell_weight = float(barbell_weight)
        self.save_profile(profile)

    def set_workout_plan(self, plan: WorkoutPlan, program_id: str | None = None) -> None:
        """Replace the workout plan (and optionally record its template id)."""
        profile = self.load_profile()
        profile.workout_plan = plan
        if program_id is not None:
            profile.program_id = program_id
        self.save_profile(profile)


def _matching_key(one_rep_maxes: dict[str, float], exercise_name: str) -> str:
    """Return the existing key matching exercise_name case-insensitively, else the name."""
    wanted = exercise_name.strip().lower()
    for name in one_rep_maxes:
        if name.strip().lower() == wanted:
            return name
    return exercise_name.strip()


def get_default_profile_path() -> Path:
    """
    Get the default profile file path.

    Returns:
        ~/.lift-planner/profile.json
    """
    return Path.home() / ".lift-planner" / "profile.json"
