"""
Plate loader: target barbell weight → plates per side.

Greedy, largest-denomination first, constrained by a finite inventory.
Inventory counts are TOTAL plates owned (both sides together); only
count // 2 of each weight can be used per side because loading must be
symmetric.

Algorithm
---------
  needed = (target − bar) / 2
  for plate weight w in descending order:
      while side + w ≤ needed + ε and usable[w] > 0:
          load one w; usable[w] −= 1
  achieved = bar + 2 × side
  exact    = |target − achieved| ≤ 0.1

Greedy is not optimal for arbitrary denominations with a finite inventory
(it never backtracks to reserve a large plate differently).  That
behaviour is intentional: when the exact target is unreachable the result
reports the closest greedy weight and the signed difference, rather than
searching for a better combination.
"""

from dataclasses import dataclass

from .config import (
    DEFAULT_BARBELL_WEIGHT,
    DEFAULT_PLATE_SET,
    EXACT_TOLERANCE,
    LOADING_EPSILON,
)
from .errors import InvalidInput, InvalidTarget, validate_number
from .models import Plate


DEFAULT_PLATES: tuple[Plate, ...] = tuple(
    Plate(weight=w, count=c) for w, c in DEFAULT_PLATE_SET
)


@dataclass(frozen=True)
class PlateLoadout:
    """Result of a plate-loading computation."""

    per_side: tuple[float, ...]  # Plate weights in the order added (heaviest first)
    achieved_weight: float  # Bar + both sides
    exact: bool  # Achieved within EXACT_TOLERANCE of the target
    target_weight: float
    barbell_weight: float

    @property
    def per_side_weight(self) -> float:
        """Total plate weight on one side."""
        return sum(self.per_side)

    @property
    def difference(self) -> float:
        """
        Signed target − achieved, rounded to 2 decimals.

        Positive = shortfall (not enough plates), negative = overage.
        """
        return round(self.target_weight - self.achieved_weight, 2) + 0.0

    def display_order(self) -> list[float]:
        """
        Per-side plates ordered for the left sleeve of a bar graphic.

        Reversed so the heaviest plate sits nearest the collar; the right
        sleeve is the mirror image (per_side as is).
        """
        return list(reversed(self.per_side))

    def counts(self) -> dict[float, int]:
        """Return {plate weight: plates per side}, heaviest first."""
        result: dict[float, int] = {}
        for w in self.per_side:
            result[w] = result.get(w, 0) + 1
        return result


def compute_plate_loadout(
    target_weight: float,
    barbell_weight: float = DEFAULT_BARBELL_WEIGHT,
    inventory: list[Plate] | tuple[Plate, ...] = DEFAULT_PLATES,
) -> PlateLoadout:
    """
    Decompose a target barbell weight into plates for each side.

    Args:
        target_weight: Total weight to reach in lbs (> 0)
        barbell_weight: Weight of the empty bar in lbs (≥ 0)
        inventory: Plates owned; never mutated

    Returns:
        PlateLoadout with the per-side plates, achieved weight and exact flag

    Raises:
        InvalidInput: Non-numeric, non-finite or out-of-range inputs
        InvalidTarget: target_weight < barbell_weight
    """
    target = validate_number(target_weight, "target_weight", allow_zero=False)
    bar = validate_number(barbell_weight, "barbell_weight")
    plates = [_as_plate(p) for p in inventory]

    if target < bar:
        raise InvalidTarget(target, bar)

    needed_per_side = (target - bar) / 2
    if needed_per_side <= 0:
        return PlateLoadout(
            per_side=(),
            achieved_weight=bar,
            exact=target == bar,
            target_weight=target,
            barbell_weight=bar,
        )

    # Working pool: [weight, usable per side], heaviest first (stable sort)
    pool = sorted(
        ([p.weight, p.usable_per_side] for p in plates),
        key=lambda entry: entry[0],
        reverse=True,
    )

    side: list[float] = []
    side_weight = 0.0
    for entry in pool:
        weight = entry[0]
        while side_weight + weight <= needed_per_side + LOADING_EPSILON and entry[1] > 0:
            side.append(weight)
            side_weight += weight
            entry[1] -= 1

    achieved = bar + side_weight * 2
    return PlateLoadout(
        per_side=tuple(side),
        achieved_weight=achieved,
        exact=abs(target - achieved) <= EXACT_TOLERANCE,
        target_weight=target,
        barbell_weight=bar,
    )


def mini_plate_list(
    target_weight: float,
    inventory: list[Plate] | tuple[Plate, ...] | None,
    barbell_weight: float = DEFAULT_BARBELL_WEIGHT,
) -> list[float]:
    """
    Compact per-side plate list shown beside a planned set.

    Empty when the target is at or below the bar, or no inventory is known.
    """
    if not inventory or target_weight <= barbell_weight:
        return []
    loadout = compute_plate_loadout(target_weight, barbell_weight, inventory)
    return sorted(loadout.per_side, reverse=True)


# ---------------------------------------------------------------------------
# Inventory edits (settings page add/remove actions)
# ---------------------------------------------------------------------------

def add_plates(
    inventory: list[Plate] | tuple[Plate, ...],
    weight: float,
    count: int = 2,
) -> list[Plate]:
    """
    Return a new inventory with count plates of weight added.

    An existing entry of the same weight has its count increased;
    otherwise a new entry is appended.  Result is sorted heaviest first.
    """
    added = Plate(weight=float(weight), count=count)
    result: list[Plate] = []
    merged = False
    for p in inventory:
        if not merged and p.weight == added.weight:
            result.append(Plate(weight=p.weight, count=p.count + added.count))
            merged = True
        else:
            result.append(p)
    if not merged:
        result.append(added)
    return sorted(result, key=lambda p: p.weight, reverse=True)


def remove_plates(
    inventory: list[Plate] | tuple[Plate, ...],
    weight: float,
    count: int | None = None,
) -> list[Plate]:
    """
    Return a new inventory with plates of weight removed.

    count=None removes the whole entry; removing as many or more plates
    than owned also removes it.

    Raises:
        InvalidInput: If no plate of that weight is in the inventory, or
            count is not a positive integer
    """
    weight = validate_number(weight, "weight", allow_zero=False)
    if count is not None and (isinstance(count, bool) or not isinstance(count, int) or count <= 0):
        raise InvalidInput(f"plate count to remove must be a positive integer, got {count!r}")
    if not any(p.weight == weight for p in inventory):
        raise InvalidInput(f"No {weight:g} lb plates in inventory")

    result: list[Plate] = []
    for p in inventory:
        if p.weight != weight:
            result.append(p)
            continue
        if count is not None and count < p.count:
            result.append(Plate(weight=p.weight, count=p.count - count))
    return result


def _as_plate(item: object) -> Plate:
    """Accept Plate instances or {"weight", "count"} mappings."""
    if isinstance(item, Plate):
        return item
    if isinstance(item, dict):
        try:
            return Plate(weight=item["weight"], count=item["count"])
        except KeyError as e:
            raise InvalidInput(f"plate entry missing field {e}") from e
    raise InvalidInput(f"Invalid plate entry: {item!r}")
