"""Profile commands: init, maxes, set-max, feedback, and plate inventory."""

import logging
from typing import Annotated, Optional

import typer

from ...core.config import ONE_REP_MAX_STEP
from ...core.errors import LiftPlannerError
from ...core.models import LifterProfile
from ...core.plates import add_plates, remove_plates
from ...core.program import recalculate_plan
from ...core.weights import adjust_for_feedback, nudge_one_rep_max
from ...io.profile_store import ProfileStore
from .. import views
from ..app import ProfilePathOption, app, get_settings, get_store, load_profile_or_exit

logger = logging.getLogger(__name__)


def _store_max_and_recalculate(
    store: ProfileStore,
    exercise: str,
    new_max: float,
    increment: float,
) -> None:
    """
    Persist a new 1RM and re-derive every planned set for that exercise.

    Recalculation happens here, explicitly, right after the max changes.
    """
    profile = store.set_one_rep_max(exercise, new_max)
    if not profile.workout_plan:
        return

    plan = recalculate_plan(profile.workout_plan, profile.one_rep_maxes, increment)
    store.set_workout_plan(plan)
    logger.debug("Recalculated %d plan days after 1RM change", len(plan))

    wanted = exercise.strip().lower()
    for day_key, exercises in plan.items():
        for planned in exercises:
            if planned.name.strip().lower() == wanted:
                views.console.print(f"[dim]{day_key}[/dim]")
                views.print_exercise(planned)


@app.command()
def init(
    profile_path: ProfilePathOption = None,
    bar: Annotated[
        Optional[float],
        typer.Option("--bar", "-b", help="Default barbell weight in lbs"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing profile without prompting"),
    ] = False,
) -> None:
    """
    Create a profile with the default plate inventory and no maxes.
    """
    settings = get_settings()
    store = get_store(profile_path)

    if store.exists() and not force:
        if not views.confirm_action(f"Profile {store.profile_path} exists. Overwrite?"):
            views.print_info("Cancelled.")
            raise typer.Exit(0)

    bar_weight = bar if bar is not None else settings.barbell_weight
    if bar_weight < 0:
        views.print_error("Barbell weight must be non-negative")
        raise typer.Exit(1)

    store.init(
        LifterProfile(
            plates=list(settings.default_plates),
            barbell_weight=bar_weight,
        )
    )
    views.print_success(f"Profile created at {store.profile_path}")


@app.command()
def maxes(
    profile_path: ProfilePathOption = None,
) -> None:
    """
    List recorded one-rep maxes.
    """
    profile = load_profile_or_exit(get_store(profile_path))
    if not profile.one_rep_maxes:
        views.print_info("No one-rep maxes recorded yet. Use 'set-max'.")
        return
    views.console.print(views.format_maxes_table(profile))


@app.command("set-max")
def set_max(
    exercise: Annotated[str, typer.Argument(help="Exercise name, e.g. 'Bench Press'")],
    value: Annotated[
        Optional[float],
        typer.Argument(help="New one-rep max in lbs"),
    ] = None,
    up: Annotated[
        bool,
        typer.Option("--up", help=f"Raise the current max by {ONE_REP_MAX_STEP:g} lbs"),
    ] = False,
    down: Annotated[
        bool,
        typer.Option("--down", help=f"Lower the current max by {ONE_REP_MAX_STEP:g} lbs"),
    ] = False,
    profile_path: ProfilePathOption = None,
) -> None:
    """
    Set (or step) an exercise's one-rep max and recalculate the plan.
    """
    if sum((value is not None, up, down)) != 1:
        views.print_error("Give a VALUE, --up or --down (exactly one)")
        raise typer.Exit(1)

    settings = get_settings()
    store = get_store(profile_path)
    profile = load_profile_or_exit(store)

    try:
        if value is not None:
            if value < 0:
                raise LiftPlannerError("One-rep max must be non-negative")
            new_max = value
        else:
            current = profile.get_one_rep_max(exercise)
            if current is None:
                current = settings.default_one_rep_max
            new_max = nudge_one_rep_max(current, ONE_REP_MAX_STEP if up else -ONE_REP_MAX_STEP)
    except LiftPlannerError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    _store_max_and_recalculate(store, exercise, new_max, settings.increment)
    views.print_success(f"{exercise} 1RM set to {views.fmt_lbs(new_max)} lbs")


@app.command()
def feedback(
    exercise: Annotated[str, typer.Argument(help="Exercise name")],
    rating: Annotated[str, typer.Argument(help="easy | just_right | hard")],
    profile_path: ProfilePathOption = None,
) -> None:
    """
    Record how an exercise felt: easy raises its 1RM 5 %, hard lowers it 5 %.
    """
    settings = get_settings()
    store = get_store(profile_path)
    profile = load_profile_or_exit(store)

    current = profile.get_one_rep_max(exercise)
    if current is None:
        current = settings.default_one_rep_max
        views.print_warning(
            f"No 1RM recorded for {exercise}; starting from {views.fmt_lbs(current)} lbs"
        )

    try:
        new_max = adjust_for_feedback(current, rating, settings.increment)
    except LiftPlannerError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if new_max == current:
        views.print_info(f"{exercise} 1RM unchanged at {views.fmt_lbs(current)} lbs")
        return

    _store_max_and_recalculate(store, exercise, new_max, settings.increment)
    views.print_success(
        f"{exercise} 1RM {views.fmt_lbs(current)} → {views.fmt_lbs(new_max)} lbs"
    )


@app.command()
def inventory(
    profile_path: ProfilePathOption = None,
) -> None:
    """
    Show the plate inventory and bar weight.
    """
    profile = load_profile_or_exit(get_store(profile_path))
    if not profile.plates:
        views.print_info("No plates configured. Use 'plate-add'.")
    else:
        views.console.print(views.format_inventory_table(profile.plates))
    views.console.print(f"Barbell: {views.fmt_lbs(profile.barbell_weight)} lbs")


@app.command("plate-add")
def plate_add(
    weight: Annotated[float, typer.Argument(help="Plate weight in lbs")],
    count: Annotated[
        int,
        typer.Option("--count", "-c", help="Number of plates to add (total, both sides)"),
    ] = 2,
    profile_path: ProfilePathOption = None,
) -> None:
    """
    Add plates to the inventory.
    """
    store = get_store(profile_path)
    profile = load_profile_or_exit(store)

    try:
        updated = add_plates(profile.plates, weight, count)
    except LiftPlannerError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    store.set_plates(updated)
    views.print_success(f"Added {count} × {views.fmt_lbs(weight)} lb plates")


@app.command("plate-remove")
def plate_remove(
    weight: Annotated[float, typer.Argument(help="Plate weight in lbs")],
    count: Annotated[
        Optional[int],
        typer.Option("--count", "-c", help="Number of plates to remove (default: all)"),
    ] = None,
    profile_path: ProfilePathOption = None,
) -> None:
    """
    Remove plates from the inventory.
    """
    store = get_store(profile_path)
    profile = load_profile_or_exit(store)

    try:
        updated = remove_plates(profile.plates, weight, count)
    except LiftPlannerError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    store.set_plates(updated)
    what = "all" if count is None else str(count)
    views.print_success(f"Removed {what} × {views.fmt_lbs(weight)} lb plates")


@app.command("set-bar")
def set_bar(
    weight: Annotated[float, typer.Argument(help="Barbell weight in lbs")],
    profile_path: ProfilePathOption = None,
) -> None:
    """
    Set the default barbell weight.
    """
    store = get_store(profile_path)
    load_profile_or_exit(store)
    if weight < 0:
        views.print_error("Barbell weight must be non-negative")
        raise typer.Exit(1)
    store.set_barbell_weight(weight)
    views.print_success(f"Barbell weight set to {views.fmt_lbs(weight)} lbs")
