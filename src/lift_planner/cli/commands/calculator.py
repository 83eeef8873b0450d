"""Calculator commands: weight, percent-for-reps, plates, warmup."""

import logging
from typing import Annotated, Optional

import typer

from ...core.errors import LiftPlannerError
from ...core.plates import compute_plate_loadout
from ...core.warmup import generate_warmup_sets
from ...core.weights import percent_to_fraction, percentage_for_reps, resolve_weight
from ...io.serializers import ValidationError, parse_plate_spec
from .. import views
from ..app import ProfilePathOption, app, get_settings, get_store

logger = logging.getLogger(__name__)


@app.command()
def weight(
    one_rep_max: Annotated[float, typer.Argument(help="One-rep max in lbs")],
    percent: Annotated[
        Optional[float],
        typer.Option("--percent", "-P", help="Percent of 1RM (0-100; >100 allowed)"),
    ] = None,
    reps: Annotated[
        Optional[str],
        typer.Option("--reps", "-r", help="Target reps (e.g. 5 or 5+); looks up the percentage"),
    ] = None,
    increment: Annotated[
        Optional[float],
        typer.Option("--increment", "-i", help="Rounding step in lbs"),
    ] = None,
) -> None:
    """
    Resolve the working weight for a percentage (or rep target) of a 1RM.
    """
    if (percent is None) == (reps is None):
        views.print_error("Give exactly one of --percent or --reps")
        raise typer.Exit(1)

    step = increment if increment is not None else get_settings().increment

    try:
        fraction = percent_to_fraction(percent) if percent is not None else percentage_for_reps(reps)
        result = resolve_weight(one_rep_max, fraction, step)
    except LiftPlannerError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.console.print(
        f"{views.fmt_lbs(one_rep_max)} × {fraction * 100:g}% → "
        f"[bold]{views.fmt_lbs(result)} lbs[/bold]"
    )


@app.command("percent-for-reps")
def percent_for_reps(
    reps: Annotated[str, typer.Argument(help="Target reps (e.g. 8 or 8+)")],
) -> None:
    """
    Show the canonical %1RM for a target rep count.
    """
    fraction = percentage_for_reps(reps)
    views.console.print(f"{reps} reps → [bold]{fraction * 100:g}%[/bold] of 1RM")


@app.command()
def plates(
    target_weight: Annotated[float, typer.Argument(help="Total weight to load in lbs")],
    bar: Annotated[
        Optional[float],
        typer.Option("--bar", "-b", help="Barbell weight in lbs"),
    ] = None,
    plate: Annotated[
        Optional[list[str]],
        typer.Option(
            "--plate",
            help="Plate inventory entry WEIGHTxCOUNT (total owned); repeatable, e.g. --plate 45x4",
        ),
    ] = None,
    profile_path: ProfilePathOption = None,
) -> None:
    """
    Work out which plates to load on each side of the bar.

    Inventory comes from --plate options, else the stored profile, else the
    default plate set from settings.
    """
    settings = get_settings()

    try:
        inventory = [parse_plate_spec(p) for p in plate] if plate else None
    except (ValidationError, LiftPlannerError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    bar_weight = bar
    store = get_store(profile_path)
    if store.exists() and (inventory is None or bar_weight is None):
        try:
            profile = store.load_profile()
        except ValidationError as e:
            views.print_error(str(e))
            raise typer.Exit(1)
        if inventory is None and profile.plates:
            inventory = profile.plates
        if bar_weight is None:
            bar_weight = profile.barbell_weight

    if inventory is None:
        inventory = list(settings.default_plates)
    if bar_weight is None:
        bar_weight = settings.barbell_weight

    logger.debug("Loading %s lbs on a %s lb bar with %d plate types", target_weight, bar_weight, len(inventory))

    try:
        loadout = compute_plate_loadout(target_weight, bar_weight, inventory)
    except LiftPlannerError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_loadout(loadout)


@app.command()
def warmup(
    working_weight: Annotated[float, typer.Argument(help="First working set weight in lbs")],
    bar: Annotated[
        Optional[float],
        typer.Option("--bar", "-b", help="Barbell weight in lbs"),
    ] = None,
) -> None:
    """
    Show warm-up sets leading up to a working weight.
    """
    bar_weight = bar if bar is not None else get_settings().barbell_weight
    try:
        sets = generate_warmup_sets(working_weight, bar_weight)
    except LiftPlannerError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_warmup(sets)
