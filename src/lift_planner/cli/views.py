"""
CLI view formatters using Rich for pretty console output.

Handles table formatting, the plate-stack bar graphic and status messages.
"""

from rich.console import Console
from rich.table import Table

from ..core.models import (
    LifterProfile,
    Plate,
    PlannedExercise,
    ProgramTemplate,
    TemplateCatalog,
    WorkoutPlan,
    lookup_one_rep_max,
)
from ..core.plates import PlateLoadout, mini_plate_list
from ..core.program import build_sets
from ..core.warmup import WarmupSet

console = Console()
err_console = Console(stderr=True)


def fmt_lbs(weight: float) -> str:
    """Format a weight without a trailing .0 (e.g. 225, 2.5)."""
    return f"{weight:g}"


# ---------------------------------------------------------------------------
# Plate loading
# ---------------------------------------------------------------------------

def render_plate_bar(loadout: PlateLoadout) -> str:
    """
    Draw the loaded bar as text, mirrored on both sleeves.

    The left sleeve uses display_order() so the heaviest plate is nearest
    the collar on both sides.

    Returns:
        Single-line Rich markup string
    """
    left = "".join(f"[bold blue]\\[{fmt_lbs(w)}][/bold blue]" for w in loadout.display_order())
    right = "".join(f"[bold blue]\\[{fmt_lbs(w)}][/bold blue]" for w in loadout.per_side)
    return f"──{left}|[dim]════════[/dim]|{right}──"


def print_loadout(loadout: PlateLoadout) -> None:
    """
    Print a plate-loading result.

    Args:
        loadout: Result of compute_plate_loadout
    """
    console.print()
    if loadout.exact:
        console.print("[bold green]Success! Load these plates on each side.[/bold green]")
    else:
        console.print(
            "[bold yellow]Could not reach exact weight. "
            f"Closest achievable: {loadout.achieved_weight:.1f} lbs.[/bold yellow]"
        )

    if loadout.per_side:
        console.print(render_plate_bar(loadout))
        per_side = ", ".join(
            f"{count} × {fmt_lbs(w)}" for w, count in loadout.counts().items()
        )
        console.print(f"Per side: {per_side}  ({fmt_lbs(loadout.per_side_weight)} lbs)")
    else:
        console.print("Bar only, no plates needed.")

    console.print(f"Total weight: {loadout.achieved_weight:.1f} lbs")
    if not loadout.exact:
        label = "Short by" if loadout.difference > 0 else "Over by"
        console.print(f"{label}: {abs(loadout.difference):.2f} lbs")


def format_inventory_table(plates: list[Plate] | tuple[Plate, ...]) -> Table:
    """
    Create a Rich table of the plate inventory.

    Args:
        plates: Plates owned

    Returns:
        Rich Table object
    """
    table = Table(title="Plate Inventory")

    table.add_column("Weight (lbs)", justify="right", style="cyan")
    table.add_column("Owned", justify="right")
    table.add_column("Per side", justify="right", style="bold")

    for plate in sorted(plates, key=lambda p: p.weight, reverse=True):
        table.add_row(fmt_lbs(plate.weight), str(plate.count), str(plate.usable_per_side))

    return table


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

def format_maxes_table(profile: LifterProfile) -> Table:
    """Create a Rich table of recorded one-rep maxes."""
    table = Table(title="One-Rep Maxes")

    table.add_column("Exercise", style="cyan")
    table.add_column("1RM (lbs)", justify="right", style="bold")

    for name in sorted(profile.one_rep_maxes, key=str.lower):
        table.add_row(name, fmt_lbs(profile.one_rep_maxes[name]))

    return table


def print_warmup(sets: list[WarmupSet]) -> None:
    """Print a warm-up ladder."""
    table = Table(title="Warm-up")

    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Step", style="magenta")
    table.add_column("Reps", justify="right")
    table.add_column("Weight (lbs)", justify="right", style="bold")

    for i, s in enumerate(sets, 1):
        table.add_row(str(i), s.label or "Bar", str(s.reps), fmt_lbs(s.weight))

    console.print(table)


# ---------------------------------------------------------------------------
# Programs and plans
# ---------------------------------------------------------------------------

def format_catalog_table(catalog: TemplateCatalog) -> Table:
    """Create a Rich table listing the programs in a catalog."""
    table = Table(title="Program Templates")

    table.add_column("ID", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Structure", style="green")
    table.add_column("Days", justify="right")

    for program_id, program in catalog.programs.items():
        table.add_row(program_id, program.name, program.structure, str(len(program.days)))

    return table


def print_template(
    program: ProgramTemplate,
    catalog: TemplateCatalog,
    one_rep_maxes: dict[str, float] | None = None,
) -> None:
    """
    Print a program's set scheme, with weights for lifts that have a 1RM.

    Args:
        program: Template to show
        catalog: Catalog for lift names
        one_rep_maxes: Lifter's maxes; lifts without one show percentages only
    """
    console.print(f"[bold cyan]{program.name}[/bold cyan]")
    if program.description:
        console.print(program.description)
    if program.structure:
        console.print(f"[dim]{program.structure}[/dim]")

    for day_key, lifts in program.days.items():
        table = Table(title=_format_day_key(day_key))
        table.add_column("Lift", style="cyan")
        table.add_column("Sets")

        for lift_id, scheme in lifts.items():
            info = catalog.lifts.get(lift_id)
            name = info.name if info else lift_id
            one_rep_max = lookup_one_rep_max(one_rep_maxes or {}, name)
            sets = build_sets(one_rep_max or 0.0, scheme.reps, scheme.percentages)
            cells = []
            for s in sets:
                cell = f"{s.reps_label} @ {s.percentage * 100:g}%"
                if one_rep_max:
                    cell += f" = {fmt_lbs(s.weight)}"
                cells.append(cell)
            table.add_row(name, ", ".join(cells))

        console.print(table)


def print_plan(
    plan: WorkoutPlan,
    plates: list[Plate] | tuple[Plate, ...] | None = None,
    barbell_weight: float = 45.0,
) -> None:
    """
    Print the stored workout plan, one table per day.

    Args:
        plan: Workout plan to show
        plates: Inventory for the per-set plate hint (omitted when None)
        barbell_weight: Bar weight used for the plate hint
    """
    if not plan:
        console.print("[yellow]No workout plan yet. Run 'apply-template' first.[/yellow]")
        return

    for day_key, exercises in plan.items():
        table = Table(title=_format_day_key(day_key))
        table.add_column("Exercise", style="cyan")
        table.add_column("1RM", justify="right", style="dim")
        table.add_column("Set", justify="right")
        table.add_column("Reps", justify="right")
        table.add_column("%", justify="right")
        table.add_column("Weight", justify="right", style="bold")
        table.add_column("Plates / side", style="green")

        for exercise in exercises:
            for i, s in enumerate(exercise.sets, 1):
                hint = mini_plate_list(s.weight, plates, barbell_weight) if plates else []
                table.add_row(
                    exercise.name if i == 1 else "",
                    fmt_lbs(exercise.one_rep_max) if i == 1 else "",
                    str(i),
                    s.reps_label,
                    f"{s.percentage * 100:g}",
                    fmt_lbs(s.weight),
                    " ".join(fmt_lbs(w) for w in hint),
                )

        console.print(table)


def print_exercise(exercise: PlannedExercise) -> None:
    """Print one exercise's recalculated sets on a single line."""
    sets = ", ".join(f"{s.reps_label}×{fmt_lbs(s.weight)}" for s in exercise.sets)
    console.print(f"  {exercise.name}: {sets}")


def _format_day_key(key: str) -> str:
    """'week_1_day_2' → 'Week 1 Day 2'."""
    return " ".join(word[:1].upper() + word[1:] for word in key.split("_"))


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")


def confirm_action(message: str) -> bool:
    """
    Prompt user for confirmation.

    Args:
        message: Confirmation message

    Returns:
        True if confirmed, False otherwise
    """
    response = console.input(f"{message} [y/N]: ")
    return response.lower() in ("y", "yes")
