"""Program commands: templates, template-show, apply-template, plan, validate-templates."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from ...core.models import TemplateCatalog
from ...core.program import apply_template, validate_catalog
from ...io.catalog import load_catalog
from ...io.serializers import ValidationError
from .. import views
from ..app import ProfilePathOption, app, get_settings, get_store, load_profile_or_exit

logger = logging.getLogger(__name__)

CatalogOption = Annotated[
    Optional[Path],
    typer.Option("--catalog", help="Template catalog JSON (default: bundled catalog)"),
]


def _load_catalog_or_exit(path: Path | None) -> TemplateCatalog:
    """Load the template catalog, exiting with an error message on failure."""
    try:
        return load_catalog(path)
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)


@app.command()
def templates(
    catalog_path: CatalogOption = None,
) -> None:
    """
    List available program templates.
    """
    catalog = _load_catalog_or_exit(catalog_path)
    if not catalog.programs:
        views.print_info("No program templates in catalog.")
        return
    views.console.print(views.format_catalog_table(catalog))


@app.command("template-show")
def template_show(
    program_id: Annotated[str, typer.Argument(help="Program template ID")],
    catalog_path: CatalogOption = None,
    profile_path: ProfilePathOption = None,
) -> None:
    """
    Show a template's set scheme, with weights for lifts you have a 1RM for.
    """
    catalog = _load_catalog_or_exit(catalog_path)
    try:
        program = catalog.get_program(program_id)
    except KeyError as e:
        views.print_error(e.args[0])
        raise typer.Exit(1)

    store = get_store(profile_path)
    one_rep_maxes = load_profile_or_exit(store).one_rep_maxes if store.exists() else {}
    views.print_template(program, catalog, one_rep_maxes)


@app.command("apply-template")
def apply_template_cmd(
    program_id: Annotated[str, typer.Argument(help="Program template ID")],
    catalog_path: CatalogOption = None,
    profile_path: ProfilePathOption = None,
) -> None:
    """
    Build your workout plan from a template using your current 1RMs.

    Lifts without a recorded 1RM start from the default max (100 lbs).
    """
    settings = get_settings()
    catalog = _load_catalog_or_exit(catalog_path)
    try:
        program = catalog.get_program(program_id)
    except KeyError as e:
        views.print_error(e.args[0])
        raise typer.Exit(1)

    store = get_store(profile_path)
    profile = load_profile_or_exit(store)

    plan = apply_template(
        program,
        catalog,
        profile.one_rep_maxes,
        default_max=settings.default_one_rep_max,
        increment=settings.increment,
    )
    store.set_workout_plan(plan, program_id=program.program_id)
    logger.debug("Applied template %s (%d days)", program.program_id, len(plan))

    missing = sorted(
        {e.name for day in plan.values() for e in day if profile.get_one_rep_max(e.name) is None}
    )
    if missing:
        views.print_warning(
            f"No 1RM for {', '.join(missing)}; using {views.fmt_lbs(settings.default_one_rep_max)} lbs. "
            "Use 'set-max' to update."
        )
    views.print_success(f"Applied '{program.name}' ({len(plan)} days)")


@app.command()
def plan(
    profile_path: ProfilePathOption = None,
    show_plates: Annotated[
        bool,
        typer.Option("--plates/--no-plates", help="Show plates per side for each set"),
    ] = True,
) -> None:
    """
    Show the current workout plan with resolved weights.
    """
    profile = load_profile_or_exit(get_store(profile_path))
    views.print_plan(
        profile.workout_plan,
        profile.plates if show_plates else None,
        profile.barbell_weight,
    )


@app.command("validate-templates")
def validate_templates(
    catalog_path: Annotated[
        Optional[Path],
        typer.Argument(help="Catalog JSON to check (default: bundled catalog)"),
    ] = None,
) -> None:
    """
    Check that every lift referenced by a program exists in the catalog.
    """
    catalog = _load_catalog_or_exit(catalog_path)
    for program in catalog.programs.values():
        views.console.print(f"Checking program: {program.name} ({program.program_id})")

    errors = validate_catalog(catalog)
    if errors:
        views.console.print("[bold red]Validation Errors Found:[/bold red]")
        for error in errors:
            views.print_error(error)
        raise typer.Exit(1)

    views.print_success("All programs validated successfully!")
