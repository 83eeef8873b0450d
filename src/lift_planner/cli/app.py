"""Shared Typer app object, shared option types, and store/settings utilities."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from ..core.engine.config_loader import Settings, load_settings
from ..core.errors import LiftPlannerError
from ..core.models import LifterProfile
from ..io.profile_store import ProfileStore, get_default_profile_path
from ..io.serializers import ValidationError
from . import views

# Shared --profile-path option type used across all profile-backed commands
ProfilePathOption = Annotated[
    Optional[Path],
    typer.Option("--profile-path", "-p", help="Path to profile JSON file"),
]

app = typer.Typer(
    name="lift-planner",
    help="Percentage-based training weights and barbell plate loading.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """
    Resolve working weights from one-rep maxes and work out plate loadings.
    """
    configure_logging(verbose)


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=views.err_console, show_path=False)],
        force=True,
    )


def get_store(profile_path: Path | None) -> ProfileStore:
    """Get profile store from path or default location."""
    if profile_path is None:
        profile_path = get_default_profile_path()
    return ProfileStore(profile_path)


def get_settings() -> Settings:
    """Load settings, exiting with an error message if they are invalid."""
    try:
        return load_settings()
    except LiftPlannerError as e:
        views.print_error(str(e))
        raise typer.Exit(1)


def load_profile_or_exit(store: ProfileStore) -> LifterProfile:
    """Load the profile, printing an error and exiting if it is missing or invalid."""
    try:
        return store.load_profile()
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)
