"""
CLI entry point using Typer.

Provides commands for:
- weight / percent-for-reps: resolve working weights from a 1RM
- plates: plate loading per side of the bar
- warmup: warm-up ladder for a working weight
- init / maxes / set-max / feedback: profile and one-rep maxes
- inventory / plate-add / plate-remove / set-bar: plate inventory
- templates / template-show / apply-template / plan / validate-templates
"""

from .app import app
from .commands import calculator, profile, program  # noqa: F401  (registers commands)

__all__ = ["app", "main"]


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
