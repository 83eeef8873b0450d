"""
YAML → typed settings loader.

Loads defaults from settings.yaml (bundled with the package) and
optionally merges user overrides from ~/.lift-planner/settings.yaml.

Usage:
    from lift_planner.core.engine.config_loader import load_settings
    settings = load_settings()
    bar = settings.barbell_weight

Missing keys fall back to the Python defaults in config.py.  A user
override file that cannot be parsed is ignored with a warning.
"""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..config import (
    DEFAULT_BARBELL_WEIGHT,
    DEFAULT_ONE_REP_MAX,
    DEFAULT_PLATE_SET,
    WEIGHT_INCREMENT_LBS,
)
from ..errors import LiftPlannerError
from ..models import Plate

SETTINGS_FILENAME = "settings.yaml"

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML mapping; non-mapping documents load as {}."""
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Settings:
    """Caller-side defaults for the computation core."""

    increment: float = WEIGHT_INCREMENT_LBS
    barbell_weight: float = DEFAULT_BARBELL_WEIGHT
    default_one_rep_max: float = DEFAULT_ONE_REP_MAX
    default_plates: tuple[Plate, ...] = field(
        default_factory=lambda: tuple(Plate(weight=w, count=c) for w, c in DEFAULT_PLATE_SET)
    )


def get_bundled_settings_path() -> Path | None:
    """Return the path to the bundled settings.yaml, or None if not found."""
    # config_loader.py lives at src/lift_planner/core/engine/
    candidate = Path(__file__).parent.parent.parent / SETTINGS_FILENAME
    return candidate if candidate.exists() else None


def get_user_settings_path() -> Path | None:
    """Return ~/.lift-planner/settings.yaml if it exists, else None."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / ".lift-planner" / SETTINGS_FILENAME
    return p if p.exists() else None


def load_settings_dict(user_path: Path | None = None) -> dict[str, Any]:
    """
    Load and merge raw settings from YAML sources.

    Load order (later overrides earlier):
    1. Bundled src/lift_planner/settings.yaml
    2. User override (user_path, or ~/.lift-planner/settings.yaml)

    Returns:
        Merged dict of settings sections.  Empty dict if no YAML available.
    """
    config: dict[str, Any] = {}

    bundled = get_bundled_settings_path()
    if bundled is not None:
        config = _deep_merge(config, _load_yaml_file(bundled))

    user = user_path if user_path is not None else get_user_settings_path()
    if user is not None and user.exists():
        try:
            user_cfg = _load_yaml_file(user)
        except (OSError, yaml.YAMLError) as exc:
            warnings.warn(
                f"lift-planner: ignoring unreadable settings file {user} ({exc})",
                stacklevel=2,
            )
            user_cfg = {}
        if user_cfg:
            config = _deep_merge(config, user_cfg)

    return config


def settings_from_dict(data: dict[str, Any]) -> Settings:
    """
    Convert a raw settings dict to Settings, using defaults for absent keys.

    Raises:
        LiftPlannerError: If a present value has the wrong type or range
    """
    rounding = data.get("rounding", {}) or {}
    loading = data.get("loading", {}) or {}
    profile = data.get("profile", {}) or {}

    try:
        plates_raw = loading.get("default_plates")
        plates = (
            tuple(Plate(weight=float(p["weight"]), count=int(p["quantity"])) for p in plates_raw)
            if plates_raw
            else Settings().default_plates
        )
        settings = Settings(
            increment=float(rounding.get("increment_lbs", WEIGHT_INCREMENT_LBS)),
            barbell_weight=float(loading.get("barbell_weight", DEFAULT_BARBELL_WEIGHT)),
            default_one_rep_max=float(profile.get("default_one_rep_max", DEFAULT_ONE_REP_MAX)),
            default_plates=plates,
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise LiftPlannerError(f"Invalid settings: {exc}") from exc

    if settings.increment <= 0:
        raise LiftPlannerError(f"Invalid settings: increment_lbs must be positive, got {settings.increment}")
    if settings.barbell_weight < 0 or settings.default_one_rep_max < 0:
        raise LiftPlannerError("Invalid settings: weights must be non-negative")
    return settings


def load_settings(user_path: Path | None = None) -> Settings:
    """Load merged settings and convert them to a Settings object."""
    return settings_from_dict(load_settings_dict(user_path))
