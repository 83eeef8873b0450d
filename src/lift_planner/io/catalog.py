"""
Program template catalog loader.

The catalog is a static JSON document bundled with the package
(program_templates.json):

  {
    "lifts":    {lift_id: {"name": ..., "type": ...}},
    "programs": {program_id: {"id", "name", "description", "structure",
                              <day key>: {lift_id: {"reps": [...],
                                                    "percentages": [...]}}}}
  }

Every program key that is not metadata is a training day.  Percentages
are written 0-100.
"""

import json
import logging
from pathlib import Path
from typing import Any

from ..core.models import LiftInfo, LiftScheme, ProgramTemplate, TemplateCatalog
from .serializers import ValidationError

logger = logging.getLogger(__name__)

CATALOG_FILENAME = "program_templates.json"
TEMPLATE_META_KEYS: frozenset[str] = frozenset({"id", "name", "description", "structure"})


def _lift_scheme_from_dict(data: Any, where: str) -> LiftScheme:
    """Convert {"reps": [...], "percentages": [...]} to LiftScheme."""
    if not isinstance(data, dict):
        raise ValidationError(f"{where}: expected an object with reps and percentages")
    reps = data.get("reps")
    percentages = data.get("percentages", [])
    if not isinstance(reps, list) or not isinstance(percentages, list):
        raise ValidationError(f"{where}: reps and percentages must be lists")
    for p in percentages:
        if isinstance(p, bool) or not isinstance(p, (int, float)) or p < 0:
            raise ValidationError(f"{where}: invalid percentage {p!r}")
    return LiftScheme(reps=tuple(reps), percentages=tuple(float(p) for p in percentages))


def _program_from_dict(program_id: str, data: Any) -> ProgramTemplate:
    """Convert one program entry to ProgramTemplate."""
    if not isinstance(data, dict):
        raise ValidationError(f"Program '{program_id}' must be an object")

    days: dict[str, dict[str, LiftScheme]] = {}
    for key, value in data.items():
        if key in TEMPLATE_META_KEYS:
            continue
        if not isinstance(value, dict):
            raise ValidationError(f"Program '{program_id}' day '{key}' must be an object")
        days[key] = {
            lift_id: _lift_scheme_from_dict(scheme, f"{program_id}/{key}/{lift_id}")
            for lift_id, scheme in value.items()
        }

    return ProgramTemplate(
        program_id=str(data.get("id", program_id)),
        name=str(data.get("name", program_id)),
        description=str(data.get("description", "")),
        structure=str(data.get("structure", "")),
        days=days,
    )


def dict_to_catalog(data: dict[str, Any]) -> TemplateCatalog:
    """
    Convert a raw catalog document to TemplateCatalog.

    Raises:
        ValidationError: If the document shape is invalid
    """
    lifts_raw = data.get("lifts", {})
    programs_raw = data.get("programs", {})
    if not isinstance(lifts_raw, dict) or not isinstance(programs_raw, dict):
        raise ValidationError("Catalog must contain 'lifts' and 'programs' objects")

    lifts = {
        lift_id: LiftInfo(
            lift_id=lift_id,
            name=str(info.get("name", lift_id)) if isinstance(info, dict) else lift_id,
            lift_type=str(info.get("type", "barbell")) if isinstance(info, dict) else "barbell",
        )
        for lift_id, info in lifts_raw.items()
    }
    programs = {
        program_id: _program_from_dict(program_id, program)
        for program_id, program in programs_raw.items()
    }
    return TemplateCatalog(lifts=lifts, programs=programs)


def get_bundled_catalog_path() -> Path:
    """Return the path of the catalog bundled with the package."""
    return Path(__file__).parent.parent / CATALOG_FILENAME


def load_catalog(path: str | Path | None = None) -> TemplateCatalog:
    """
    Load a template catalog.

    Args:
        path: Catalog JSON file; the bundled catalog when None

    Returns:
        TemplateCatalog

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the file is not a valid catalog
    """
    catalog_path = Path(path) if path is not None else get_bundled_catalog_path()
    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"Invalid JSON in {catalog_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValidationError(f"{catalog_path} does not contain a catalog object")

    catalog = dict_to_catalog(data)
    logger.debug(
        "Loaded %d programs and %d lifts from %s",
        len(catalog.programs),
        len(catalog.lifts),
        catalog_path,
    )
    return catalog
