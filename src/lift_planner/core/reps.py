"""
Rep-count parsing.

Template rep schemes mix plain counts (5, "5") with AMRAP-marked counts
("5+", meaning "as many reps as possible, at least 5").  The marker is
metadata only; weight computation always uses the numeric part.
"""

import re
from dataclasses import dataclass

AMRAP_MARKER = "+"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

RepValue = int | str | None


@dataclass(frozen=True)
class ParsedReps:
    """Numeric rep count plus the AMRAP flag."""

    value: int
    is_amrap: bool


def parse_reps(reps: RepValue) -> ParsedReps:
    """
    Parse a rep value that may carry a trailing "+" AMRAP marker.

    None and the empty string parse to (0, False).  Text without a leading
    integer parses to 0, but still reports the AMRAP flag if "+" is present.

    Args:
        reps: Rep value, e.g. 8, "8", "8+", "12+"

    Returns:
        ParsedReps with the numeric value and AMRAP flag
    """
    if reps is None or reps == "":
        return ParsedReps(value=0, is_amrap=False)

    text = str(reps)
    is_amrap = AMRAP_MARKER in text

    match = _LEADING_INT.match(text.replace(AMRAP_MARKER, "", 1))
    value = int(match.group(1)) if match else 0
    return ParsedReps(value=value, is_amrap=is_amrap)


def is_amrap(reps: RepValue) -> bool:
    """Return True if the rep value is AMRAP-marked."""
    if reps is None or reps == "":
        return False
    return AMRAP_MARKER in str(reps)


def numeric_reps(reps: RepValue) -> int:
    """Return the numeric rep count, ignoring any AMRAP marker."""
    return parse_reps(reps).value


def format_reps(value: int, amrap: bool = False) -> str:
    """Format a rep count for display, re-attaching the marker for AMRAP sets."""
    return f"{value}{AMRAP_MARKER}" if amrap else str(value)
