"""Cell-level validation: missing-value detection and numeric parsing.

``is_missing`` is the only place where the missing-value vocabulary is consulted. Every analysis
that needs to know whether a cell holds a value goes through it.
"""

from __future__ import annotations

import math

# Common null spellings found in CSV/TSV exports (R, pandas, SQL dumps, spreadsheets)
MISSING_TOKENS: frozenset[str] = frozenset(
    {
        "",
        "NA",
        "na",
        "N/A",
        "n/a",
        "null",
        "NULL",
        ".",
        "NaN",
        "nan",
        "-",
        "None",
        "none",
    }
)

BOOLEAN_TOKENS: frozenset[str] = frozenset({"true", "false", "yes", "no", "1", "0"})


def is_missing(value: str) -> bool:
    """Check if a raw cell value represents a missing value."""
    return value.strip() in MISSING_TOKENS


def is_boolean_token(value: str) -> bool:
    """Check if a raw cell value is one of the recognized boolean spellings (case-insensitive)."""
    return value.strip().lower() in BOOLEAN_TOKENS


def parse_number(value: str) -> float | None:
    """Parse a raw cell as a finite float.

    Returns None for missing cells, text that is not plain ASCII decimal/exponent notation, and
    non-finite results such as ``inf``. ``float`` alone would also accept digit-group underscores
    and non-ASCII digits (fullwidth, Arabic-Indic), so both are rejected first.
    """
    text = value.strip()
    if text in MISSING_TOKENS or "_" in text or not text.isascii():
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number
