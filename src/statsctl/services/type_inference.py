"""Column type inference over raw text cells."""

from __future__ import annotations

import logging

from ..models.dataset import Dataset
from ..models.statistics_models import ColumnType, ColumnTypeInfo
from ..utils.validators import is_boolean_token, is_missing, parse_number

logger = logging.getLogger(__name__)

# Fraction of non-missing values that must parse as numbers for a Numeric column
NUMERIC_RATIO_THRESHOLD = 0.8
# Columns with more distinct values than this list a count instead of their levels
MAX_LEVELS = 20


def _is_boolean(values: list[str]) -> bool:
    return bool(values) and all(is_boolean_token(value) for value in values)


def _is_numeric(values: list[str]) -> bool:
    if not values:
        return False
    parseable = sum(1 for value in values if parse_number(value) is not None)
    return parseable / len(values) >= NUMERIC_RATIO_THRESHOLD


def classify_values(values: list[str]) -> ColumnType:
    """Classify a column from its non-missing raw values.

    Boolean is checked first, so a column of 0/1 flags is Boolean rather than Numeric.
    """
    if _is_boolean(values):
        return ColumnType.BOOLEAN
    if _is_numeric(values):
        return ColumnType.NUMERIC
    return ColumnType.CATEGORICAL


def infer_column_type(dataset: Dataset, name: str) -> ColumnTypeInfo | None:
    """Infer the type of a single column, or None if the column does not exist."""
    raw = dataset.column(name)
    if raw is None:
        return None

    present = [value.strip() for value in raw if not is_missing(value)]
    unique_values = sorted(set(present))
    unique_count = len(unique_values)
    col_type = classify_values(present)

    if col_type == ColumnType.NUMERIC:
        levels = ["-"]
    elif unique_count <= MAX_LEVELS:
        levels = unique_values
    else:
        levels = [f"({unique_count} unique)"]

    return ColumnTypeInfo(
        name=name,
        col_type=col_type,
        unique_count=unique_count,
        levels=levels,
    )


def infer_types(dataset: Dataset) -> list[ColumnTypeInfo]:
    """Infer the type of every column, in header order."""
    results = []
    for header in dataset.headers:
        info = infer_column_type(dataset, header)
        if info is not None:
            results.append(info)
    logger.debug(
        "Inferred types for %d columns: %s",
        len(results),
        {info.name: str(info.col_type) for info in results},
    )
    return results


def numeric_columns(dataset: Dataset) -> list[str]:
    """Get the names of columns inferred as Numeric, in header order."""
    return [info.name for info in infer_types(dataset) if info.col_type == ColumnType.NUMERIC]
