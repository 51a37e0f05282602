"""Descriptive statistics for numeric columns and value counts for categorical ones.

Numeric values are taken from ``Dataset.numeric_column``: a cell counts as missing when it is a
missing-value token or does not parse as a finite number.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from ..models.dataset import Dataset
from ..models.statistics_models import CategoricalSummary, DescriptiveStats
from ..utils.validators import is_missing
from .type_inference import numeric_columns

logger = logging.getLogger(__name__)

TOP_VALUES_LIMIT = 10


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; NaN for empty input."""
    if len(values) == 0:
        return math.nan
    return float(np.mean(values))


def std_dev(values: Sequence[float]) -> float:
    """Sample standard deviation (n - 1 denominator).

    Fewer than two values have no spread, so the result is 0.0 rather than NaN.
    """
    if len(values) < 2:
        return 0.0
    return float(np.std(values, ddof=1))


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """Percentile by linear interpolation between closest ranks.

    Args:
        sorted_values: Values in ascending order
        p: Percentile in [0, 100]

    Returns:
        The value at rank ``p / 100 * (n - 1)``, interpolated between neighbours when the rank is
        fractional. NaN for empty input.
    """
    n = len(sorted_values)
    if n == 0:
        return math.nan
    if n == 1:
        return float(sorted_values[0])

    index = p / 100.0 * (n - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    if lower == upper:
        return float(sorted_values[lower])
    frac = index - lower
    return float(sorted_values[lower] * (1.0 - frac) + sorted_values[upper] * frac)


def describe(dataset: Dataset, name: str) -> DescriptiveStats | None:
    """Compute descriptive statistics for one column.

    Returns None if the column does not exist. A column without any numeric value gets NaN for
    every statistic, count 0 and missing equal to the row count.
    """
    all_values = dataset.numeric_column(name)
    if all_values is None:
        return None

    present = [value for value in all_values if value is not None]
    missing = len(all_values) - len(present)

    if not present:
        return DescriptiveStats(
            name=name,
            count=0,
            missing=missing,
            mean=math.nan,
            std_dev=math.nan,
            min=math.nan,
            q1=math.nan,
            median=math.nan,
            q3=math.nan,
            max=math.nan,
        )

    values = np.sort(np.asarray(present, dtype=float))

    return DescriptiveStats(
        name=name,
        count=len(values),
        missing=missing,
        mean=mean(values),
        std_dev=std_dev(values),
        min=float(values[0]),
        q1=percentile(values, 25.0),
        median=percentile(values, 50.0),
        q3=percentile(values, 75.0),
        max=float(values[-1]),
    )


def describe_all(dataset: Dataset) -> list[DescriptiveStats]:
    """Describe every column inferred as Numeric, in header order."""
    results = [
        stats
        for col in numeric_columns(dataset)
        if (stats := describe(dataset, col)) is not None
    ]
    logger.debug("Described %d numeric columns", len(results))
    return results


def describe_selected(dataset: Dataset, columns: Sequence[str]) -> list[DescriptiveStats]:
    """Describe the named columns in the given order, skipping names not in the dataset."""
    results = []
    for col in columns:
        stats = describe(dataset, col)
        if stats is None:
            logger.debug("Skipping unknown column '%s'", col)
            continue
        results.append(stats)
    return results


def categorical_summary(dataset: Dataset, name: str) -> CategoricalSummary | None:
    """Count the values of a column.

    Top values are ordered by descending count; values with equal counts keep the order in which
    they first appear in the column.
    """
    values = dataset.column(name)
    if values is None:
        return None

    missing = 0
    counts: dict[str, int] = {}
    for raw in values:
        if is_missing(raw):
            missing += 1
            continue
        value = raw.strip()
        counts[value] = counts.get(value, 0) + 1

    top_values = sorted(counts.items(), key=lambda item: item[1], reverse=True)

    return CategoricalSummary(
        name=name,
        total=len(values),
        missing=missing,
        unique=len(counts),
        top_values=top_values[:TOP_VALUES_LIMIT],
    )
