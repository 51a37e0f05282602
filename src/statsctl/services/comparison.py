"""Side-by-side comparison of two datasets (e.g. train/test splits or yearly snapshots)."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from ..models.dataset import Dataset
from ..models.statistics_models import (
    ColumnComparison,
    DatasetComparison,
    MissingComparison,
)
from .missing_values import analyze_missing
from .statistics_service import describe_all, describe_selected

logger = logging.getLogger(__name__)


def compare_datasets(
    first: Dataset,
    second: Dataset,
    columns: Sequence[str] | None = None,
    labels: tuple[str, str] = ("first", "second"),
) -> DatasetComparison:
    """Compare descriptive statistics and missing counts of two datasets.

    Columns are matched by name and reported in the first dataset's order, or in selection order
    when ``columns`` is given; columns present in only one dataset are left out. Missing counts
    cover the selected columns, or every column when no selection is given. Differences are
    ``second - first``.
    """
    if columns is not None:
        stats1 = describe_selected(first, columns)
        stats2 = describe_selected(second, columns)
        first = first.select_columns(columns)
        second = second.select_columns(columns)
    else:
        stats1 = describe_all(first)
        stats2 = describe_all(second)

    stats2_by_name = {s.name: s for s in stats2}
    column_rows = []
    for s1 in stats1:
        s2 = stats2_by_name.get(s1.name)
        if s2 is None:
            continue
        diff = math.nan if math.isnan(s1.mean) or math.isnan(s2.mean) else s2.mean - s1.mean
        column_rows.append(ColumnComparison(name=s1.name, first=s1, second=s2, mean_diff=diff))

    missing2_by_name = {m.name: m for m in analyze_missing(second)}
    missing_rows = []
    for m1 in analyze_missing(first):
        m2 = missing2_by_name.get(m1.name)
        if m2 is None:
            continue
        missing_rows.append(
            MissingComparison(
                name=m1.name, first=m1, second=m2, missing_diff=m2.missing - m1.missing
            )
        )

    logger.debug(
        "Compared %s vs %s: %d columns, %d missing rows",
        labels[0],
        labels[1],
        len(column_rows),
        len(missing_rows),
    )

    return DatasetComparison(
        first_label=labels[0],
        second_label=labels[1],
        columns=column_rows,
        missing=missing_rows,
    )
