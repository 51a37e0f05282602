"""Missing-value accounting per column and missing-pattern mining per row."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..models.dataset import Dataset
from ..models.statistics_models import MissingInfo, MissingPattern, MissingPatternReport
from ..utils.validators import is_missing

logger = logging.getLogger(__name__)

TOP_PATTERNS_LIMIT = 10


def _percentage(part: int, total: int) -> float:
    return part / total * 100.0 if total > 0 else 0.0


def analyze_missing(dataset: Dataset) -> list[MissingInfo]:
    """Count missing values in every column, in header order."""
    total = dataset.n_rows
    results = []
    for header in dataset.headers:
        values = dataset.column(header) or []
        missing = sum(1 for value in values if is_missing(value))
        results.append(
            MissingInfo(name=header, missing=missing, total=total, pct=_percentage(missing, total))
        )
    return results


def only_missing(infos: Sequence[MissingInfo]) -> list[MissingInfo]:
    """Keep only the columns that have at least one missing value."""
    return [info for info in infos if info.missing > 0]


def row_fingerprint(dataset: Dataset, row: Sequence[str]) -> str:
    """Encode which columns of a row are missing as a string of '0'/'1' characters."""
    return "".join("1" if flag else "0" for flag in dataset.missing_mask(row))


def missing_patterns(dataset: Dataset) -> MissingPatternReport:
    """Find which columns tend to be missing together.

    Each row is reduced to a fingerprint of its missing columns. Fingerprints are tallied in
    first-seen order, the all-present fingerprint is dropped, and the ten most frequent remaining
    fingerprints are reported as column-name lists. Equal counts keep first-seen order.
    """
    total = dataset.n_rows
    complete = "0" * dataset.n_cols
    rows_with_missing = 0
    pattern_counts: dict[str, int] = {}

    for row in dataset.rows:
        pattern = row_fingerprint(dataset, row)
        if pattern != complete:
            rows_with_missing += 1
        pattern_counts[pattern] = pattern_counts.get(pattern, 0) + 1

    ranked = sorted(
        ((pattern, count) for pattern, count in pattern_counts.items() if pattern != complete),
        key=lambda item: item[1],
        reverse=True,
    )

    patterns = [
        MissingPattern(
            columns=[dataset.headers[idx] for idx, bit in enumerate(pattern) if bit == "1"],
            count=count,
        )
        for pattern, count in ranked[:TOP_PATTERNS_LIMIT]
    ]

    logger.debug(
        "Found %d distinct missing patterns across %d rows", len(ranked), rows_with_missing
    )

    return MissingPatternReport(
        total_rows=total,
        rows_with_missing=rows_with_missing,
        complete_rows=pattern_counts.get(complete, 0),
        pct_with_missing=_percentage(rows_with_missing, total),
        patterns=patterns,
    )
