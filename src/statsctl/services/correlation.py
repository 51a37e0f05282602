"""Pearson correlation over pairwise-complete observations."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from ..models.dataset import Dataset
from ..models.statistics_models import CorrelationMatrix, CorrelationPair
from .type_inference import numeric_columns

logger = logging.getLogger(__name__)


def complete_pairs(
    x_all: Sequence[float | None], y_all: Sequence[float | None]
) -> list[tuple[float, float]]:
    """Keep the row positions where both values are present."""
    return [(x, y) for x, y in zip(x_all, y_all) if x is not None and y is not None]


def pearson_correlation(x_all: Sequence[float | None], y_all: Sequence[float | None]) -> float:
    """Pearson correlation coefficient between two numeric column views.

    Only rows where both values are present are used, and the means are taken over those rows.
    Returns NaN when fewer than two complete pairs remain or when either side is constant.
    """
    pairs = complete_pairs(x_all, y_all)
    if len(pairs) < 2:
        return math.nan

    data = np.asarray(pairs, dtype=float)
    dx = data[:, 0] - data[:, 0].mean()
    dy = data[:, 1] - data[:, 1].mean()

    cov = float(np.sum(dx * dy))
    var_x = float(np.sum(dx * dx))
    var_y = float(np.sum(dy * dy))

    if var_x == 0.0 or var_y == 0.0:
        return math.nan

    return cov / (math.sqrt(var_x) * math.sqrt(var_y))


def correlation_matrix(dataset: Dataset, columns: Sequence[str] | None = None) -> CorrelationMatrix:
    """Compute the correlation matrix for numeric columns.

    Args:
        dataset: Dataset to analyze
        columns: Optional explicit column names; names not in the dataset are dropped. When
            omitted, every column inferred as Numeric is used.

    Returns:
        Symmetric matrix with 1.0 on the diagonal
    """
    if columns is not None:
        col_names = [col for col in columns if dataset.has_column(col)]
    else:
        col_names = numeric_columns(dataset)

    data = [dataset.numeric_column(col) or [] for col in col_names]
    n = len(col_names)
    matrix = [[0.0] * n for _ in range(n)]

    for i in range(n):
        matrix[i][i] = 1.0
        for j in range(i + 1, n):
            r = pearson_correlation(data[i], data[j])
            matrix[i][j] = r
            matrix[j][i] = r

    logger.debug("Computed %dx%d correlation matrix", n, n)
    return CorrelationMatrix(columns=col_names, matrix=matrix)


def high_correlations(cm: CorrelationMatrix, threshold: float) -> list[CorrelationPair]:
    """Find column pairs whose absolute correlation reaches a threshold.

    Pairs are taken from the upper triangle in row-major order, NaN coefficients are skipped, and
    the result is sorted by descending absolute value. Equal magnitudes keep row-major order.
    """
    result = []
    n = len(cm.columns)
    for i in range(n):
        for j in range(i + 1, n):
            r = cm.matrix[i][j]
            if not math.isnan(r) and abs(r) >= threshold:
                result.append(CorrelationPair(column_a=cm.columns[i], column_b=cm.columns[j], r=r))

    result.sort(key=lambda pair: abs(pair.r), reverse=True)
    return result
