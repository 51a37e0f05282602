"""Data models for statsctl."""

from __future__ import annotations

from .dataset import Dataset
from .statistics_models import (
    CategoricalSummary,
    ColumnComparison,
    ColumnType,
    ColumnTypeInfo,
    CorrelationMatrix,
    CorrelationPair,
    DatasetComparison,
    DescriptiveStats,
    MissingComparison,
    MissingInfo,
    MissingPattern,
    MissingPatternReport,
)

__all__ = [
    "CategoricalSummary",
    "ColumnComparison",
    "ColumnType",
    "ColumnTypeInfo",
    "CorrelationMatrix",
    "CorrelationPair",
    "Dataset",
    "DatasetComparison",
    "DescriptiveStats",
    "MissingComparison",
    "MissingInfo",
    "MissingPattern",
    "MissingPatternReport",
]
