"""Analysis services for statsctl.

Each service is a set of pure functions over a ``Dataset`` that return immutable result records
or rendered text.
"""

from .comparison import compare_datasets
from .correlation import correlation_matrix, high_correlations, pearson_correlation
from .io_operations import load_dataset_from_content, load_dataset_from_file
from .missing_values import analyze_missing, missing_patterns, only_missing
from .plotting import boxplot, histogram, scatter
from .statistics_service import (
    categorical_summary,
    describe,
    describe_all,
    describe_selected,
    percentile,
    std_dev,
)
from .type_inference import infer_types, numeric_columns

__all__ = [
    "analyze_missing",
    "boxplot",
    "categorical_summary",
    "compare_datasets",
    "correlation_matrix",
    "describe",
    "describe_all",
    "describe_selected",
    "high_correlations",
    "histogram",
    "infer_types",
    "load_dataset_from_content",
    "load_dataset_from_file",
    "missing_patterns",
    "numeric_columns",
    "only_missing",
    "pearson_correlation",
    "percentile",
    "scatter",
    "std_dev",
]
