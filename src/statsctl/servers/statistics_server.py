"""Statistics server for statsctl using FastMCP.

Every tool takes CSV/TSV text, loads it into a Dataset, runs one analysis and returns a structured
response. Degenerate data (empty columns, constant values, missing pairs) produces NaN or "no data"
results; only unusable requests surface as ``ToolError``.
"""

from __future__ import annotations

import logging
from typing import Annotated, Literal

from fastmcp import Context, FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from ..core.settings import get_settings
from ..exceptions import ColumnNotFoundError, InvalidParameterError, StatsctlError
from ..models.dataset import Dataset
from ..models.statistics_models import ColumnType
from ..models.tool_responses import (
    CategoricalSummaryResult,
    ColumnTypesResult,
    ComparisonResult,
    CorrelationResult,
    MissingPatternsResult,
    MissingReportResult,
    PlotResult,
    StatisticsResult,
)
from ..services import comparison, correlation, missing_values, plotting, statistics_service
from ..services.io_operations import load_dataset_from_content
from ..services.type_inference import infer_types

logger = logging.getLogger(__name__)

PLOT_ALIASES: dict[str, Literal["histogram", "boxplot", "scatter"]] = {
    "histogram": "histogram",
    "hist": "histogram",
    "boxplot": "boxplot",
    "box": "boxplot",
    "scatter": "scatter",
}

ContentArg = Annotated[str, Field(description="CSV or TSV data as string content")]
DelimiterArg = Annotated[
    str | None,
    Field(description="Column delimiter; detected from the header line (tab or comma) if omitted"),
]
ColumnsArg = Annotated[
    list[str] | None,
    Field(description="Columns to analyze; unknown names are skipped"),
]


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def _load(content: str, delimiter: str | None) -> Dataset:
    """Load request content, converting load failures into tool errors."""
    try:
        return load_dataset_from_content(content, delimiter)
    except StatsctlError as e:
        logger.error(f"Failed to load content: {e.message}")
        raise ToolError(e.message) from e


def _require_column(dataset: Dataset, column: str) -> None:
    if not dataset.has_column(column):
        raise ColumnNotFoundError(column, list(dataset.headers))


# ============================================================================
# STATISTICAL OPERATIONS
# ============================================================================


async def get_statistics(
    content: ContentArg,
    columns: ColumnsArg = None,
    delimiter: DelimiterArg = None,
    ctx: Context | None = None,  # noqa: ARG001
) -> StatisticsResult:
    """Get descriptive statistics (count, missing, mean, std, min, Q1, median, Q3, max).

    Without ``columns`` every column inferred as numeric is described. Columns without any valid
    number report NaN statistics with count 0.
    """
    dataset = _load(content, delimiter)
    try:
        if columns:
            stats = statistics_service.describe_selected(dataset, columns)
        else:
            stats = statistics_service.describe_all(dataset)

        return StatisticsResult(
            statistics=stats,
            column_count=len(stats),
            total_rows=dataset.n_rows,
        )
    except Exception as e:
        logger.error(f"Error calculating statistics: {e!s}")
        raise ToolError(f"Error calculating statistics: {e}") from e


async def get_categorical_summary(
    content: ContentArg,
    columns: ColumnsArg = None,
    delimiter: DelimiterArg = None,
    ctx: Context | None = None,  # noqa: ARG001
) -> CategoricalSummaryResult:
    """Get value counts (top 10 values, unique and missing counts) for categorical columns.

    Without ``columns`` every column not inferred as numeric is summarized.
    """
    dataset = _load(content, delimiter)
    try:
        if columns:
            names = list(columns)
        else:
            names = [
                info.name for info in infer_types(dataset) if info.col_type != ColumnType.NUMERIC
            ]

        summaries = [
            summary
            for name in names
            if (summary := statistics_service.categorical_summary(dataset, name)) is not None
        ]
        return CategoricalSummaryResult(summaries=summaries, total_rows=dataset.n_rows)
    except Exception as e:
        logger.error(f"Error summarizing categorical columns: {e!s}")
        raise ToolError(f"Error summarizing categorical columns: {e}") from e


async def get_correlation_matrix(
    content: ContentArg,
    columns: ColumnsArg = None,
    min_correlation: Annotated[
        float | None,
        Field(description="Minimum |r| reported as a high correlation (default from settings)"),
    ] = None,
    delimiter: DelimiterArg = None,
    ctx: Context | None = None,  # noqa: ARG001
) -> CorrelationResult:
    """Calculate the Pearson correlation matrix using pairwise complete observations.

    Pairs with fewer than two complete observations, or with a constant side, have a NaN
    coefficient (serialized as null).
    """
    dataset = _load(content, delimiter)
    threshold = (
        min_correlation if min_correlation is not None else get_settings().correlation_threshold
    )
    try:
        cm = correlation.correlation_matrix(dataset, columns or None)
        if not cm.columns:
            raise InvalidParameterError(
                "columns", str(columns), "No numeric columns found for correlation analysis"
            )

        return CorrelationResult(
            correlation=cm,
            threshold=threshold,
            high_correlations=correlation.high_correlations(cm, threshold),
        )
    except InvalidParameterError as e:
        logger.error(f"Correlation calculation failed: {e.message}")
        raise ToolError(e.message) from e
    except Exception as e:
        logger.error(f"Error calculating correlation matrix: {e!s}")
        raise ToolError(f"Error calculating correlation matrix: {e}") from e


async def infer_column_types(
    content: ContentArg,
    delimiter: DelimiterArg = None,
    ctx: Context | None = None,  # noqa: ARG001
) -> ColumnTypesResult:
    """Infer each column's type (Numeric, Boolean or Categorical) with its distinct levels."""
    dataset = _load(content, delimiter)
    try:
        return ColumnTypesResult(columns=infer_types(dataset))
    except Exception as e:
        logger.error(f"Error inferring column types: {e!s}")
        raise ToolError(f"Error inferring column types: {e}") from e


async def get_missing_report(
    content: ContentArg,
    only_missing: Annotated[
        bool, Field(description="Only report columns with at least one missing value")
    ] = False,
    delimiter: DelimiterArg = None,
    ctx: Context | None = None,  # noqa: ARG001
) -> MissingReportResult:
    """Count missing values per column and the share of rows with any missing value."""
    dataset = _load(content, delimiter)
    try:
        infos = missing_values.analyze_missing(dataset)
        if only_missing:
            infos = missing_values.only_missing(infos)
        report = missing_values.missing_patterns(dataset)

        return MissingReportResult(
            columns=infos,
            rows_with_missing=report.rows_with_missing,
            pct_with_missing=report.pct_with_missing,
        )
    except Exception as e:
        logger.error(f"Error analyzing missing data: {e!s}")
        raise ToolError(f"Error analyzing missing data: {e}") from e


async def get_missing_patterns(
    content: ContentArg,
    delimiter: DelimiterArg = None,
    ctx: Context | None = None,  # noqa: ARG001
) -> MissingPatternsResult:
    """Show which columns tend to be missing together (top 10 co-occurrence patterns)."""
    dataset = _load(content, delimiter)
    try:
        return MissingPatternsResult(report=missing_values.missing_patterns(dataset))
    except Exception as e:
        logger.error(f"Error analyzing missing patterns: {e!s}")
        raise ToolError(f"Error analyzing missing patterns: {e}") from e


async def plot_column(
    content: ContentArg,
    columns: Annotated[
        list[str], Field(description="One column for histogram/boxplot, two (x, y) for scatter")
    ],
    plot_type: Annotated[
        str, Field(description="histogram, boxplot or scatter ('hist' and 'box' are aliases)")
    ] = "histogram",
    width: Annotated[int | None, Field(description="Width budget in characters")] = None,
    height: Annotated[int | None, Field(description="Height budget in rows")] = None,
    delimiter: DelimiterArg = None,
    ctx: Context | None = None,  # noqa: ARG001
) -> PlotResult:
    """Render a terminal plot of one or two numeric columns."""
    dataset = _load(content, delimiter)
    settings = get_settings()
    try:
        kind = PLOT_ALIASES.get(plot_type.lower())
        if kind is None:
            raise InvalidParameterError(
                "plot_type", plot_type, "Use one of: histogram, boxplot, scatter"
            )
        if not columns:
            raise InvalidParameterError("columns", "[]", "At least one column is required")

        if kind == "histogram":
            _require_column(dataset, columns[0])
            plot = plotting.histogram(
                dataset,
                columns[0],
                width or settings.histogram_width,
                height or settings.histogram_height,
            )
            used = columns[:1]
        elif kind == "boxplot":
            _require_column(dataset, columns[0])
            plot = plotting.boxplot(dataset, columns[0], width or settings.boxplot_width)
            used = columns[:1]
        else:
            if len(columns) < 2:
                raise InvalidParameterError(
                    "columns", str(columns), "Scatter plot requires two columns: x, y"
                )
            _require_column(dataset, columns[0])
            _require_column(dataset, columns[1])
            plot = plotting.scatter(
                dataset,
                columns[0],
                columns[1],
                width or settings.scatter_width,
                height or settings.scatter_height,
            )
            used = columns[:2]

        return PlotResult(plot_type=kind, columns=used, plot=plot or "")
    except (ColumnNotFoundError, InvalidParameterError) as e:
        logger.error(f"Plot failed: {e.message}")
        raise ToolError(e.message) from e
    except Exception as e:
        logger.error(f"Error rendering plot: {e!s}")
        raise ToolError(f"Error rendering plot: {e}") from e


async def compare_datasets(
    first_content: Annotated[str, Field(description="First CSV/TSV dataset")],
    second_content: Annotated[str, Field(description="Second CSV/TSV dataset")],
    columns: ColumnsArg = None,
    first_label: Annotated[str, Field(description="Label for the first dataset")] = "first",
    second_label: Annotated[str, Field(description="Label for the second dataset")] = "second",
    delimiter: DelimiterArg = None,
    ctx: Context | None = None,  # noqa: ARG001
) -> ComparisonResult:
    """Compare statistics and missing counts of two datasets column by column.

    Differences are reported as second minus first.
    """
    first = _load(first_content, delimiter)
    second = _load(second_content, delimiter)
    try:
        result = comparison.compare_datasets(
            first, second, columns or None, labels=(first_label, second_label)
        )
        return ComparisonResult(comparison=result)
    except Exception as e:
        logger.error(f"Error comparing datasets: {e!s}")
        raise ToolError(f"Error comparing datasets: {e}") from e


# ============================================================================
# FASTMCP SERVER SETUP
# ============================================================================


statistics_server = FastMCP(
    "statsctl-Statistics",
    instructions=(
        "Descriptive statistics, correlation, missing-data and plotting tools for CSV/TSV content"
    ),
)

statistics_server.tool(name="get_statistics")(get_statistics)
statistics_server.tool(name="get_categorical_summary")(get_categorical_summary)
statistics_server.tool(name="get_correlation_matrix")(get_correlation_matrix)
statistics_server.tool(name="infer_column_types")(infer_column_types)
statistics_server.tool(name="get_missing_report")(get_missing_report)
statistics_server.tool(name="get_missing_patterns")(get_missing_patterns)
statistics_server.tool(name="plot_column")(plot_column)
statistics_server.tool(name="compare_datasets")(compare_datasets)
