"""Pydantic response models for the statsctl MCP tools.

Each tool wraps one analysis record together with the context a client needs to read it (row
count, columns analyzed, thresholds applied).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .statistics_models import (
    CategoricalSummary,
    ColumnTypeInfo,
    CorrelationMatrix,
    CorrelationPair,
    DatasetComparison,
    DescriptiveStats,
    MissingInfo,
    MissingPatternReport,
)


class BaseToolResponse(BaseModel):
    """Base response model for all MCP tool operations."""

    success: bool = True


class StatisticsResult(BaseToolResponse):
    """Response model for descriptive statistics of numeric columns."""

    statistics: list[DescriptiveStats]
    column_count: int
    total_rows: int


class CategoricalSummaryResult(BaseToolResponse):
    """Response model for value counts of non-numeric columns."""

    summaries: list[CategoricalSummary]
    total_rows: int


class CorrelationResult(BaseToolResponse):
    """Response model for correlation matrix analysis."""

    correlation: CorrelationMatrix
    threshold: float
    high_correlations: list[CorrelationPair] = Field(
        description="Pairs with |r| >= threshold, strongest first"
    )


class ColumnTypesResult(BaseToolResponse):
    """Response model for column type inference."""

    columns: list[ColumnTypeInfo]


class MissingReportResult(BaseToolResponse):
    """Response model for per-column missing-value counts."""

    columns: list[MissingInfo]
    rows_with_missing: int
    pct_with_missing: float


class MissingPatternsResult(BaseToolResponse):
    """Response model for missing-value co-occurrence patterns."""

    report: MissingPatternReport


class PlotResult(BaseToolResponse):
    """Response model for a rendered terminal plot."""

    plot_type: Literal["histogram", "boxplot", "scatter"]
    columns: list[str]
    plot: str


class ComparisonResult(BaseToolResponse):
    """Response model for dataset comparison."""

    comparison: DatasetComparison
