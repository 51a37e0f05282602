"""Result records produced by the statsctl analysis services.

Each record is an immutable value built fresh per call. Undefined statistics are NaN rather than
None, so a record always has the same shape whether or not its column held usable data. NaN is
serialized as null, and the JSON schema of those fields allows null.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, WithJsonSchema


def _nan_to_none(value: float) -> float | None:
    return None if math.isnan(value) else value


# A float that may be NaN in Python and is null on the wire
NullableFloat = Annotated[
    float,
    PlainSerializer(_nan_to_none, return_type=float | None),
    WithJsonSchema({"anyOf": [{"type": "number"}, {"type": "null"}]}),
]


class FrozenModel(BaseModel):
    """Base for immutable result records."""

    model_config = ConfigDict(frozen=True)


class ColumnType(str, Enum):
    """Inferred type of a column."""

    NUMERIC = "Numeric"
    BOOLEAN = "Boolean"
    CATEGORICAL = "Categorical"

    def __str__(self) -> str:
        return self.value


class DescriptiveStats(FrozenModel):
    """Descriptive statistics for a single numeric column."""

    name: str
    count: int = Field(description="Number of present numeric values")
    missing: int = Field(description="Number of missing or unparseable cells")
    mean: NullableFloat
    std_dev: NullableFloat = Field(description="Sample standard deviation (0.0 below two values)")
    min: NullableFloat
    q1: NullableFloat
    median: NullableFloat
    q3: NullableFloat
    max: NullableFloat


class CategoricalSummary(FrozenModel):
    """Value counts for a non-numeric column."""

    name: str
    total: int
    missing: int
    unique: int
    top_values: list[tuple[str, int]] = Field(
        description="Most frequent values, descending by count, ties in first-seen order"
    )


class ColumnTypeInfo(FrozenModel):
    """Inferred type and distinct levels of a column."""

    name: str
    col_type: ColumnType
    unique_count: int
    levels: list[str]


class CorrelationMatrix(FrozenModel):
    """Square Pearson correlation matrix over named columns."""

    columns: list[str]
    matrix: list[list[NullableFloat]] = Field(
        description="Coefficients by row, null where undefined"
    )


class CorrelationPair(FrozenModel):
    """A pair of columns and their correlation coefficient."""

    column_a: str
    column_b: str
    r: float


class MissingInfo(FrozenModel):
    """Missing-value count for one column."""

    name: str
    missing: int
    total: int
    pct: float


class MissingPattern(FrozenModel):
    """A set of columns that are missing together, and how many rows show it."""

    columns: list[str]
    count: int


class MissingPatternReport(FrozenModel):
    """Row-level co-occurrence of missing values."""

    total_rows: int
    rows_with_missing: int
    complete_rows: int = Field(description="Rows with no missing value in any column")
    pct_with_missing: float
    patterns: list[MissingPattern]


class ColumnComparison(FrozenModel):
    """Descriptive statistics of one column in two datasets."""

    name: str
    first: DescriptiveStats
    second: DescriptiveStats
    mean_diff: NullableFloat = Field(
        description="second.mean - first.mean, null if either is undefined"
    )


class MissingComparison(FrozenModel):
    """Missing-value counts of one column in two datasets."""

    name: str
    first: MissingInfo
    second: MissingInfo
    missing_diff: int = Field(description="second.missing - first.missing")


class DatasetComparison(FrozenModel):
    """Side-by-side comparison of two datasets."""

    first_label: str
    second_label: str
    columns: list[ColumnComparison]
    missing: list[MissingComparison]
