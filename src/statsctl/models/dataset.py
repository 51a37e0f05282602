"""In-memory tabular dataset of raw text cells.

Every cell is kept exactly as loaded (a string). Numeric views are derived on request and never
cached, so a Dataset can be shared between concurrent analyses as long as nobody mutates it.
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from ..utils.validators import is_missing, parse_number


class Dataset:
    """Ordered column names plus rows of raw string cells."""

    def __init__(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        self._headers: tuple[str, ...] = tuple(headers)
        self._rows: tuple[tuple[str, ...], ...] = tuple(tuple(row) for row in rows)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> Dataset:
        """Build a dataset from a DataFrame, rendering every cell as text.

        Null cells become empty strings so they are classified as missing.
        """
        headers = [str(col) for col in df.columns]
        rows = [
            ["" if pd.isna(value) else str(value) for value in record]
            for record in df.itertuples(index=False, name=None)
        ]
        return cls(headers, rows)

    @property
    def headers(self) -> tuple[str, ...]:
        return self._headers

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        return self._rows

    @property
    def n_rows(self) -> int:
        return len(self._rows)

    @property
    def n_cols(self) -> int:
        return len(self._headers)

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"Dataset(columns={list(self._headers)!r}, rows={len(self._rows)})"

    def column_index(self, name: str) -> int | None:
        """Get the position of a column, or None if it does not exist."""
        try:
            return self._headers.index(name)
        except ValueError:
            return None

    def has_column(self, name: str) -> bool:
        return name in self._headers

    @staticmethod
    def cell(row: Sequence[str], index: int) -> str:
        """Read a cell by position; cells past the end of a short row read as empty."""
        return row[index] if index < len(row) else ""

    def column(self, name: str) -> list[str] | None:
        """Get the raw cells of a column in row order."""
        idx = self.column_index(name)
        if idx is None:
            return None
        return [self.cell(row, idx) for row in self._rows]

    def numeric_column(self, name: str) -> list[float | None] | None:
        """Get a column as numbers; missing or unparseable cells are None."""
        values = self.column(name)
        if values is None:
            return None
        return [parse_number(value) for value in values]

    def valid_numeric_column(self, name: str) -> list[float] | None:
        """Get only the present numeric values of a column."""
        values = self.numeric_column(name)
        if values is None:
            return None
        return [value for value in values if value is not None]

    def missing_mask(self, row: Sequence[str]) -> list[bool]:
        """Flag which columns of a row hold a missing value."""
        return [is_missing(self.cell(row, idx)) for idx in range(len(self._headers))]

    def select_columns(self, names: Sequence[str]) -> Dataset:
        """Get a new dataset restricted to the named columns; unknown names are dropped."""
        indices = [idx for idx in (self.column_index(name) for name in names) if idx is not None]
        headers = [self._headers[idx] for idx in indices]
        rows = [[self.cell(row, idx) for idx in indices] for row in self._rows]
        return Dataset(headers, rows)
