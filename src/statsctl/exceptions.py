"""Exception hierarchy for statsctl.

The analysis services never raise for degenerate data; these exceptions cover loading failures and
invalid requests at the tool boundary.
"""

from __future__ import annotations


class StatsctlError(Exception):
    """Base class for all statsctl errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyDataError(StatsctlError):
    """Input contained no data to analyze."""

    def __init__(self, source: str = "input") -> None:
        super().__init__(f"No data found in {source}")
        self.source = source


class DataLoadError(StatsctlError):
    """Input could not be read or parsed as delimited text."""


class ColumnNotFoundError(StatsctlError):
    """A requested column does not exist in the dataset."""

    def __init__(self, column: str, available: list[str] | None = None) -> None:
        message = f"Column '{column}' not found"
        if available:
            message += f". Available columns: {', '.join(available)}"
        super().__init__(message)
        self.column = column
        self.available = available or []


class InvalidParameterError(StatsctlError):
    """A request parameter has an unusable value."""

    def __init__(self, parameter: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value for '{parameter}' ({value}): {reason}")
        self.parameter = parameter
        self.value = value
        self.reason = reason
