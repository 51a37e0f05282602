"""Loading delimited text into a Dataset.

Every cell is read as text: type inference happens later, over the raw strings, so pandas must not
convert values or turn "NA"-style tokens into NaN on its own.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path

import pandas as pd

from ..core.settings import get_settings
from ..exceptions import DataLoadError, EmptyDataError
from ..models.dataset import Dataset

logger = logging.getLogger(__name__)


def detect_delimiter(first_line: str) -> str:
    """Pick tab when the header line has more tabs than commas, otherwise comma."""
    if first_line.count("\t") > first_line.count(","):
        return "\t"
    return ","


def parse_delimited(content: str, delimiter: str | None = None, source: str = "input") -> Dataset:
    """Parse CSV/TSV text into a Dataset.

    The header line is read as an ordinary row, so blank or repeated column names are kept as
    written instead of being renamed by pandas. Headers and cells are trimmed. Short rows are padded
    with empty cells and long rows are truncated to the header width.

    Raises:
        EmptyDataError: If the content has no header line
        DataLoadError: If the content cannot be parsed or exceeds the row limit
    """
    if not content or not content.strip():
        raise EmptyDataError(source)

    first_line = next(line for line in content.splitlines() if line.strip())
    sep = delimiter or detect_delimiter(first_line)

    read_options = {
        "sep": sep,
        "header": None,
        "dtype": str,
        "keep_default_na": False,
        "skipinitialspace": True,
        "index_col": False,
        "engine": "python",
    }
    try:
        width = len(pd.read_csv(StringIO(content), nrows=1, **read_options).columns)
        df = pd.read_csv(
            StringIO(content), on_bad_lines=lambda fields: fields[:width], **read_options
        )
    except pd.errors.EmptyDataError as e:
        raise EmptyDataError(source) from e
    except ValueError as e:
        # ParserError and invalid separators both derive from ValueError
        msg = f"Failed to parse {source}: {e}"
        raise DataLoadError(msg) from e

    if df.empty:
        raise EmptyDataError(source)

    max_rows = get_settings().max_rows
    n_rows = len(df) - 1
    if n_rows > max_rows:
        msg = f"{source} too large: {n_rows:,} rows exceeds limit of {max_rows:,} rows"
        raise DataLoadError(msg)

    df = df.fillna("").map(str.strip)
    body = df.iloc[1:].set_axis(list(df.iloc[0]), axis=1)
    dataset = Dataset.from_dataframe(body)

    logger.info("Loaded %d rows and %d columns from %s", dataset.n_rows, dataset.n_cols, source)
    return dataset


def load_dataset_from_content(content: str, delimiter: str | None = None) -> Dataset:
    """Load a dataset from CSV/TSV text held in memory."""
    return parse_delimited(content, delimiter, source="content")


def load_dataset_from_file(path: str | Path, delimiter: str | None = None) -> Dataset:
    """Load a dataset from a CSV/TSV file.

    Raises:
        DataLoadError: If the file cannot be read
        EmptyDataError: If the file is empty
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot open file '{file_path}': {e}"
        raise DataLoadError(msg) from e

    return parse_delimited(content, delimiter, source=f"file '{file_path}'")
