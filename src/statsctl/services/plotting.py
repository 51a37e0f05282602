"""Terminal plots: histogram, boxplot and scatter.

All three map data values onto a grid of character cells through ``LinearBucketizer``. The plots
are pure functions of the column data and the size budget; they return a text block, or None when
a requested column does not exist.
"""

from __future__ import annotations

import logging
import math

from ..models.dataset import Dataset
from .correlation import complete_pairs
from .statistics_service import mean, percentile, std_dev

logger = logging.getLogger(__name__)

MIN_BINS = 5
MAX_HISTOGRAM_ROWS = 15
BOXPLOT_WIDTH_RANGE = (20, 60)
SCATTER_WIDTH_RANGE = (20, 60)
SCATTER_HEIGHT_RANGE = (8, 20)
WHISKER_IQR_FACTOR = 1.5

FULL_BAR = "██"
HALF_BAR = "▄▄"
EMPTY_BAR = "  "


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(value, high))


class LinearBucketizer:
    """Linear map from a data range [low, high] onto ``cells`` discrete positions.

    A zero-width range never divides by zero: floor binning uses a bucket width of 1.0 and
    nearest-cell scaling uses a span of 1.0, unless the caller asks for degenerate data to be
    centered.
    """

    def __init__(self, low: float, high: float, cells: int) -> None:
        self.low = low
        self.high = high
        self.cells = max(cells, 1)
        self.span = high - low

    @property
    def is_degenerate(self) -> bool:
        return self.span == 0.0

    @property
    def bucket_width(self) -> float:
        return self.span / self.cells if self.span > 0 else 1.0

    def _clamp_index(self, idx: int) -> int:
        return max(0, min(idx, self.cells - 1))

    def floor_index(self, value: float) -> int:
        """Bucket containing ``value``; the upper bound falls into the last bucket."""
        return self._clamp_index(math.floor((value - self.low) / self.bucket_width))

    def nearest_index(
        self, value: float, *, invert: bool = False, center_degenerate: bool = False
    ) -> int:
        """Nearest cell for ``value`` when ``low`` maps to 0 and ``high`` to ``cells - 1``.

        With ``invert`` the mapping runs from ``high`` at 0 down to ``low`` at the last cell, which
        is how screen rows are counted. Halves round up.
        """
        if self.is_degenerate and center_degenerate:
            return self.cells // 2
        span = self.span if self.span != 0.0 else 1.0
        offset = self.high - value if invert else value - self.low
        return self._clamp_index(math.floor(offset / span * (self.cells - 1) + 0.5))

    def cell_start(self, idx: int) -> float:
        """Lower data bound of a floor bucket."""
        return self.low + idx * self.bucket_width


def format_number_short(val: float) -> str:
    """Format a number compactly for axis labels (1.2M, 3.4k, 12, 0.5)."""
    if abs(val) >= 1_000_000.0:
        return f"{val / 1_000_000.0:.1f}M"
    if abs(val) >= 1_000.0:
        return f"{val / 1_000.0:.1f}k"
    if float(val).is_integer():
        return f"{val:.0f}"
    return f"{val:.1f}"


def _sturges_bins(n: int, width: int) -> int:
    if n <= 1:
        return 1
    bins = max(math.ceil(math.log2(n)) + 1, MIN_BINS)
    return max(min(bins, width // 2), 1)


def histogram(dataset: Dataset, name: str, width: int = 50, height: int = 12) -> str | None:
    """Render a vertical histogram of a numeric column.

    Args:
        dataset: Dataset holding the column
        name: Column to plot
        width: Character budget; at most ``width // 2`` bins are drawn
        height: Row budget for the bars (capped at 15)

    Returns:
        The rendered block, a "no valid numeric data" line for a column without numbers, or None
        if the column does not exist
    """
    present = dataset.valid_numeric_column(name)
    if present is None:
        return None
    if not present:
        return f"{name}: No valid numeric data"

    values = sorted(present)
    n = len(values)
    num_bins = _sturges_bins(n, width)
    bucketizer = LinearBucketizer(values[0], values[-1], num_bins)

    bins = [0] * num_bins
    for v in values:
        bins[bucketizer.floor_index(v)] += 1
    max_count = max(bins)

    lines = [f"{name}: Distribution (n={n})", ""]

    bar_height = max(min(height, MAX_HISTOGRAM_ROWS), 1)
    half_step = max_count / bar_height / 2.0
    for row in reversed(range(bar_height)):
        threshold = (row + 0.5) / bar_height * max_count
        if row == bar_height - 1:
            label = f"{max_count:>4}"
        elif row == 0:
            label = f"{0:>4}"
        elif row == bar_height // 2:
            label = f"{max_count // 2:>4}"
        else:
            label = " " * 4

        bars = []
        for count in bins:
            if count >= threshold:
                bars.append(FULL_BAR)
            elif count >= threshold - half_step:
                bars.append(HALF_BAR)
            else:
                bars.append(EMPTY_BAR)
        lines.append(f"{label}|{''.join(bars)}")

    lines.append("    └" + "──" * num_bins)

    label_step = max(num_bins // 5, 1)
    axis = []
    for i in range(num_bins):
        if i % label_step == 0:
            label = format_number_short(bucketizer.cell_start(i))
            pad = max(2 - max(len(label) - 2, 0), 0)
            axis.append(label + " " * pad)
        else:
            axis.append("  ")
    lines.append("     " + "".join(axis))

    lines.append("")
    lines.append(
        f"Mean: {mean(values):.2f} | Median: {percentile(values, 50.0):.2f} | "
        f"Std: {std_dev(values):.2f}"
    )
    return "\n".join(lines)


def boxplot(dataset: Dataset, name: str, width: int = 50) -> str | None:
    """Render a horizontal boxplot of a numeric column.

    Whiskers reach the most extreme values within 1.5 IQR of the box and never extend past the
    data. Values beyond the whiskers are drawn as outliers above the box.
    """
    present = dataset.valid_numeric_column(name)
    if present is None:
        return None
    if not present:
        return f"{name}: No valid numeric data"

    values = sorted(present)
    min_val = values[0]
    max_val = values[-1]
    q1 = percentile(values, 25.0)
    med = percentile(values, 50.0)
    q3 = percentile(values, 75.0)
    iqr = q3 - q1

    lower_bound = q1 - WHISKER_IQR_FACTOR * iqr
    upper_bound = q3 + WHISKER_IQR_FACTOR * iqr
    lower_whisker = next((v for v in values if v >= lower_bound), min_val)
    upper_whisker = next((v for v in reversed(values) if v <= upper_bound), max_val)
    outliers = [v for v in values if v < lower_whisker or v > upper_whisker]

    plot_width = _clamp(width, BOXPLOT_WIDTH_RANGE)
    bucketizer = LinearBucketizer(min_val, max_val, plot_width)

    def scale(v: float) -> int:
        return bucketizer.nearest_index(v, center_degenerate=True)

    outlier_line = [" "] * plot_width
    for o in outliers:
        outlier_line[scale(o)] = "o"

    lw = scale(lower_whisker)
    uq1 = scale(q1)
    um = scale(med)
    uq3 = scale(q3)
    uw = scale(upper_whisker)

    box_line = [" "] * plot_width
    for i in range(lw, uw + 1):
        box_line[i] = "─"
    for i in range(uq1, uq3 + 1):
        box_line[i] = "█"
    box_line[um] = "│"
    box_line[lw] = "├"
    box_line[uw] = "┤"

    min_label = format_number_short(min_val)
    max_label = format_number_short(max_val)

    lines = [
        f"{name}: Boxplot (n={len(values)})",
        "",
        "  " + "".join(outlier_line),
        "  " + "".join(box_line),
        "  " + "─" * plot_width,
        f"  {min_label:<{plot_width - len(max_label)}}{max_label}",
        "",
        f"Min: {min_val:.2f} | Q1: {q1:.2f} | Median: {med:.2f} | "
        f"Q3: {q3:.2f} | Max: {max_val:.2f}",
    ]
    if outliers:
        lines.append(f"Outliers: {len(outliers)} values")
    return "\n".join(lines)


def scatter(
    dataset: Dataset, x_name: str, y_name: str, width: int = 50, height: int = 15
) -> str | None:
    """Render a scatter plot of two numeric columns over their complete pairs.

    Cells are shaded by how many points land in them: ``●`` for more than three, ``◦`` for two or
    three, ``·`` for one.
    """
    x_all = dataset.numeric_column(x_name)
    y_all = dataset.numeric_column(y_name)
    if x_all is None or y_all is None:
        return None

    pairs = complete_pairs(x_all, y_all)
    if not pairs:
        return f"{x_name} vs {y_name}: No complete pairs of data"

    x_vals = [x for x, _ in pairs]
    y_vals = [y for _, y in pairs]
    x_min, x_max = min(x_vals), max(x_vals)
    y_min, y_max = min(y_vals), max(y_vals)

    plot_w = _clamp(width, SCATTER_WIDTH_RANGE)
    plot_h = _clamp(height, SCATTER_HEIGHT_RANGE)
    x_scale = LinearBucketizer(x_min, x_max, plot_w)
    y_scale = LinearBucketizer(y_min, y_max, plot_h)
    y_range = y_scale.span if not y_scale.is_degenerate else 1.0

    density: dict[tuple[int, int], int] = {}
    for x, y in pairs:
        cell = (y_scale.nearest_index(y, invert=True), x_scale.nearest_index(x))
        density[cell] = density.get(cell, 0) + 1

    grid = [[" "] * plot_w for _ in range(plot_h)]
    for (row, col), count in density.items():
        if count > 3:
            grid[row][col] = "●"
        elif count > 1:
            grid[row][col] = "◦"
        else:
            grid[row][col] = "·"

    lines = [f"{y_name} vs {x_name} (n={len(pairs)})", ""]
    for i, row in enumerate(grid):
        if i in (0, plot_h - 1, plot_h // 2):
            y_val = y_max - (i / (plot_h - 1)) * y_range
            lines.append(f"{y_val:>8.1f}│" + "".join(row))
        else:
            lines.append(" " * 8 + "│" + "".join(row))

    lines.append(" " * 8 + "└" + "─" * plot_w)
    x_min_label = f"{x_min:.1f}"
    x_max_label = f"{x_max:.1f}"
    lines.append(" " * 9 + f"{x_min_label:<{plot_w - len(x_max_label)}}{x_max_label}")
    lines.append(" " * 9 + f"{x_name:^{plot_w}}")

    logger.debug(
        "Scatter %s vs %s: %d points in %d cells", y_name, x_name, len(pairs), len(density)
    )
    return "\n".join(lines)
