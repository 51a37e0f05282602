"""Main FastMCP server for statsctl."""

from __future__ import annotations

import logging

from fastmcp import FastMCP

from ._version import __version__
from .core.settings import get_settings
from .servers.statistics_server import statistics_server

logger = logging.getLogger(__name__)

INSTRUCTIONS = """statsctl - quick statistical analysis of CSV/TSV data.

Pass the file content as text to any tool. Cells such as "", NA, N/A, null, NaN, ".", "-" and None
are treated as missing. Columns are inferred as Numeric (at least 80% of non-missing values are
numbers), Boolean (true/false/yes/no/1/0) or Categorical.

Typical workflow:
1. infer_column_types to see what each column holds
2. get_statistics and get_categorical_summary for summaries
3. get_missing_report and get_missing_patterns for data quality
4. get_correlation_matrix for relationships between numeric columns
5. plot_column for a quick histogram, boxplot or scatter plot
"""

mcp = FastMCP("statsctl", instructions=INSTRUCTIONS)
mcp.mount(statistics_server)


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================


def main() -> None:
    """Main entry point for the server."""
    import argparse

    parser = argparse.ArgumentParser(description="statsctl")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport method",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host for HTTP/SSE transport")
    parser.add_argument("--port", type=int, default=8000, help="Port for HTTP/SSE transport")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=get_settings().log_level.upper(),
        help="Logging level",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("statsctl").setLevel(args.log_level)

    logger.info(
        "Starting statsctl %s with %s transport (log level %s)",
        __version__,
        args.transport,
        args.log_level,
    )

    if args.transport == "stdio":
        mcp.run()
    else:
        mcp.run(transport=args.transport, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
