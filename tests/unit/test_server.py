"""Unit tests for server.py module."""

from unittest.mock import patch

import pytest

from statsctl.server import INSTRUCTIONS, main


def test_instructions_mention_every_tool() -> None:
    """Test the server instructions name the tools."""
    for tool in (
        "infer_column_types",
        "get_statistics",
        "get_categorical_summary",
        "get_missing_report",
        "get_missing_patterns",
        "get_correlation_matrix",
        "plot_column",
    ):
        assert tool in INSTRUCTIONS


class TestMainFunction:
    """Tests for main entry point function."""

    @patch("statsctl.server.logger")
    @patch("statsctl.server.mcp")
    def test_main_stdio_transport(self, mock_mcp, mock_logger, monkeypatch) -> None:
        """Test main function with stdio transport."""
        monkeypatch.setattr("sys.argv", ["statsctl"])

        main()

        mock_logger.info.assert_called_once()
        mock_mcp.run.assert_called_once_with()

    @patch("statsctl.server.mcp")
    def test_main_http_transport(self, mock_mcp, monkeypatch) -> None:
        """Test main function with HTTP transport."""
        monkeypatch.setattr(
            "sys.argv", ["statsctl", "--transport", "http", "--host", "0.0.0.0", "--port", "9000"]
        )

        main()

        mock_mcp.run.assert_called_once_with(transport="http", host="0.0.0.0", port=9000)

    @patch("statsctl.server.mcp")
    def test_log_level_default_from_settings(self, mock_mcp, monkeypatch) -> None:
        """Test the log level defaults to the configured one."""
        monkeypatch.setenv("STATSCTL_LOG_LEVEL", "debug")
        monkeypatch.setattr("sys.argv", ["statsctl"])

        with patch("statsctl.server.logging.basicConfig") as mock_basic_config:
            main()

        assert mock_basic_config.call_args.kwargs["level"] == "DEBUG"
        mock_mcp.run.assert_called_once_with()

    def test_invalid_transport(self, monkeypatch) -> None:
        """Test an unknown transport exits."""
        monkeypatch.setattr("sys.argv", ["statsctl", "--transport", "carrier-pigeon"])

        with pytest.raises(SystemExit):
            main()
