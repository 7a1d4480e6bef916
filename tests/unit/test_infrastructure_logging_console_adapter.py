"""Unit tests for ConsoleAdapter (structured stderr logging).

Tests cover:
- LoggerProtocol methods delegate to structlog with context
- error() exception details
- bind() returns a new adapter carrying context
- Real output: JSON rendering, level filtering, stdout kept clean
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from aws_pass.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.mark.unit
class TestConsoleAdapterDelegation:
    """Test ConsoleAdapter forwards calls to structlog."""

    def test_info_logs_message_with_context(self):
        """Test info() logs message with structured context."""
        with patch("aws_pass.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.info("Secret created", secret_name="github", secret_id="arn:1")

            mock_logger.info.assert_called_once_with(
                "Secret created", secret_name="github", secret_id="arn:1"
            )

    def test_debug_and_warning_delegate(self):
        """Test debug() and warning() reach the matching structlog methods."""
        with patch("aws_pass.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.debug("Listed secrets", page_count=2)
            adapter.warning("Session credential refresh failed")

            mock_logger.debug.assert_called_once_with("Listed secrets", page_count=2)
            mock_logger.warning.assert_called_once_with("Session credential refresh failed")

    def test_error_adds_exception_details(self):
        """Test error() flattens the exception into context."""
        with patch("aws_pass.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("STS call failed", error=RuntimeError("boom"), operation="get_session_token")

            mock_logger.error.assert_called_once_with(
                "STS call failed",
                operation="get_session_token",
                error_type="RuntimeError",
                error_message="boom",
            )

    def test_error_without_exception(self):
        """Test error() without an exception passes context unchanged."""
        with patch("aws_pass.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("Secret name is ambiguous", secret_name="db")

            mock_logger.error.assert_called_once_with(
                "Secret name is ambiguous", secret_name="db"
            )

    def test_bind_returns_new_adapter(self):
        """Test bind() wraps the bound structlog logger in a new adapter."""
        with patch("aws_pass.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(component="password_store")
            bound.info("Store initialized")

            assert isinstance(bound, ConsoleAdapter)
            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(component="password_store")
            bound_logger.info.assert_called_once_with("Store initialized")
            mock_logger.info.assert_not_called()


@pytest.mark.unit
class TestConsoleAdapterOutput:
    """Test rendered output on stderr."""

    def test_json_output_goes_to_stderr(self, capsys):
        """Test JSON renderer writes one parseable line to stderr."""
        adapter = ConsoleAdapter(use_json=True, level="DEBUG")
        adapter.info("Secret removed", secret_name="github")

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record["event"] == "Secret removed"
        assert record["secret_name"] == "github"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_messages_below_level_are_dropped(self, capsys):
        """Test level filtering suppresses lower-severity messages."""
        adapter = ConsoleAdapter(use_json=True, level="WARNING")
        adapter.info("hidden")
        adapter.warning("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_unknown_level_falls_back_to_warning(self, capsys):
        """Test an unrecognized level name behaves like WARNING."""
        adapter = ConsoleAdapter(use_json=True, level="chatty")
        adapter.info("hidden")
        adapter.error("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_bound_context_is_rendered(self, capsys):
        """Test context bound via bind() appears in every record."""
        adapter = ConsoleAdapter(use_json=True, level="INFO").bind(component="secret_resolver")
        adapter.info("Resolved")

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["component"] == "secret_resolver"
