"""Tests for the logging configuration module."""

import json
from pathlib import Path

import pytest
import structlog

from patch_speller.config.schema import SpellerSettings
from patch_speller.utils.logging import (
    SERVICE_NAME,
    LogFormat,
    LogLevel,
    add_service_context,
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    unbind_context,
)


@pytest.fixture(autouse=True)
def reset_context():
    """Leave no bound context behind."""
    yield
    clear_context()


class TestAddServiceContext:
    """Tests for the add_service_context processor."""

    def test_adds_service_name(self) -> None:
        """Test that every entry names the service."""
        result = add_service_context(None, "info", {"event": "test"})  # type: ignore
        assert result["service"] == SERVICE_NAME
        assert result["event"] == "test"


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_with_console_format(self) -> None:
        """Test configuration with console format."""
        configure_logging(level=LogLevel.DEBUG, log_format=LogFormat.CONSOLE)
        # Should not raise

    def test_configure_with_string_values(self) -> None:
        """Test configuration with string values."""
        configure_logging(level="warning", log_format="JSON")
        # Should not raise

    def test_invalid_level_rejected(self) -> None:
        """Test that unknown levels are refused."""
        with pytest.raises(ValueError):
            configure_logging(level="VERBOSE")

    def test_json_output_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that JSON entries go to stderr with context attached."""
        configure_logging(level=LogLevel.INFO, log_format=LogFormat.JSON)
        bind_context(file_path="app/models/user.rb")

        structlog.get_logger("test_json_output").info("spell_run_complete", findings_emitted=2)

        captured = capsys.readouterr()
        assert captured.out == ""
        entry = json.loads(captured.err.strip().splitlines()[-1])
        assert entry["event"] == "spell_run_complete"
        assert entry["findings_emitted"] == 2
        assert entry["file_path"] == "app/models/user.rb"
        assert entry["service"] == SERVICE_NAME
        assert entry["level"] == "info"

    def test_level_filters_entries(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that entries below the configured level are dropped."""
        configure_logging(level=LogLevel.WARNING, log_format=LogFormat.JSON)

        structlog.get_logger("test_level_filter").info("misspelling_found", word="recieve")

        assert capsys.readouterr().err == ""

    def test_configure_with_file_logging(self, tmp_path: Path) -> None:
        """Test configuration with file logging."""
        log_file = tmp_path / "logs" / "speller.log"
        configure_logging(
            level=LogLevel.INFO,
            log_format=LogFormat.JSON,
            file_path=log_file,
        )

        structlog.get_logger("test_file_logging").warning("patch_skipped", reason="files_to_lint")

        assert "patch_skipped" in log_file.read_text()

    def test_configure_from_settings(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Test that command line overrides win over settings."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PATCH_SPELLER_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("PATCH_SPELLER_LOG_FORMAT", "console")

        configure_from_settings(SpellerSettings(), debug=True, log_format="json")
        structlog.get_logger("test_from_settings").debug("dictionary_loaded", language="en_US")

        entry = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert entry["event"] == "dictionary_loaded"
        assert entry["level"] == "debug"


class TestContextFunctions:
    """Tests for context binding functions."""

    def test_bind_and_clear_context(self) -> None:
        """Test binding and clearing context."""
        bind_context(file_path="a.rb", run_id="1")
        assert structlog.contextvars.get_contextvars() == {"file_path": "a.rb", "run_id": "1"}

        clear_context()

        assert structlog.contextvars.get_contextvars() == {}

    def test_unbind_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test unbinding specific context keys."""
        configure_logging(level=LogLevel.INFO, log_format=LogFormat.JSON)
        bind_context(key1="value1", key2="value2")
        unbind_context("key1")

        structlog.get_logger("test_unbind").info("event")

        entry = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert "key1" not in entry
        assert entry["key2"] == "value2"


class TestLogLevel:
    """Tests for LogLevel enum."""

    def test_log_levels(self) -> None:
        """Test that all expected log levels exist."""
        assert LogLevel.DEBUG.value == "DEBUG"
        assert LogLevel.INFO.value == "INFO"
        assert LogLevel.WARNING.value == "WARNING"
        assert LogLevel.ERROR.value == "ERROR"
        assert LogLevel.CRITICAL.value == "CRITICAL"


class TestLogFormat:
    """Tests for LogFormat enum."""

    def test_log_formats(self) -> None:
        """Test that all expected formats exist."""
        assert LogFormat.JSON.value == "json"
        assert LogFormat.CONSOLE.value == "console"
