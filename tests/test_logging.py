"""
Tests for structured logging configuration.
"""

import json
import sys

import pytest
from loguru import logger

from wildfly_monitor.common.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def clean_logging(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger.remove()
    logger.add(sys.stderr)


def read_entries(path):
    """Close the sinks so the file is flushed, then parse each JSON line."""
    logger.remove()
    lines = path.read_text(encoding="utf-8").splitlines()
    return [json.loads(line) for line in lines if line.strip()]


def entries_with(entries, message):
    return [entry for entry in entries if entry["message"] == message]


class TestFileSink:
    """Tests for JSON lines written to a log file."""

    def test_structured_fields(self, tmp_path):
        log_file = tmp_path / "logs" / "monitor.log"
        configure_logging(level="INFO", log_file=str(log_file))

        get_logger("tests.logging").info(
            "Change State", marker="Deployed", description="deployed"
        )

        [entry] = entries_with(read_entries(log_file), "Change State")
        assert entry["level"] == "INFO"
        assert entry["logger"] == "tests.logging"
        assert entry["marker"] == "Deployed"
        assert entry["description"] == "deployed"
        assert entry["timestamp"].endswith("Z")
        assert "_json" not in entry
        assert "logger_name" not in entry

    def test_bound_context(self, tmp_path):
        log_file = tmp_path / "monitor.log"
        configure_logging(level="INFO", log_file=str(log_file))

        bound = get_logger("tests.logging").bind(directory="/opt/deployments")
        bound.warning("Sampling slow", elapsed_ms=1500)

        [entry] = entries_with(read_entries(log_file), "Sampling slow")
        assert entry["level"] == "WARNING"
        assert entry["directory"] == "/opt/deployments"
        assert entry["elapsed_ms"] == 1500

    def test_bind_does_not_leak_into_parent(self, tmp_path):
        log_file = tmp_path / "monitor.log"
        configure_logging(level="INFO", log_file=str(log_file))

        parent = get_logger("tests.logging")
        parent.bind(directory="/opt/deployments")
        parent.info("Unbound")

        [entry] = entries_with(read_entries(log_file), "Unbound")
        assert "directory" not in entry

    def test_exception_is_serialized(self, tmp_path):
        log_file = tmp_path / "monitor.log"
        configure_logging(level="INFO", log_file=str(log_file))

        try:
            raise ValueError("bad marker")
        except ValueError:
            get_logger("tests.logging").exception("Dispatch failed", marker="Failed")

        [entry] = entries_with(read_entries(log_file), "Dispatch failed")
        assert entry["level"] == "ERROR"
        assert entry["marker"] == "Failed"
        assert entry["exception"] == {"type": "ValueError", "value": "bad marker"}

    def test_non_json_values_are_stringified(self, tmp_path):
        log_file = tmp_path / "monitor.log"
        configure_logging(level="INFO", log_file=str(log_file))

        get_logger("tests.logging").info("Path field", path=tmp_path)

        [entry] = entries_with(read_entries(log_file), "Path field")
        assert entry["path"] == str(tmp_path)

    def test_log_file_from_environment(self, tmp_path, monkeypatch):
        log_file = tmp_path / "env.log"
        monkeypatch.setenv("LOG_FILE", str(log_file))
        configure_logging(level="INFO")

        get_logger("tests.logging").info("From env")

        assert entries_with(read_entries(log_file), "From env")


class TestLevel:
    """Tests for level resolution between arguments and environment."""

    def test_explicit_level_overrides_environment(self, tmp_path, monkeypatch):
        log_file = tmp_path / "monitor.log"
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        configure_logging(level="DEBUG", log_file=str(log_file))

        get_logger("tests.logging").debug("Debug line")

        [entry] = entries_with(read_entries(log_file), "Debug line")
        assert entry["level"] == "DEBUG"

    def test_environment_is_default_when_level_unset(self, tmp_path, monkeypatch):
        log_file = tmp_path / "monitor.log"
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        configure_logging(level=None, log_file=str(log_file))

        log = get_logger("tests.logging")
        log.info("Info line")
        log.error("Error line")

        entries = read_entries(log_file)
        assert not entries_with(entries, "Info line")
        assert entries_with(entries, "Error line")

    def test_unknown_level_falls_back_to_info(self, tmp_path):
        log_file = tmp_path / "monitor.log"
        configure_logging(level="verbose", log_file=str(log_file))

        log = get_logger("tests.logging")
        log.debug("Debug line")
        log.info("Info line")

        entries = read_entries(log_file)
        assert not entries_with(entries, "Debug line")
        assert entries_with(entries, "Info line")


class TestStdout:
    """Tests for the console and JSON stdout formats."""

    def test_json_output(self, capsys):
        configure_logging(level="INFO", json_output=True)

        get_logger("tests.logging").info("Change State", marker="Deployed")
        logger.remove()

        lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
        entry = json.loads(lines[-1])
        assert entry["message"] == "Change State"
        assert entry["marker"] == "Deployed"
        assert "_json" not in entry

    def test_console_output(self, capsys):
        configure_logging(level="INFO", json_output=False)

        get_logger("tests.logging").info("Change State", marker="Deployed")
        logger.remove()

        out = capsys.readouterr().out
        assert "Change State" in out
        assert "marker=Deployed" in out
        assert "_json" not in out
        with pytest.raises(json.JSONDecodeError):
            json.loads(out.strip().splitlines()[-1])

    def test_format_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        configure_logging(level="INFO")

        get_logger("tests.logging").info("Env json")
        logger.remove()

        lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
        assert json.loads(lines[-1])["message"] == "Env json"
