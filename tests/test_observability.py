"""
Tests for logging setup and the Reporter contract.
"""

import logging
from pathlib import Path

import pytest
from fakes import RecordingReporter

from devflow.core.models.outcome import Outcome
from devflow.core.observability.logging_config import LogSettings, resolve_level, setup_logging
from devflow.core.observability.reporter import LogReporter


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLevel:
    def test_default(self):
        assert resolve_level() == "WARNING"

    def test_env_fallback(self):
        assert resolve_level(env_level="INFO") == "INFO"

    def test_flags_beat_env(self):
        assert resolve_level(debug=True, env_level="ERROR") == "DEBUG"
        assert resolve_level(verbose=True, env_level="ERROR") == "INFO"
        assert resolve_level(quiet=True, env_level="DEBUG") == "ERROR"

    def test_debug_beats_quiet(self):
        assert resolve_level(debug=True, quiet=True) == "DEBUG"


class TestLogSettings:
    def test_from_environment(self):
        env = {
            "DEVFLOW_LOG_LEVEL": "INFO",
            "DEVFLOW_LOG_FILE": "/tmp/devflow.log",
            "DEVFLOW_LOG_FILE_LEVEL": "DEBUG",
        }
        settings = LogSettings.from_cli(environ=env)
        assert settings.level == "INFO"
        assert settings.log_file == "/tmp/devflow.log"
        assert settings.log_file_level == "DEBUG"
        assert settings.quiet_third_party

    def test_debug_flag(self):
        settings = LogSettings.from_cli(debug=True, environ={"DEVFLOW_LOG_LEVEL": "ERROR"})
        assert settings.level == "DEBUG"
        assert not settings.quiet_third_party

    def test_empty_file_is_none(self):
        assert LogSettings.from_cli(environ={"DEVFLOW_LOG_FILE": ""}).log_file is None


class TestSetupLogging:
    def test_console_level(self, restore_root_logger):
        setup_logging(LogSettings(level="INFO"))
        assert restore_root_logger.level == logging.INFO
        assert len(restore_root_logger.handlers) == 1

    def test_bogus_level_falls_back_to_warning(self, restore_root_logger):
        setup_logging(LogSettings(level="LOUD"))
        assert restore_root_logger.level == logging.WARNING

    def test_file_output(self, restore_root_logger, tmp_path: Path):
        log_file = tmp_path / "devflow.log"
        setup_logging(LogSettings(level="WARNING", log_file=str(log_file), log_file_level="DEBUG"))
        assert restore_root_logger.level == logging.DEBUG

        logging.getLogger("devflow.test").debug("probe details")
        for handler in restore_root_logger.handlers:
            handler.flush()
        assert "probe details" in log_file.read_text()

    def test_third_party_quieted(self, restore_root_logger):
        setup_logging(LogSettings(level="INFO"))
        assert logging.getLogger("urllib3").level == logging.WARNING


class TestReporter:
    def test_outcome_levels(self):
        reporter = RecordingReporter()
        reporter.outcome(Outcome.success("agents", "Agents installed"))
        reporter.outcome(Outcome.warning("docs", "Could not copy docs/"))
        reporter.outcome(Outcome.skip("docs", "kept"))
        reporter.outcome(Outcome.ignored("cleanup", "left behind"))
        assert reporter.lines == [
            ("success", "Agents installed"),
            ("warn", "Could not copy docs/"),
            ("warn", "kept"),
        ]

    def test_default_spinner_announces(self):
        reporter = RecordingReporter()
        with reporter.spinner("Cloning..."):
            reporter.success("done")
        assert reporter.lines == [("info", "Cloning..."), ("success", "done")]

    def test_log_reporter(self, caplog):
        with caplog.at_level(logging.INFO, logger="devflow"):
            reporter = LogReporter(logging.getLogger("devflow.cli"))
            reporter.success("installed")
            reporter.warn("careful")
        assert ("devflow.cli", logging.INFO, "installed") in caplog.record_tuples
        assert ("devflow.cli", logging.WARNING, "careful") in caplog.record_tuples
