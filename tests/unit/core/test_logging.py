# tests/unit/core/test_logging.py
"""Tests for dotcheck's logger setup."""

import io
import json
import logging
import subprocess
import sys

import pytest

from dotcheck.core.config import CheckSettings
from dotcheck.core.logging import (
    ROOT_LOGGER_NAME,
    configure_from_settings,
    configure_logging,
    get_logger,
    reset_logging,
)
from dotcheck.core.registry import Registry
from dotcheck.core.reporting import ConsoleReporter
from dotcheck.engine.runner import Runner


def prop_non_negative(n: int) -> bool:
    return abs(n) >= 0


# =============================================================================
# configure_logging
# =============================================================================


class TestConfigureLogging:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="DEBUG")

        get_logger("dotcheck.tests").info("Property passed", trials_run=5)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "Property passed"
        assert record["trials_run"] == 5
        assert record["level"] == "info"
        assert "timestamp" in record
        assert "_record" not in record

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="INFO")

        get_logger("dotcheck.tests").info("Property failed", shrink_count=3)

        captured = capsys.readouterr()
        assert "Property failed" in captured.err
        assert "shrink_count=3" in captured.err
        assert captured.out == ""

    def test_level_filters_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="WARNING")

        get_logger("dotcheck.tests").info("Property passed")

        assert "Property passed" not in capsys.readouterr().err

    def test_explicit_stream(self) -> None:
        out = io.StringIO()
        configure_logging(json_output=True, level="DEBUG", stream=out)

        get_logger("dotcheck.engine.runner").debug("Trial passed", trial=1)

        record = json.loads(out.getvalue().strip())
        assert record["event"] == "Trial passed"
        assert record["level"] == "debug"

    def test_only_package_logger_touched(self) -> None:
        root = logging.getLogger()
        handlers_before = list(root.handlers)
        level_before = root.level

        configure_logging(level="DEBUG")

        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert package_logger.propagate is False
        assert root.handlers == handlers_before
        assert root.level == level_before

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging(level="INFO")
        configure_logging(level="DEBUG", json_output=True)

        assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1

    def test_reset_hands_back_to_application(self) -> None:
        configure_logging(level="DEBUG")

        reset_logging()

        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        assert package_logger.handlers == []
        assert package_logger.level == logging.NOTSET
        assert package_logger.propagate is True

    def test_configure_from_settings(self) -> None:
        configure_from_settings(CheckSettings(log_level="ERROR", json_logs=True))
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.ERROR


# =============================================================================
# Behaviour without configuration
# =============================================================================


class TestUnconfigured:
    def test_info_records_stay_silent(self, capsys: pytest.CaptureFixture[str]) -> None:
        get_logger("dotcheck.tests").info("Property passed", trials_run=5)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_records_reach_application_handlers(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
            get_logger("dotcheck.core.registry").debug("Arbitrary registered", type="int")

        assert any(record.name == "dotcheck.core.registry" for record in caplog.records)

    def test_import_leaves_host_structlog_alone(self) -> None:
        script = (
            "import structlog\n"
            "import dotcheck\n"
            "assert not structlog.is_configured()\n"
            "structlog.get_logger('app').info('host app event')\n"
        )
        result = subprocess.run([sys.executable, "-c", script], capture_output=True, text=True, check=True)

        assert "host app event" in result.stdout


# =============================================================================
# Run events
# =============================================================================


class TestRunLogging:
    def test_run_events_go_to_stderr(
        self,
        registry: Registry,
        reporter: ConsoleReporter,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        configure_logging(json_output=True, level="INFO")

        Runner(registry=registry, seed=3, reporter=reporter).run(prop_non_negative, trials=10)

        captured = capsys.readouterr()
        records = [json.loads(line) for line in captured.err.strip().splitlines()]
        passed = [r for r in records if r["event"] == "Property passed"]
        assert len(passed) == 1
        assert passed[0]["trials_run"] == 10
        assert passed[0]["type"] == "int"
        assert captured.out == ""

    def test_runner_applies_log_settings(
        self,
        registry: Registry,
        reporter: ConsoleReporter,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        settings = CheckSettings(log_level="INFO", json_logs=True)

        Runner(registry=registry, settings=settings, seed=3, reporter=reporter).run(prop_non_negative, trials=4)

        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.INFO
        records = [json.loads(line) for line in capsys.readouterr().err.strip().splitlines()]
        assert [r["trials_run"] for r in records if r["event"] == "Property passed"] == [4]

    def test_runner_without_settings_leaves_logger_alone(self, registry: Registry, reporter: ConsoleReporter) -> None:
        Runner(registry=registry, seed=3, reporter=reporter)

        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        assert package_logger.handlers == []
        assert package_logger.level == logging.NOTSET
