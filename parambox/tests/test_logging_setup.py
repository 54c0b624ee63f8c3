"""Tests for CLI log routing."""

from __future__ import annotations

import io
import logging

import pytest
from click.testing import CliRunner

from parambox.cli import cli
from parambox.logging_setup import PACKAGE_LOGGER, configure_cli_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_level_filters_package_records(package_logger):
    stream = io.StringIO()
    configure_cli_logging("info", stream)

    logging.getLogger("parambox.ingest").info("read %d lines", 3)
    logging.getLogger("parambox.box").debug("hidden")

    out = stream.getvalue()
    assert "[INFO] parambox.ingest: read 3 lines" in out
    assert "hidden" not in out


def test_repeated_calls_keep_one_handler(package_logger):
    first = io.StringIO()
    second = io.StringIO()
    configure_cli_logging("WARNING", first)
    configure_cli_logging("DEBUG", second)

    logging.getLogger("parambox.box").debug("once")

    assert first.getvalue() == ""
    assert second.getvalue().count("once") == 1
    assert package_logger.level == logging.DEBUG


def test_unknown_level_is_rejected(package_logger):
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_cli_logging("LOUD")


def test_cli_applies_log_level_option(package_logger, declarations_toml):
    result = CliRunner().invoke(cli, ["--log-level", "debug", "show", str(declarations_toml)])

    assert result.exit_code == 0
    assert package_logger.level == logging.DEBUG
