# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Tests for the logging configuration."""
# pylint: disable=missing-return-doc,missing-param-doc,missing-raises-doc

import os
import sys
from collections.abc import Generator
from typing import Any
from unittest.mock import patch

import pytest

# noinspection PyProtectedMember
from hsh._logging import (
    ENV_PREFIX,
    LogLevel,
    get_log_level,
    get_logging_config,
    redact,
)


@pytest.fixture(name="mock_logging_config")
def mock_logging_config_fixture() -> dict[str, Any]:
    """Fixture to mock the uvicorn logging configuration."""
    return {
        "formatters": {"default": {"fmt": "%(message)s"}},
        "loggers": {
            "uvicorn": {"level": "DEBUG", "handlers": []},
            "uvicorn.error": {"level": "DEBUG", "handlers": []},
            "uvicorn.access": {"level": "DEBUG", "handlers": []},
        },
    }


@pytest.fixture(name="restore_env_and_args")
def restore_env_and_args_fixture() -> Generator[None, None, None]:
    """Restore the log level variable and arguments after a test."""
    original_level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL")
    original_argv = sys.argv[:]
    yield
    sys.argv = original_argv
    os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
    if original_level is not None:
        os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = original_level


def test_get_logging_config(mock_logging_config: dict[str, Any]) -> None:
    """Test the get_logging_config function."""
    with patch("uvicorn.config.LOGGING_CONFIG", mock_logging_config):
        log_level = "WARNING"
        config = get_logging_config(log_level)
        assert (
            config["formatters"]["default"]["fmt"]
            == "%(levelprefix)s %(asctime)s.%(msecs)06d [%(name)s:%(filename)s:%(lineno)d] %(message)s"  # pylint: disable=line-too-long # noqa: E501
        )
        assert config["formatters"]["default"]["datefmt"] == "%Y-%m-%d %H:%M:%S"

        hsh_logger = config["loggers"]["hsh"]
        assert hsh_logger["level"] == log_level
        assert hsh_logger["handlers"] == ["default"]
        assert hsh_logger["propagate"] is False

        root_logger = config["loggers"][""]
        assert root_logger["level"] == log_level
        assert root_logger["handlers"] == ["default"]
        assert root_logger["propagate"] is False
    # the shared uvicorn config is left alone
    assert mock_logging_config["loggers"]["uvicorn"]["level"] == "DEBUG"
    assert "hsh" not in mock_logging_config["loggers"]


@pytest.mark.usefixtures("restore_env_and_args")
def test_get_log_level() -> None:
    """Test get_log_level."""
    sys.argv = ["test_lib.py"]
    os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "DEBUG"
    assert get_log_level() == "DEBUG"

    os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "warning"
    assert get_log_level() == "WARNING"

    os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
    assert get_log_level() == "INFO"

    sys.argv = ["test_lib.py", "--debug"]
    assert get_log_level() == "DEBUG"

    sys.argv = ["test_lib.py", "--log-level", "ERROR"]
    assert get_log_level() == "ERROR"

    os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
    sys.argv = ["test_lib.py", "--log-level"]
    assert get_log_level() == "INFO"

    os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
    sys.argv = ["test_lib.py", "--log-level", "INVALID"]
    assert get_log_level() == "INFO"

    sys.argv = ["test_lib.py"]
    os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "INVALID"
    assert get_log_level() == "INFO"


def test_log_level_values() -> None:
    """Test the log level choices."""
    assert [level.value for level in LogLevel] == [
        "CRITICAL",
        "ERROR",
        "WARNING",
        "INFO",
        "DEBUG",
    ]


def test_redact() -> None:
    """Test describing secrets without their content."""
    assert redact("password123") == "<redacted 11 chars>"
    assert redact(b"\x00\x01\x02") == "<redacted 3 bytes>"
    assert redact(None) == "<redacted>"
