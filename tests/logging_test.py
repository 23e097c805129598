"""Tests for logging configuration and parser log messages."""

from __future__ import annotations

import json
import logging
import re

import pytest
import structlog

from linkheader import parse_link_header
from linkheader.logging import LogLevel, Profile, configure_logging

from .support.logging import parse_log_tuples


def _strip_color(string: str) -> str:
    """Strip ANSI color escape sequences."""
    return re.sub(r"(?:\x1B[@-_]|[\x80-\x9F])[0-?]*[ -/]*[@-~]", "", string)


def test_configure_logging_development(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO)

    configure_logging(
        name="myapp", profile=Profile.development, log_level=LogLevel.INFO
    )

    logger = structlog.get_logger("myapp")
    logger = logger.bind(answer=42)
    logger.info("Hello world")

    app, level, line = caplog.record_tuples[0]
    assert app == "myapp"
    assert level == logging.INFO
    expected = "[info     ] Hello world                    [myapp] answer=42"
    assert _strip_color(line) == expected


def test_configure_logging_production(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO)

    configure_logging(name="myapp", profile="production", log_level="info")

    logger = structlog.get_logger("myapp")
    logger.bind(answer=42).info("Hello world")
    logger.debug("Not shown")

    assert len(caplog.record_tuples) == 1
    name, level, line = caplog.record_tuples[0]
    assert (name, level) == ("myapp", logging.INFO)
    assert json.loads(line) == {
        "answer": 42,
        "event": "Hello world",
        "logger": "myapp",
        "severity": "info",
    }


def test_configure_logging_timestamp(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    configure_logging(name="myapp", add_timestamp=True)
    structlog.get_logger("myapp").info("Hello world")

    data = json.loads(caplog.record_tuples[0][2])
    assert data["timestamp"].endswith("Z")


def test_log_level_case() -> None:
    assert LogLevel("debug") == LogLevel.DEBUG
    assert LogLevel("Warning") == LogLevel.WARNING
    with pytest.raises(ValueError, match="verbose"):
        LogLevel("verbose")


def test_skipped_link_values(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)
    configure_logging(profile=Profile.production, log_level=LogLevel.DEBUG)

    header = 'broken, <https://example.com/?x=1>; rel="next", ,> <'
    assert parse_link_header(header) == {"next": "?x=1"}

    assert parse_log_tuples("linkheader", caplog.record_tuples) == [
        {
            "event": "Skipping link-value",
            "reason": "missing_target",
            "value": "broken",
        },
        {
            "event": "Skipping link-value",
            "reason": "reversed_target",
            "value": "> <",
        },
    ]
