"""Set up structlog on top of the standard library logger."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.stdlib import add_log_level
from structlog.types import EventDict

from ._models import LogLevel, Profile

__all__ = [
    "add_log_severity",
    "configure_logging",
]


def add_log_severity(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Store the log level under ``severity`` rather than ``level``.

    This is a structlog processor. Google Log Explorer picks up ``severity``
    automatically from JSON log messages.
    """
    event_dict["severity"] = add_log_level(logger, method_name, {})["level"]
    return event_dict


def configure_logging(
    *,
    name: str = "linkheader",
    profile: Profile | str = Profile.production,
    log_level: LogLevel | str = LogLevel.INFO,
    add_timestamp: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Send structlog messages for a logger to standard output.

    Parameters
    ----------
    name
        Name of the standard library logger to configure.
    profile
        ``production`` renders each message as a JSON object with a
        ``severity`` key, ``development`` renders key-value text for a
        terminal. May be a `Profile` or its string value.
    log_level
        Minimum level to log. May be a `LogLevel` or a string in any case.
    add_timestamp
        Whether to add an ISO 8601 ``timestamp`` to each message.
    stream
        Where to write log messages. Defaults to standard output.

    Examples
    --------
    .. code-block:: python

       import structlog
       from linkheader.logging import configure_logging

       configure_logging(profile="development", log_level="debug")
       structlog.get_logger("linkheader").debug("Parsing", header=header)
    """
    log_level = LogLevel(log_level)
    profile = Profile(profile)

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger(name)
    logger.handlers = [handler]
    logger.setLevel(log_level.value)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]
    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors.append(structlog.processors.StackInfoRenderer())
    processors.append(structlog.processors.UnicodeDecoder())
    if profile == Profile.production:
        processors.append(add_log_severity)
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.stdlib.add_log_level)
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
