"""Exceptions raised by the ``Link`` header parser."""

from __future__ import annotations

from ._models import SkipReason

__all__ = [
    "InvalidLinkValueError",
    "LinkHeaderError",
]


class LinkHeaderError(Exception):
    """Base class for errors raised while parsing a ``Link`` header."""


class InvalidLinkValueError(LinkHeaderError):
    """A link-value could not be parsed and the parser is in strict mode.

    Parameters
    ----------
    value
        The offending link-value, as split out of the header.
    reason
        Why the link-value was rejected.
    """

    def __init__(self, value: str, reason: SkipReason) -> None:
        super().__init__(f"Invalid link-value {value!r}: {reason.value}")
        self.value = value
        self.reason = reason
