"""Data types produced while parsing a ``Link`` header."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "LinkValueResult",
    "ParsedLink",
    "ParsedLinkValue",
    "SkipReason",
    "SkippedLinkValue",
]


class SkipReason(Enum):
    """Why a link-value contributed nothing to the parse result."""

    empty = "empty"
    """The link-value was empty, as for an empty header or ``a,,b``."""

    missing_target = "missing_target"
    """No ``<`` or no ``>`` delimiting the target URI."""

    reversed_target = "reversed_target"
    """The first ``>`` occurs before the first ``<``."""

    missing_rel = "missing_rel"
    """No ``rel`` parameter and rel-less links are being dropped."""


@dataclass(frozen=True)
class ParsedLink:
    """A single successfully parsed link-value."""

    target: str
    """Target URI, as found between the angle brackets."""

    parameters: tuple[tuple[str, str], ...] = ()
    """All parameters in header order, including repeated names."""

    params: dict[str, str] = field(init=False, compare=False, repr=False)
    """Parameters by name, where the last occurrence of a name wins."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", dict(self.parameters))

    @property
    def rel(self) -> str | None:
        """Lowercased ``rel`` parameter, or `None` if there wasn't one.

        Relation types compare case-insensitively. Other parameter values
        keep their case.
        """
        rel = self.params.get("rel")
        return rel.lower() if rel is not None else None


@dataclass(frozen=True)
class ParsedLinkValue:
    """Result for a link-value that was parsed."""

    value: str
    """Link-value as split out of the header."""

    link: ParsedLink
    """Parsed form of the link-value."""


@dataclass(frozen=True)
class SkippedLinkValue:
    """Result for a link-value that was dropped."""

    value: str
    """Link-value as split out of the header."""

    reason: SkipReason
    """Why it was dropped."""


LinkValueResult = ParsedLinkValue | SkippedLinkValue
"""Outcome of parsing one link-value."""
