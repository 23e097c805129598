"""Parser for :rfc:`8288` ``Link`` headers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

import structlog
from structlog.stdlib import BoundLogger

from ._config import MissingRelPolicy, NoQueryPolicy, ParserConfig
from ._exceptions import InvalidLinkValueError
from ._models import (
    LinkValueResult,
    ParsedLink,
    ParsedLinkValue,
    SkippedLinkValue,
    SkipReason,
)

_WHITESPACE = " \t\r\n"
"""Characters treated as whitespace between parameters and values."""

_SEPARATORS = ";" + _WHITESPACE
"""Characters skipped between parameters."""

_NAME_DELIMITERS = "=;\t\r\n"
"""Characters that end a parameter name."""

__all__ = [
    "Cursor",
    "LinkHeaderParser",
    "get_query_string",
    "parse_link_header",
    "parse_link_value",
    "parse_parameters",
    "parse_quoted_string",
    "split_link_values",
]


@dataclass(frozen=True)
class Cursor:
    """Read position in a string.

    Cursors are immutable. Every method that consumes input returns a new
    cursor rather than modifying this one.
    """

    text: str
    """Full text being parsed."""

    offset: int = 0
    """Index of the next unconsumed character."""

    @property
    def at_end(self) -> bool:
        """Whether all of the text has been consumed."""
        return self.offset >= len(self.text)

    @property
    def remaining(self) -> str:
        """The unconsumed text."""
        return self.text[self.offset :]

    def peek(self) -> str:
        """Return the next character, or the empty string at the end."""
        return self.text[self.offset : self.offset + 1]

    def advance(self, count: int = 1) -> Cursor:
        """Consume up to ``count`` characters."""
        return Cursor(self.text, min(self.offset + count, len(self.text)))

    def skip(self, chars: str) -> Cursor:
        """Consume any run of characters found in ``chars``."""
        offset = self.offset
        while offset < len(self.text) and self.text[offset] in chars:
            offset += 1
        return Cursor(self.text, offset)

    def take_until(self, chars: str) -> tuple[str, Cursor]:
        """Consume text up to, but not including, any of ``chars``.

        Returns
        -------
        tuple of str and Cursor
            The consumed text and the cursor positioned after it.
        """
        offset = self.offset
        while offset < len(self.text) and self.text[offset] not in chars:
            offset += 1
        return self.text[self.offset : offset], Cursor(self.text, offset)


class _QuoteState(Enum):
    """State of the comma splitter."""

    unquoted = "unquoted"
    quoted = "quoted"


def split_link_values(header: str) -> list[str]:
    """Split a ``Link`` header into its link-values.

    Commas inside double quotes do not split. Quote tracking is a simple
    toggle on every ``"`` and does not understand backslash escapes.

    Parameters
    ----------
    header
        Contents of the ``Link`` header.

    Returns
    -------
    list of str
        Link-values with surrounding whitespace removed. There is always at
        least one element, which is the empty string for an empty header.
    """
    values = []
    state = _QuoteState.unquoted
    start = 0
    for index, char in enumerate(header):
        if char == '"':
            if state == _QuoteState.unquoted:
                state = _QuoteState.quoted
            else:
                state = _QuoteState.unquoted
        elif char == "," and state == _QuoteState.unquoted:
            values.append(header[start:index].strip())
            start = index + 1
    values.append(header[start:].strip())
    return values


def parse_link_value(value: str) -> tuple[str, str] | SkipReason:
    """Split a link-value into its target and its parameter string.

    Parameters
    ----------
    value
        A single link-value, such as ``<https://example.com/>; rel="next"``.

    Returns
    -------
    tuple of str and str, or SkipReason
        The target URI, stripped of whitespace, and everything after the
        closing ``>``. If the link-value has no usable target, the reason it
        was rejected is returned instead.
    """
    value = value.strip()
    if not value:
        return SkipReason.empty
    start = value.find("<")
    end = value.find(">")
    if start < 0 or end < 0:
        return SkipReason.missing_target
    if start >= end:
        return SkipReason.reversed_target
    return value[start + 1 : end].strip(), value[end + 1 :]


def parse_quoted_string(cursor: Cursor) -> tuple[str, Cursor]:
    """Consume a double-quoted string.

    Every backslash escape is resolved to the escaped character. A missing
    closing quote is tolerated and the rest of the text is taken as the
    value.

    Parameters
    ----------
    cursor
        Cursor positioned at the opening quote.

    Returns
    -------
    tuple of str and Cursor
        The unescaped contents and the cursor positioned after the closing
        quote. If the cursor is not at a ``"``, returns the empty string and
        the unmoved cursor.
    """
    if cursor.peek() != '"':
        return "", cursor
    text = cursor.text
    offset = cursor.offset + 1
    chars = []
    while offset < len(text):
        char = text[offset]
        if char == "\\":
            # A lone trailing backslash escapes nothing and is dropped.
            chars.append(text[offset + 1 : offset + 2])
            offset += 2
        elif char == '"':
            offset += 1
            break
        else:
            chars.append(char)
            offset += 1
    return "".join(chars), Cursor(text, min(offset, len(text)))


def parse_parameters(text: str) -> list[tuple[str, str]]:
    """Parse the parameters following the target of a link-value.

    Parameters
    ----------
    text
        Everything after the ``>`` closing the target, such as
        ``; rel="next"; title=Next``.

    Returns
    -------
    list of tuple
        Pairs of lowercased parameter name and value, in order. A parameter
        without ``=`` has an empty value.
    """
    parameters = []
    cursor = Cursor(text)
    while True:
        cursor = cursor.skip(_SEPARATORS)
        if cursor.at_end:
            break
        start = cursor.offset

        name, cursor = cursor.take_until(_NAME_DELIMITERS)
        name = name.strip(_SEPARATORS).lower()
        cursor = cursor.skip(_WHITESPACE)

        value = ""
        if cursor.peek() == "=":
            cursor = cursor.advance().skip(_WHITESPACE)
            if cursor.peek() == '"':
                value, cursor = parse_quoted_string(cursor)
            else:
                value, cursor = cursor.take_until(_SEPARATORS)
        parameters.append((name, value))

        if cursor.offset <= start:
            break
    return parameters


def get_query_string(
    target: str, policy: NoQueryPolicy = NoQueryPolicy.target
) -> str:
    """Return the part of a URI from its last ``?`` to the end.

    Parameters
    ----------
    target
        Target URI of a link.
    policy
        What to return if the URI contains no ``?``.

    Returns
    -------
    str
        Query string, including the leading ``?``.
    """
    index = target.rfind("?")
    if index < 0:
        return target if policy == NoQueryPolicy.target else ""
    return target[index:]


class LinkHeaderParser:
    """Parse ``Link`` headers.

    Malformed link-values are skipped and logged at debug level unless the
    configuration asks for strict parsing.

    Parameters
    ----------
    config
        Parser configuration. If not given, the defaults are used and the
        environment is not consulted.
    logger
        Logger for skipped link-values. Defaults to the ``linkheader``
        logger.
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._config = config or ParserConfig.defaults()
        self._logger = logger or structlog.get_logger("linkheader")

    def parse(self, header: str) -> dict[str, str]:
        """Parse a header into a map of relation to query string.

        If several links share a relation, the last one wins.

        Parameters
        ----------
        header
            Contents of the ``Link`` header.

        Returns
        -------
        dict of str to str
            Query string of each link's target by link relation.

        Raises
        ------
        InvalidLinkValueError
            Raised if the parser is strict and a link-value is malformed.
        """
        return self.to_mapping(self.parse_link_values(header))

    def to_mapping(
        self, results: Iterable[LinkValueResult]
    ) -> dict[str, str]:
        """Reduce link-value results to a map of relation to query string.

        Skipped link-values are ignored and later links replace earlier
        links with the same relation.
        """
        links = {}
        for result in results:
            if isinstance(result, ParsedLinkValue):
                rel = result.link.rel or ""
                target = result.link.target
                links[rel] = get_query_string(target, self._config.no_query)
        return links

    def parse_link_values(self, header: str) -> list[LinkValueResult]:
        """Parse a header, reporting the outcome for every link-value.

        Parameters
        ----------
        header
            Contents of the ``Link`` header.

        Returns
        -------
        list of LinkValueResult
            One result per link-value in header order.

        Raises
        ------
        InvalidLinkValueError
            Raised if the parser is strict and a non-empty link-value is
            malformed.
        """
        results = []
        for value in split_link_values(header):
            result = self._parse_value(value)
            if isinstance(result, SkippedLinkValue):
                if result.reason != SkipReason.empty:
                    self._logger.debug(
                        "Skipping link-value",
                        value=value,
                        reason=result.reason.value,
                    )
                    if self._config.strict:
                        raise InvalidLinkValueError(value, result.reason)
            results.append(result)
        return results

    def _parse_value(self, value: str) -> LinkValueResult:
        parsed = parse_link_value(value)
        if isinstance(parsed, SkipReason):
            return SkippedLinkValue(value=value, reason=parsed)
        target, parameters = parsed
        link = ParsedLink(target, tuple(parse_parameters(parameters)))
        drop_missing = self._config.missing_rel == MissingRelPolicy.drop
        if link.rel is None and drop_missing:
            return SkippedLinkValue(value=value, reason=SkipReason.missing_rel)
        return ParsedLinkValue(value=value, link=link)


def parse_link_header(
    header: str, config: ParserConfig | None = None
) -> dict[str, str]:
    """Parse an :rfc:`8288` ``Link`` header.

    Parameters
    ----------
    header
        Contents of the ``Link`` header.
    config
        Parser configuration. If not given, the defaults are used and the
        environment is not consulted.

    Returns
    -------
    dict of str to str
        Query string of each link's target, starting at the last ``?``, by
        link relation.

    Raises
    ------
    InvalidLinkValueError
        Raised only if ``config.strict`` is set and a link-value is
        malformed.

    Examples
    --------
    .. code-block:: python

       header = (
           '<https://example.com/items?page=2>; rel="next", '
           '<https://example.com/items?page=1>; rel="prev"'
       )
       assert parse_link_header(header) == {
           "next": "?page=2",
           "prev": "?page=1",
       }
    """
    return LinkHeaderParser(config).parse(header)
