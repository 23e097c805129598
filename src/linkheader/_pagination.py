"""Pagination links from a ``Link`` header."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from ._config import ParserConfig
from ._models import ParsedLinkValue
from ._parser import LinkHeaderParser, get_query_string

__all__ = ["PaginationLinks"]


@dataclass
class PaginationLinks:
    """Pagination URLs found in an :rfc:`8288` ``Link`` header."""

    first_url: str | None
    """URL of the first page."""

    prev_url: str | None
    """URL of the previous page, or `None` for the first page."""

    next_url: str | None
    """URL of the next page, or `None` for the last page."""

    @classmethod
    def from_header(cls, header: str | None) -> Self:
        """Extract the pagination URLs from a ``Link`` header.

        The ``previous`` relation is accepted as a synonym for ``prev``.
        Malformed link-values are ignored.

        Parameters
        ----------
        header
            Contents of the ``Link`` header, if any.

        Returns
        -------
        PaginationLinks
            Pagination URLs found in that header.
        """
        links: dict[str, str] = {}
        if header:
            parser = LinkHeaderParser(ParserConfig.defaults())
            for result in parser.parse_link_values(header):
                if not isinstance(result, ParsedLinkValue):
                    continue
                rel = result.link.rel
                if rel == "previous":
                    rel = "prev"
                if rel in ("first", "prev", "next"):
                    links[rel] = result.link.target
        return cls(
            first_url=links.get("first"),
            prev_url=links.get("prev"),
            next_url=links.get("next"),
        )

    @property
    def first_query(self) -> str | None:
        """Query string of the first page URL."""
        return self._query(self.first_url)

    @property
    def prev_query(self) -> str | None:
        """Query string of the previous page URL."""
        return self._query(self.prev_url)

    @property
    def next_query(self) -> str | None:
        """Query string of the next page URL."""
        return self._query(self.next_url)

    @staticmethod
    def _query(url: str | None) -> str | None:
        return get_query_string(url) if url is not None else None
