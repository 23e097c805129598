"""linkheader parses RFC 8288 ``Link`` headers into a map from link relation
to the query string of the link target.
"""

from importlib.metadata import PackageNotFoundError, version

from ._config import MissingRelPolicy, NoQueryPolicy, ParserConfig
from ._exceptions import InvalidLinkValueError, LinkHeaderError
from ._models import (
    LinkValueResult,
    ParsedLink,
    ParsedLinkValue,
    SkippedLinkValue,
    SkipReason,
)
from ._pagination import PaginationLinks
from ._parser import (
    Cursor,
    LinkHeaderParser,
    get_query_string,
    parse_link_header,
    parse_link_value,
    parse_parameters,
    parse_quoted_string,
    split_link_values,
)

__all__ = [
    "Cursor",
    "InvalidLinkValueError",
    "LinkHeaderError",
    "LinkHeaderParser",
    "LinkValueResult",
    "MissingRelPolicy",
    "NoQueryPolicy",
    "PaginationLinks",
    "ParsedLink",
    "ParsedLinkValue",
    "ParserConfig",
    "SkipReason",
    "SkippedLinkValue",
    "__version__",
    "get_query_string",
    "parse_link_header",
    "parse_link_value",
    "parse_parameters",
    "parse_quoted_string",
    "split_link_values",
]

__version__: str
"""The version string of linkheader (PEP 440 / SemVer compatible)."""

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"
