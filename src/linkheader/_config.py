"""Configuration for the ``Link`` header parser."""

from __future__ import annotations

from enum import Enum
from typing import Self

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "MissingRelPolicy",
    "NoQueryPolicy",
    "ParserConfig",
]


class MissingRelPolicy(Enum):
    """What to do with a link that has no ``rel`` parameter."""

    keep = "keep"
    """Store the link under the empty relation ``""``."""

    drop = "drop"
    """Skip the link as if it were malformed."""


class NoQueryPolicy(Enum):
    """What to store for a target URI that contains no ``?``."""

    target = "target"
    """Store the whole target URI."""

    empty = "empty"
    """Store the empty string."""


class ParserConfig(BaseSettings):
    """Parser behavior, optionally taken from ``LINKHEADER_*`` environment
    variables.

    The defaults never raise for malformed input and store whatever the
    header contains, including links without a relation. A target without a
    query string is stored whole.
    """

    model_config = SettingsConfigDict(
        env_prefix="LINKHEADER_", frozen=True
    )

    missing_rel: MissingRelPolicy = Field(
        MissingRelPolicy.keep,
        title="Missing relation policy",
        description="Whether to keep or drop links with no rel parameter",
    )

    no_query: NoQueryPolicy = Field(
        NoQueryPolicy.target,
        title="No query string policy",
        description=(
            "Value stored for a target URI without a query string: the"
            " empty string or the full target"
        ),
    )

    strict: bool = Field(
        False,  # noqa: FBT003
        title="Strict parsing",
        description=(
            "If true, raise an exception on the first link-value that"
            " cannot be parsed instead of skipping it"
        ),
    )

    @classmethod
    def defaults(cls) -> Self:
        """Return the default configuration without reading the environment.

        Calling the class directly reads ``LINKHEADER_*`` environment
        variables, which is what the command line wants. Library calls that
        were not given a configuration use this instead so that the result
        of a parse depends only on the header.
        """
        return cls.model_construct()
