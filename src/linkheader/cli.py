"""Command-line interface for linkheader."""

from __future__ import annotations

import json
import sys
from typing import Any

import click

from ._config import MissingRelPolicy, NoQueryPolicy, ParserConfig
from ._exceptions import LinkHeaderError
from ._models import SkippedLinkValue
from ._parser import LinkHeaderParser
from .logging import LogLevel, Profile, configure_logging

__all__ = ["help", "main", "parse"]


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(message="%(version)s")
def main() -> None:
    """Parse RFC 8288 Link headers.

    The parse command prints the query string of each link target keyed by
    link relation.
    """


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None) -> None:
    """Show help for any command."""
    if not topic:
        if not ctx.parent:
            raise RuntimeError("help called without topic or parent")
        click.echo(ctx.parent.get_help())
        return
    if topic not in main.commands:
        raise click.UsageError(f"Unknown help topic {topic}", ctx)
    ctx.info_name = topic
    click.echo(main.commands[topic].get_help(ctx))


@main.command()
@click.argument("header", default="-", required=False)
@click.option(
    "--missing-rel",
    type=click.Choice([p.value for p in MissingRelPolicy]),
    default=None,
    help="Keep links without a rel under the empty relation, or drop them.",
)
@click.option(
    "--no-query",
    type=click.Choice([p.value for p in NoQueryPolicy]),
    default=None,
    help="Value for a target without a query string.",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on the first malformed link-value.",
)
@click.option(
    "--diagnostics",
    is_flag=True,
    default=False,
    help="Report skipped link-values on standard error.",
)
@click.option(
    "--log-level",
    type=click.Choice(
        [level.value for level in LogLevel], case_sensitive=False
    ),
    default=LogLevel.WARNING.value,
    envvar="LINKHEADER_LOG_LEVEL",
    show_envvar=True,
    help="Log level for messages on standard error.",
)
@click.option(
    "--log-profile",
    type=click.Choice([p.value for p in Profile]),
    default=Profile.development.value,
    envvar="LINKHEADER_LOG_PROFILE",
    show_envvar=True,
    help="Format of log messages.",
)
def parse(
    *,
    header: str,
    missing_rel: str | None,
    no_query: str | None,
    strict: bool | None,
    diagnostics: bool,
    log_level: str,
    log_profile: str,
) -> None:
    """Parse a Link header and print the result as JSON.

    HEADER is the value of the header. If it is omitted or "-", the header
    is read from standard input. Options not given on the command line are
    taken from LINKHEADER_* environment variables.
    """
    configure_logging(
        profile=log_profile, log_level=log_level, stream=sys.stderr
    )
    if header == "-":
        header = click.get_text_stream("stdin").read()

    overrides: dict[str, Any] = {}
    if missing_rel is not None:
        overrides["missing_rel"] = MissingRelPolicy(missing_rel)
    if no_query is not None:
        overrides["no_query"] = NoQueryPolicy(no_query)
    if strict is not None:
        overrides["strict"] = strict
    parser = LinkHeaderParser(ParserConfig(**overrides))

    try:
        results = parser.parse_link_values(header.strip())
    except LinkHeaderError as e:
        raise click.ClickException(str(e)) from e

    if diagnostics:
        for result in results:
            if isinstance(result, SkippedLinkValue):
                reason = result.reason.value
                report = {"value": result.value, "reason": reason}
                click.echo(json.dumps(report), err=True)
    click.echo(json.dumps(parser.to_mapping(results), indent=2))
