"""Tests for the linkheader command-line interface."""

from __future__ import annotations

import json

from click.testing import CliRunner

from linkheader.cli import main

HEADER = (
    '<https://api.example.com/resource?page=2>; rel="next", '
    '<https://api.example.com/resource>; rel="self"'
)
EXPECTED = {
    "next": "?page=2",
    "self": "https://api.example.com/resource",
}


def test_parse() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["parse", HEADER], catch_exceptions=False)
    assert result.exit_code == 0
    assert json.loads(result.output) == EXPECTED


def test_parse_stdin() -> None:
    runner = CliRunner()
    result = runner.invoke(
        main, ["parse"], input=HEADER + "\n", catch_exceptions=False
    )
    assert result.exit_code == 0
    assert json.loads(result.output) == EXPECTED

    result = runner.invoke(
        main, ["parse", "-"], input=HEADER, catch_exceptions=False
    )
    assert result.exit_code == 0
    assert json.loads(result.output) == EXPECTED


def test_parse_options() -> None:
    runner = CliRunner()
    header = HEADER + ", <https://api.example.com/?x=1>"
    result = runner.invoke(
        main,
        ["parse", "--no-query", "empty", "--missing-rel", "drop", header],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "next": "?page=2",
        "self": "",
    }


def test_parse_environment() -> None:
    runner = CliRunner(env={"LINKHEADER_NO_QUERY": "empty"})
    result = runner.invoke(main, ["parse", HEADER], catch_exceptions=False)
    assert result.exit_code == 0
    assert json.loads(result.output)["self"] == ""


def test_parse_strict() -> None:
    runner = CliRunner()
    header = HEADER + ", broken"
    result = runner.invoke(main, ["parse", "--strict", header])
    assert result.exit_code == 1
    assert "missing_target" in result.output

    result = runner.invoke(main, ["parse", "--no-strict", header])
    assert result.exit_code == 0


def test_parse_diagnostics() -> None:
    runner = CliRunner()
    header = HEADER + ", broken"
    result = runner.invoke(
        main, ["parse", "--diagnostics", header], catch_exceptions=False
    )
    assert result.exit_code == 0
    report = {"value": "broken", "reason": "missing_target"}
    assert json.dumps(report) in result.output
    assert '"next": "?page=2"' in result.output


def test_help() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["help"], catch_exceptions=False)
    assert "Parse RFC 8288 Link headers" in result.output
    result = runner.invoke(main, ["help", "parse"], catch_exceptions=False)
    assert "--diagnostics" in result.output
    result = runner.invoke(main, ["help", "unknown"])
    assert result.exit_code != 0
    assert "Unknown help topic unknown" in result.output
