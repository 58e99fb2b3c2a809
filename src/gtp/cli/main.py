"""Click CLI group: parse and check commands."""

from __future__ import annotations

import json
import sys
from typing import IO

import click

from gtp.commands import TypedCommand, UnrecognisedCommand, custom_command
from gtp.config import get_settings, validate_settings
from gtp.errors import ConfigError, GtpError
from gtp.logging import bind_context, clear_context, configure_logging
from gtp.parser import RawCommand, parse


def _describe(result: RawCommand | TypedCommand | UnrecognisedCommand) -> dict[str, object]:
    if isinstance(result, TypedCommand):
        return {"variant": result.value}
    payload: dict[str, object] = {
        "count": result.count,
        "name": result.name,
        "args": list(result.args),
    }
    if isinstance(result, UnrecognisedCommand):
        payload["variant"] = None
    return payload


def format_result(
    result: RawCommand | TypedCommand | UnrecognisedCommand, json_output: bool
) -> str:
    if json_output:
        return json.dumps({"ok": True, **_describe(result)})
    if isinstance(result, TypedCommand):
        return f"variant: {result.value}"
    prefix = "unrecognised" if isinstance(result, UnrecognisedCommand) else "command"
    count = "-" if result.count is None else str(result.count)
    return f"{prefix}: count={count} name={result.name} args={list(result.args)}"


@click.group()
def cli() -> None:
    """Go Text Protocol line tools."""
    settings = get_settings()
    try:
        validate_settings(settings)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    configure_logging(settings.log_level, settings.log_json, app_env=settings.app_env)


@cli.command("parse")
@click.argument("line")
@click.option(
    "--variant",
    "variants",
    multiple=True,
    help="Declare a command variant; repeat to declare several.",
)
@click.option("--json", "json_output", is_flag=True, help="Print structured JSON output.")
def parse_line(line: str, variants: tuple[str, ...], json_output: bool) -> None:
    """Parse one protocol line and print the command."""
    try:
        target = custom_command("Command", list(variants)) if variants else None
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--variant") from exc

    try:
        result = parse(line) if target is None else parse(line, target)
    except GtpError as exc:
        if json_output:
            error = {"code": exc.kind, "message": str(exc)}
            click.echo(json.dumps({"ok": False, "error": error}))
            sys.exit(1)
        raise click.ClickException(f"{exc.kind}: {exc}") from exc

    click.echo(format_result(result, json_output=json_output))


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
def check(source: IO[str]) -> None:
    """Parse every line of SOURCE (default: stdin) and report failures."""
    bind_context(command="check", source=getattr(source, "name", "-"))
    failures = 0
    checked = 0
    try:
        for number, line in enumerate(source, start=1):
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            checked += 1
            try:
                parse(line)
            except GtpError as exc:
                failures += 1
                click.echo(f"line {number}: {exc.kind}: {exc}")
    finally:
        clear_context()

    click.echo(f"checked {checked} lines, {failures} failed")
    if failures:
        sys.exit(1)
