"""Main CLI entry point for scopekit."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
import yaml

from scopekit import __version__
from scopekit.core.errors import ScopeError
from scopekit.core.flag import DEFAULT_BIT_WIDTH, FlagScope
from scopekit.core.parser import parse_definition_file, serialize_definition
from scopekit.ui.console import make_console
from scopekit.ui.tables import definition_table

DEFAULT_DEFINITION = Path("scopes.yaml")


class PackedValue(click.ParamType):
    """Integer literal in any Python base: ``3``, ``0b11``, ``0x3``."""

    name = "value"

    def convert(
        self,
        value: str | int,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> int:
        if isinstance(value, int):
            return value
        try:
            return int(value.replace("_", ""), 0)
        except ValueError:
            self.fail(f"{value!r} is not an integer literal", param, ctx)


PACKED_VALUE = PackedValue()


@click.group()
@click.version_option(version=__version__, prog_name="scopekit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--definition",
    "-d",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="SCOPEKIT_DEFINITION",
    default=None,
    help=f"Scope definition YAML file (default: $SCOPEKIT_DEFINITION or ./{DEFAULT_DEFINITION})",
)
@click.option(
    "--bit-width",
    type=click.IntRange(min=1),
    default=DEFAULT_BIT_WIDTH,
    show_default=True,
    help="Highest number of bit positions a packed value may use",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, definition: Path | None, bit_width: int) -> None:
    """Inspect scope definitions and packed scope values."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["definition"] = definition or DEFAULT_DEFINITION
    ctx.obj["bit_width"] = bit_width


def _load_flags(ctx: click.Context) -> FlagScope:
    path: Path = ctx.obj["definition"]
    try:
        return FlagScope(parse_definition_file(path), bit_width=ctx.obj["bit_width"])
    except (FileNotFoundError, ScopeError) as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("show")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["table", "yaml", "json"]),
    default="table",
    show_default=True,
    help="Output format",
)
@click.pass_context
def show(ctx: click.Context, fmt: str) -> None:
    """Show every scope with its position and bit value."""
    flags = _load_flags(ctx)

    if fmt == "table":
        make_console().print(definition_table(flags))
        return

    payload = serialize_definition(flags.definition)
    if fmt == "yaml":
        click.echo(yaml.safe_dump(payload, sort_keys=False), nl=False)
    else:
        click.echo(json.dumps(payload, indent=2))


@cli.command("encode")
@click.argument("names", nargs=-1)
@click.pass_context
def encode(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Print the packed value granting exactly NAMES."""
    flags = _load_flags(ctx)
    try:
        value = flags.from_names(names)
    except ScopeError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(str(value))


@cli.command("decode")
@click.argument("value", type=PACKED_VALUE)
@click.option("--table", "as_table", is_flag=True, help="Render every scope as a table")
@click.pass_context
def decode(ctx: click.Context, value: int, as_table: bool) -> None:
    """Print the scopes granted in VALUE, in position order."""
    flags = _load_flags(ctx)
    try:
        granted = flags.names(value)
    except ScopeError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_table:
        make_console().print(definition_table(flags, value))
        return

    for name in flags.scopes:
        if name in granted:
            click.echo(name)

    stray = value & ~flags.mask
    if stray:
        click.echo(f"Warning: bits {stray:#b} are not assigned to any scope", err=True)


@cli.command("check")
@click.argument("value", type=PACKED_VALUE)
@click.argument("name")
@click.pass_context
def check(ctx: click.Context, value: int, name: str) -> None:
    """Exit 0 if NAME is granted in VALUE, 1 otherwise."""
    flags = _load_flags(ctx)
    try:
        granted = flags.can(name, value)
    except ScopeError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo("granted" if granted else "denied")
    ctx.exit(0 if granted else 1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
