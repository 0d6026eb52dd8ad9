"""Reusable Rich table formatters for scope definitions and packed values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from scopekit.core.flag import FlagScope


def definition_table(flags: FlagScope, value: int | None = None) -> Table:
    """Build a table of scope name, position and bit value.

    When ``value`` is given, a column shows whether each scope is granted in it.
    """
    definition = flags.definition
    title = "Scope Definition" if value is None else f"Scopes in {value} ({value:#b})"
    table = Table(title=title, show_lines=False, pad_edge=False)
    table.add_column("Scope", style="bold")
    table.add_column("Position", justify="right")
    table.add_column("Bit", justify="right", style="muted")
    if value is not None:
        table.add_column("Granted")

    for name in definition.names:
        bit = flags.bit(name)
        row = [name, str(definition.position(name)), f"{bit:#x}"]
        if value is not None:
            row.append(
                "[scope.granted]yes[/scope.granted]"
                if flags.can(name, value)
                else "[scope.denied]no[/scope.denied]"
            )
        table.add_row(*row)

    return table
