"""Shared Rich Console and style definitions for the scopekit CLI."""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

SCOPEKIT_THEME = Theme(
    {
        "info": "cyan",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "heading": "bold cyan",
        "muted": "dim",
        "scope.granted": "green",
        "scope.denied": "dim",
    }
)


def make_console(*, stderr: bool = False) -> Console:
    """Create a themed console bound to the current stdout/stderr.

    Built per call so click's CliRunner output capture sees the output.
    """
    return Console(stderr=stderr, theme=SCOPEKIT_THEME)
