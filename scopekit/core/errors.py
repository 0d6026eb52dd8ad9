"""Exceptions raised by scope encodings and definitions."""

from __future__ import annotations

from collections.abc import Iterable


class ScopeError(Exception):
    """Base class for scopekit errors."""


class UnknownScopeError(ScopeError, KeyError):
    """Raised when a scope name is not part of the definition's alphabet."""

    def __init__(self, scope: object, known: Iterable[str] = ()) -> None:
        self.scope = scope
        self.known = tuple(known)
        super().__init__(scope)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the whole message
        known = ", ".join(self.known) or "<none>"
        return f"Unknown scope: {self.scope!r} (known scopes: {known})"


class ConfigurationError(ScopeError, ValueError):
    """Raised when a scope definition is invalid."""


class ScopeValueError(ScopeError, ValueError):
    """Raised when a packed scope value is malformed."""
