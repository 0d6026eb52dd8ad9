"""The operation set every scope encoding implements."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, TypeVar, runtime_checkable

from scopekit.models.definition import ScopeDefinition

T = TypeVar("T")

GrantMap = Mapping[str, bool]


@runtime_checkable
class ScopeInterface(Protocol[T]):
    """Structural interface shared by :class:`FlagScope` and :class:`DynamicScope`.

    ``T`` is the scope-set value: ``int`` for the packed encoding and
    ``frozenset[str]`` for the set encoding. Values are immutable; ``allow``,
    ``deny`` and ``edit`` return a new value and leave their input untouched.

    Every operation raises :class:`~scopekit.core.errors.UnknownScopeError`
    for a scope name outside the definition, including keys of a grant map
    that are mapped to ``False``. Grant map values must be bools; anything
    else raises :class:`~scopekit.core.errors.ScopeValueError`.
    """

    @property
    def definition(self) -> ScopeDefinition:
        """The definition this encoding was built from."""
        ...

    @property
    def scopes(self) -> tuple[str, ...]:
        """The scope alphabet, ordered by position."""
        ...

    def can(self, scope: str, value: T) -> bool:
        """Return True if ``scope`` is granted in ``value``."""
        ...

    def allow(self, value: T, scope: str) -> T:
        """Return ``value`` with ``scope`` granted."""
        ...

    def deny(self, value: T, scope: str) -> T:
        """Return ``value`` with ``scope`` revoked."""
        ...

    def create(self, grants: GrantMap) -> T:
        """Return a value granting exactly the scopes mapped to True."""
        ...

    def edit(self, value: T, changes: GrantMap) -> T:
        """Apply ``changes`` to ``value``: True allows a scope, False denies it."""
        ...
