"""Set-of-names scope encoding."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from scopekit.core.contract import GrantMap
from scopekit.core.errors import ScopeValueError
from scopekit.models.definition import ScopeDefinition


class DynamicScope:
    """Encode a set of granted scopes as a ``frozenset`` of scope names.

    Positions in the definition are ignored; only its alphabet is used, to
    reject unknown names the same way :class:`FlagScope` does.
    """

    def __init__(self, definition: ScopeDefinition | Mapping[str, int]) -> None:
        self._definition = ScopeDefinition.coerce(definition)

    @property
    def definition(self) -> ScopeDefinition:
        return self._definition

    @property
    def scopes(self) -> tuple[str, ...]:
        return self._definition.names

    def can(self, scope: str, value: Iterable[str]) -> bool:
        return self._definition.require(scope) in _as_set(value)

    def allow(self, value: Iterable[str], scope: str) -> frozenset[str]:
        return _as_set(value) | {self._definition.require(scope)}

    def deny(self, value: Iterable[str], scope: str) -> frozenset[str]:
        return _as_set(value) - {self._definition.require(scope)}

    def create(self, grants: GrantMap) -> frozenset[str]:
        checked = self._definition.checked_grants(grants)
        return frozenset(scope for scope, granted in checked if granted)

    def edit(self, value: Iterable[str], changes: GrantMap) -> frozenset[str]:
        result = _as_set(value)
        for scope, granted in self._definition.checked_grants(changes):
            result = self.allow(result, scope) if granted else self.deny(result, scope)
        return result

    def __repr__(self) -> str:
        return f"DynamicScope(scopes={self.scopes!r})"


def _as_set(value: Iterable[str]) -> frozenset[str]:
    if isinstance(value, str):
        # A bare string would otherwise be split into characters.
        raise ScopeValueError("Scope set must be a collection of names, not a string")
    return frozenset(value)
