"""Packed-integer scope encoding: one bit per scope."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from scopekit.core.contract import GrantMap
from scopekit.core.errors import ConfigurationError, ScopeValueError
from scopekit.models.definition import ScopeDefinition

logger = logging.getLogger(__name__)

# Width of an unsigned 64-bit storage column.
DEFAULT_BIT_WIDTH = 64


class FlagScope:
    """Encode a set of granted scopes as a single non-negative integer.

    Bit ``i`` of the value is set when the scope at position ``i`` is granted.
    Python integers do not overflow, so ``bit_width`` only bounds the highest
    position a definition may use; it defaults to 64 so values fit an
    unsigned 64-bit column.

    Example:
        >>> flags = FlagScope({"read": 0, "write": 1, "delete": 2, "admin": 3})
        >>> flags.create({"read": True, "write": True})
        3
    """

    def __init__(
        self,
        definition: ScopeDefinition | Mapping[str, int],
        *,
        bit_width: int = DEFAULT_BIT_WIDTH,
    ) -> None:
        if isinstance(bit_width, bool) or not isinstance(bit_width, int) or bit_width <= 0:
            raise ConfigurationError(f"bit_width must be a positive integer, got {bit_width!r}")

        self._definition = ScopeDefinition.coerce(definition)
        self._bit_width = bit_width

        max_position = self._definition.max_position
        if max_position is not None and max_position >= bit_width:
            offenders = sorted(
                name for name, pos in self._definition.scopes.items() if pos >= bit_width
            )
            raise ConfigurationError(
                f"Positions must be below bit_width={bit_width}; "
                f"out of range: {', '.join(offenders)}"
            )

        self._bits: Mapping[str, int] = MappingProxyType(
            {name: 1 << pos for name, pos in self._definition.scopes.items()}
        )
        self._mask = sum(self._bits.values())
        self._limit = 1 << bit_width
        logger.debug(
            "Built flag scope with %d scopes (bit_width=%d)", len(self._bits), bit_width
        )

    @property
    def definition(self) -> ScopeDefinition:
        return self._definition

    @property
    def scopes(self) -> tuple[str, ...]:
        return self._definition.names

    @property
    def bit_width(self) -> int:
        return self._bit_width

    @property
    def mask(self) -> int:
        """All defined bits set."""
        return self._mask

    def bit(self, scope: str) -> int:
        """Return the single-bit value of ``scope``."""
        return self._bits[self._definition.require(scope)]

    def can(self, scope: str, value: int) -> bool:
        return (self._check_value(value) & self.bit(scope)) != 0

    def allow(self, value: int, scope: str) -> int:
        return self._check_value(value) | self.bit(scope)

    def deny(self, value: int, scope: str) -> int:
        return self._check_value(value) & ~self.bit(scope)

    def create(self, grants: GrantMap) -> int:
        value = 0
        for scope, granted in self._definition.checked_grants(grants):
            if granted:
                value = self.allow(value, scope)
        return value

    def edit(self, value: int, changes: GrantMap) -> int:
        result = self._check_value(value)
        for scope, granted in self._definition.checked_grants(changes):
            result = self.allow(result, scope) if granted else self.deny(result, scope)
        return result

    def names(self, value: int) -> frozenset[str]:
        """Return the scope names granted in ``value``."""
        value = self._check_value(value)
        return frozenset(name for name, bit in self._bits.items() if value & bit)

    def from_names(self, names: Iterable[str]) -> int:
        """Return the value granting exactly ``names``."""
        return self.create({name: True for name in names})

    def _check_value(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ScopeValueError(
                f"Packed scope value must be an int, got {type(value).__name__}"
            )
        if value < 0 or value >= self._limit:
            raise ScopeValueError(
                f"Packed scope value {value} is outside 0..2**{self._bit_width} - 1"
            )
        return value

    def __repr__(self) -> str:
        return f"FlagScope(scopes={self.scopes!r}, bit_width={self._bit_width})"
