"""Scope definition model: the caller-supplied map of scope name to slot index."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
    StrictInt,
    ValidationError,
    field_validator,
)

from scopekit.core.errors import ConfigurationError, ScopeValueError, UnknownScopeError

logger = logging.getLogger(__name__)


class ScopeDefinition(BaseModel):
    """A fixed alphabet of scope names, each assigned a unique slot index.

    Construct it through :meth:`from_mapping` (or :meth:`coerce`) to get a
    :class:`ConfigurationError` instead of a pydantic ``ValidationError``
    when the mapping is invalid.
    """

    model_config = ConfigDict(frozen=True)

    scopes: Mapping[str, StrictInt]

    _names: tuple[str, ...] = PrivateAttr(default=())

    @field_validator("scopes")
    @classmethod
    def _check_scopes(cls, value: Mapping[str, int]) -> Mapping[str, int]:
        seen: dict[int, str] = {}
        for name, position in value.items():
            if not name.strip():
                raise ValueError("scope names must be non-empty")
            if position < 0:
                raise ValueError(f"position for scope {name!r} must be >= 0, got {position}")
            if position in seen:
                raise ValueError(
                    f"duplicate position {position} for scopes {seen[position]!r} and {name!r}"
                )
            seen[position] = name
        # Read-only view; the alphabet never changes after construction.
        return MappingProxyType(dict(value))

    def model_post_init(self, __context: Any) -> None:
        self._names = tuple(sorted(self.scopes, key=self.scopes.__getitem__))

    @classmethod
    def from_mapping(cls, scopes: Mapping[str, int]) -> ScopeDefinition:
        """Build a definition from a ``{name: position}`` mapping.

        Raises:
            ConfigurationError: If a name is empty or a position is not a
                unique non-negative integer
        """
        if not isinstance(scopes, Mapping):
            raise ConfigurationError(
                f"Scope definition must be a mapping, got {type(scopes).__name__}"
            )
        try:
            definition = cls(scopes=dict(scopes))
        except ValidationError as exc:
            raise ConfigurationError(_format_validation_error(exc)) from exc
        logger.debug("Built scope definition with %d scopes", len(definition.scopes))
        return definition

    @classmethod
    def coerce(cls, value: ScopeDefinition | Mapping[str, int]) -> ScopeDefinition:
        """Return ``value`` as a definition, validating plain mappings."""
        if isinstance(value, ScopeDefinition):
            return value
        return cls.from_mapping(value)

    @property
    def names(self) -> tuple[str, ...]:
        """Scope names ordered by position."""
        return self._names

    @property
    def max_position(self) -> int | None:
        return max(self.scopes.values(), default=None)

    def position(self, scope: str) -> int:
        try:
            return self.scopes[scope]
        except (KeyError, TypeError):
            raise UnknownScopeError(scope, self.names) from None

    def require(self, scope: Any) -> str:
        """Return ``scope`` unchanged, or raise if it is not in the alphabet."""
        if not isinstance(scope, str) or scope not in self.scopes:
            raise UnknownScopeError(scope, self.names)
        return scope

    def checked_grants(self, grants: Mapping[str, bool]) -> list[tuple[str, bool]]:
        """Validate every entry of a grant map before any of them is applied.

        Raises:
            UnknownScopeError: If a key is not in the alphabet
            ScopeValueError: If a value is not a bool
        """
        checked = []
        for scope, granted in grants.items():
            self.require(scope)
            if not isinstance(granted, bool):
                raise ScopeValueError(
                    f"Grant for scope {scope!r} must be a bool, got {type(granted).__name__}"
                )
            checked.append((scope, granted))
        return checked

    def __contains__(self, scope: object) -> bool:
        return isinstance(scope, str) and scope in self.scopes


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(item) for item in error.get("loc", ()))
        msg = str(error.get("msg", "invalid value")).removeprefix("Value error, ")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "Invalid scope definition: " + "; ".join(parts)
