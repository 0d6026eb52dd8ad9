"""Pydantic data models for scopekit."""

from scopekit.models.definition import ScopeDefinition

__all__ = ["ScopeDefinition"]
