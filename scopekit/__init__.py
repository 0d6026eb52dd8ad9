"""scopekit: named permission scopes as packed integers or sets of names."""

from scopekit.core.contract import ScopeInterface
from scopekit.core.dynamic import DynamicScope
from scopekit.core.errors import (
    ConfigurationError,
    ScopeError,
    ScopeValueError,
    UnknownScopeError,
)
from scopekit.core.flag import FlagScope
from scopekit.core.parser import parse_definition_dict, parse_definition_file
from scopekit.models.definition import ScopeDefinition

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DynamicScope",
    "FlagScope",
    "ScopeDefinition",
    "ScopeError",
    "ScopeInterface",
    "ScopeValueError",
    "UnknownScopeError",
    "__version__",
    "parse_definition_dict",
    "parse_definition_file",
]
