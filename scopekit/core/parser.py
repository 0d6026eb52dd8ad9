"""YAML parser for scope definitions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from scopekit.core.errors import ConfigurationError
from scopekit.models.definition import ScopeDefinition

logger = logging.getLogger(__name__)

SUPPORTED_VERSIONS = {1}


def parse_definition_file(path: str | Path) -> ScopeDefinition:
    """Parse a scope definition YAML file.

    Args:
        path: Path to the definition YAML file

    Returns:
        Parsed ScopeDefinition

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigurationError: If file is not valid YAML or not a valid definition
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scope definition file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as err:
            raise ConfigurationError(f"Invalid YAML in {path}: {err}") from err

    logger.debug("Loaded scope definition from %s", path)
    return parse_definition_dict(data)


def parse_definition_dict(data: Any) -> ScopeDefinition:
    """Parse a scope definition from a dictionary.

    Accepts either a document with a ``scopes`` mapping (and an optional
    ``version``) or a bare ``{name: position}`` mapping.

    Raises:
        ConfigurationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Scope definition must be a dictionary")

    if "scopes" not in data:
        return ScopeDefinition.from_mapping(data)

    version = data.get("version", 1)
    if isinstance(version, bool) or version not in SUPPORTED_VERSIONS:
        raise ConfigurationError(f"Unsupported scope definition version: {version!r}")

    scopes = data["scopes"]
    if not isinstance(scopes, dict):
        raise ConfigurationError("'scopes' must be a mapping of scope name to position")

    return ScopeDefinition.from_mapping(scopes)


def serialize_definition(definition: ScopeDefinition) -> dict[str, Any]:
    """Serialize a definition to a dictionary for YAML output, in position order."""
    return {
        "version": 1,
        "scopes": {name: definition.scopes[name] for name in definition.names},
    }
