"""Tests for scope definitions and the YAML parser."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from scopekit import (
    ConfigurationError,
    ScopeDefinition,
    UnknownScopeError,
    parse_definition_dict,
    parse_definition_file,
)
from scopekit.core.parser import serialize_definition

from tests.helpers import SCOPE_DEFINITION


class TestScopeDefinition:
    """Tests for ScopeDefinition validation and accessors."""

    def test_from_mapping(self):
        definition = ScopeDefinition.from_mapping(SCOPE_DEFINITION)

        assert definition.names == ("read", "write", "delete", "admin")
        assert definition.position("delete") == 2
        assert definition.max_position == 3
        assert "admin" in definition
        assert "superuser" not in definition

    def test_empty_definition(self):
        definition = ScopeDefinition.from_mapping({})

        assert definition.names == ()
        assert definition.max_position is None

    def test_coerce_returns_same_instance(self):
        definition = ScopeDefinition.from_mapping(SCOPE_DEFINITION)
        assert ScopeDefinition.coerce(definition) is definition

    def test_coerce_copies_mapping(self):
        source = dict(SCOPE_DEFINITION)
        definition = ScopeDefinition.coerce(source)
        source["superuser"] = 9

        assert "superuser" not in definition

    def test_frozen(self):
        definition = ScopeDefinition.from_mapping(SCOPE_DEFINITION)
        with pytest.raises(ValidationError):
            definition.scopes = {}

    def test_duplicate_positions(self):
        with pytest.raises(ConfigurationError, match="duplicate position 0 for scopes 'read' and 'view'"):
            ScopeDefinition.from_mapping({"read": 0, "view": 0})

    def test_negative_position(self):
        with pytest.raises(ConfigurationError, match="must be >= 0"):
            ScopeDefinition.from_mapping({"read": -2})

    @pytest.mark.parametrize("position", ["1", 1.5, True, None])
    def test_non_integer_position(self, position):
        with pytest.raises(ConfigurationError, match="Invalid scope definition"):
            ScopeDefinition.from_mapping({"read": position})

    def test_empty_name(self):
        with pytest.raises(ConfigurationError, match="non-empty"):
            ScopeDefinition.from_mapping({" ": 0})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            ScopeDefinition.from_mapping(["read", "write"])

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            ScopeDefinition.from_mapping({"read": -1})

    def test_position_unknown_scope(self):
        definition = ScopeDefinition.from_mapping(SCOPE_DEFINITION)
        with pytest.raises(UnknownScopeError):
            definition.position("superuser")

    def test_scopes_are_read_only(self):
        definition = ScopeDefinition.from_mapping(SCOPE_DEFINITION)

        with pytest.raises(TypeError):
            definition.scopes["superuser"] = 5  # type: ignore[index]

        assert "superuser" not in definition
        assert definition.names == ("read", "write", "delete", "admin")

    def test_names_computed_once(self):
        definition = ScopeDefinition.from_mapping(SCOPE_DEFINITION)
        assert definition.names is definition.names


class TestParseDefinition:
    """Tests for parsing definitions from dicts and YAML files."""

    def test_parse_document(self):
        definition = parse_definition_dict({"version": 1, "scopes": SCOPE_DEFINITION})
        assert definition.scopes == SCOPE_DEFINITION

    def test_parse_bare_mapping(self):
        definition = parse_definition_dict({"read": 0, "write": 1})
        assert definition.names == ("read", "write")

    def test_unsupported_version(self):
        with pytest.raises(ConfigurationError, match="Unsupported scope definition version"):
            parse_definition_dict({"version": 2, "scopes": {"read": 0}})

    def test_scopes_not_mapping(self):
        with pytest.raises(ConfigurationError, match="'scopes' must be a mapping"):
            parse_definition_dict({"scopes": ["read"]})

    def test_not_a_dict(self):
        with pytest.raises(ConfigurationError, match="must be a dictionary"):
            parse_definition_dict(None)

    def test_parse_file(self, definition_file):
        definition = parse_definition_file(definition_file)
        assert definition.names == ("read", "write", "delete", "admin")

    def test_parse_file_accepts_str_path(self, definition_file):
        assert parse_definition_file(str(definition_file)).position("admin") == 3

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="not found"):
            parse_definition_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "scopes.yaml"
        path.write_text("scopes: [read, write\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            parse_definition_file(path)

    def test_non_utf8_file(self, tmp_path: Path):
        path = tmp_path / "scopes.yaml"
        path.write_bytes(b"scopes:\n  r\xffead: 0\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            parse_definition_file(path)

    def test_invalid_definition_in_file(self, tmp_path: Path):
        path = tmp_path / "scopes.yaml"
        path.write_text(yaml.safe_dump({"scopes": {"read": 0, "write": 0}}), encoding="utf-8")

        with pytest.raises(ConfigurationError, match="duplicate position"):
            parse_definition_file(path)

    def test_serialize_orders_by_position(self):
        definition = ScopeDefinition.from_mapping({"admin": 3, "read": 0, "write": 1})
        payload = serialize_definition(definition)

        assert payload == {"version": 1, "scopes": {"read": 0, "write": 1, "admin": 3}}
        assert list(payload["scopes"]) == ["read", "write", "admin"]
        assert parse_definition_dict(payload) == definition
