"""Shared test fixtures for scopekit."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from scopekit import DynamicScope, FlagScope
from tests.helpers import SCOPE_DEFINITION


@pytest.fixture
def flag_scope() -> FlagScope:
    return FlagScope(SCOPE_DEFINITION)


@pytest.fixture
def dynamic_scope() -> DynamicScope:
    return DynamicScope(SCOPE_DEFINITION)


@pytest.fixture(params=["flag", "dynamic"])
def encoding(request: pytest.FixtureRequest) -> FlagScope | DynamicScope:
    """Each encoding in turn, for tests of the shared contract."""
    if request.param == "flag":
        return FlagScope(SCOPE_DEFINITION)
    return DynamicScope(SCOPE_DEFINITION)


@pytest.fixture
def definition_file(tmp_path: Path) -> Path:
    """Write the reference definition to scopes.yaml and return its path."""
    path = tmp_path / "scopes.yaml"
    path.write_text(
        yaml.safe_dump({"version": 1, "scopes": SCOPE_DEFINITION}, sort_keys=False),
        encoding="utf-8",
    )
    return path
