"""Shared test data for scopekit tests."""

from __future__ import annotations

SCOPE_DEFINITION = {
    "read": 0,
    "write": 1,
    "delete": 2,
    "admin": 3,
}
