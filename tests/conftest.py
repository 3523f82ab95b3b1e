# File: tests/conftest.py
"""Pytest configuration and fixtures."""

import pytest

from typedenum import TypedEnum, aliases, build
from typedenum.core.config import reset_settings
from typedenum.core.registry import clear_registry


@pytest.fixture(autouse=True)
def isolated_registry(monkeypatch):
    """Start every test with an empty registry and settings from a clean environment."""
    for var in ("TYPEDENUM_LOG_LEVEL", "TYPEDENUM_LOG_FORMAT", "TYPEDENUM_REGISTRY"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    clear_registry()

    yield

    clear_registry()
    reset_settings()


@pytest.fixture
def invoice_status() -> TypedEnum:
    """String-stored enum with values open, closed, paid."""
    return build("InvoiceStatus", ["open", "closed", "paid"])


@pytest.fixture
def invoice_code() -> TypedEnum:
    """Integer-stored enum with values open=1, closed=2."""
    return build("InvoiceCode", [("open", 1), ("closed", 2)])


@pytest.fixture
def string_values() -> TypedEnum:
    """String-stored enum with values val_1, val_2, val_3."""
    return build("StringValues", ["val_1", "val_2", "val_3"])


@pytest.fixture
def integer_values() -> TypedEnum:
    """Integer-stored enum with values val_1=1, val_2=2, val_3=3."""
    return build("IntegerValues", {"val_1": 1, "val_2": 2, "val_3": 3})


@pytest.fixture
def clauses() -> TypedEnum:
    """String-stored enum accepting the legacy alias ``to_replace`` for val_1."""
    return build(
        "Clauses",
        ["val_1", "val_2", "val_3"],
        overrides=aliases({"to_replace": "val_1"}),
    )
