"""Shared fixtures for formstate tests."""

import pytest

from formstate import Validation, string_is_not_empty


@pytest.fixture
def schema():
    """Native schema with a multi-rule field and two single-rule fields."""
    return {
        "name": [
            {
                "error": "Name is required.",
                "validation": lambda data: string_is_not_empty(data.get("name", "")),
            },
            {
                "error": "Cannot be bob.",
                "validation": lambda data: data.get("name") != "bob",
            },
            {
                "error": "Must be dingo.",
                "validation": lambda data: data.get("name") == "dingo" if data.get("dingo") else True,
            },
        ],
        "age": [
            {
                "error": "Must be 18.",
                "validation": lambda data: (data.get("age") or 0) >= 18,
            },
        ],
        "agreement": [
            {
                "error": "Must accept terms.",
                "validation": lambda data: bool(data.get("agreement")),
            },
        ],
    }


@pytest.fixture
def default_data():
    """Snapshot that passes every rule."""
    return {"name": "jack", "dingo": False, "age": 42, "agreement": True}


@pytest.fixture
def failing_data(default_data):
    """Snapshot failing the name and age rules."""
    return {**default_data, "name": "bob", "age": 15}


@pytest.fixture
def validation(schema):
    """Fresh Validation over the native schema."""
    return Validation(schema)


@pytest.fixture
def initial_state_dict():
    """Wire shape of a fresh state for the native schema."""
    clean = {"dirty": False, "isValid": True, "errors": []}
    return {"name": dict(clean), "age": dict(clean), "agreement": dict(clean)}
