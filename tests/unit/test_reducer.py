"""Tests for the pure state reducer functions."""

import pytest

from formstate.models import FieldState
from formstate.reducer import (
    calculate_is_valid,
    create_validation_state,
    gather_validation_errors,
    get_all_errors,
    get_error,
    is_property_valid,
    merge_field,
    update_property,
)
from formstate.schema import NativeSchema


@pytest.fixture
def native_schema(schema):
    return NativeSchema(schema)


@pytest.fixture
def invalid_state():
    return {
        "name": FieldState(dirty=True, is_valid=False, errors=["Cannot be bob.", "Must be dingo."]),
        "age": FieldState(dirty=True, is_valid=False, errors=["Must be 18."]),
        "agreement": FieldState(dirty=True, is_valid=True, errors=[]),
    }


class TestCreateValidationState:
    """Test initial state construction."""

    def test_every_field_clean_and_valid(self, native_schema):
        state = create_validation_state(native_schema)
        assert list(state) == ["name", "age", "agreement"]
        assert all(field_state == FieldState.initial() for field_state in state.values())

    def test_empty_schema(self):
        assert create_validation_state(NativeSchema({})) == {}


class TestUpdateProperty:
    """Test single-field evaluation wrapped with a dirty flag."""

    def test_failing_field(self, native_schema, failing_data):
        field_state = update_property(native_schema, "name", failing_data, dirty=True)
        assert field_state == FieldState(dirty=True, is_valid=False, errors=["Cannot be bob."])

    def test_dirty_flag_is_taken_from_caller(self, native_schema, default_data):
        assert update_property(native_schema, "name", default_data, dirty=False).dirty is False
        assert update_property(native_schema, "name", default_data, dirty=True).dirty is True

    def test_unknown_field_is_valid(self, native_schema, failing_data):
        field_state = update_property(native_schema, "balls", failing_data, dirty=True)
        assert field_state.is_valid is True
        assert field_state.errors == ()


class TestMergeField:
    """Test copy-on-write merging."""

    def test_replaces_exactly_one_key(self, invalid_state):
        replacement = FieldState(dirty=True, is_valid=True, errors=[])
        merged = merge_field(invalid_state, "name", replacement)

        assert merged is not invalid_state
        assert merged["name"] is replacement
        assert merged["age"] is invalid_state["age"]
        assert merged["agreement"] is invalid_state["agreement"]
        assert invalid_state["name"].is_valid is False

    def test_preserves_key_order(self, invalid_state):
        merged = merge_field(invalid_state, "age", FieldState.initial())
        assert list(merged) == ["name", "age", "agreement"]


class TestDerivedViews:
    """Test readers over a state."""

    def test_is_property_valid(self, invalid_state):
        assert is_property_valid(invalid_state, "name") is False
        assert is_property_valid(invalid_state, "agreement") is True
        assert is_property_valid(invalid_state, "unknown") is True

    def test_calculate_is_valid(self, invalid_state):
        assert calculate_is_valid(invalid_state) is False
        assert calculate_is_valid({}) is True
        assert calculate_is_valid({"agreement": invalid_state["agreement"]}) is True

    def test_get_error(self, invalid_state):
        assert get_error(invalid_state, "name") == "Cannot be bob."
        assert get_error(invalid_state, "agreement") == ""
        assert get_error(invalid_state, "unknown") == ""

    def test_get_all_errors(self, invalid_state):
        assert get_all_errors(invalid_state, "name") == ["Cannot be bob.", "Must be dingo."]
        assert get_all_errors(invalid_state, "unknown") == []

    def test_gather_validation_errors_uses_state_order(self, invalid_state):
        assert gather_validation_errors(invalid_state) == ["Cannot be bob.", "Must be 18."]
        reordered = {"age": invalid_state["age"], "name": invalid_state["name"]}
        assert gather_validation_errors(reordered) == ["Must be 18.", "Cannot be bob."]
