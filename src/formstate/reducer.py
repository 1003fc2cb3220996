"""Pure functions over the validation state.

Nothing here mutates its inputs. Update functions return a new state dict
in which only the named field is replaced; reader functions fall back to
permissive defaults for fields the state does not track.
"""

from collections.abc import Mapping
from typing import Any

from .evaluator import evaluate
from .models import FieldState, ValidationState
from .schema import ValidationSchema


def create_validation_state(schema: ValidationSchema) -> ValidationState:
    """Build the initial state: every schema field clean and valid."""
    return {name: FieldState.initial() for name in schema.fields}


def update_property(schema: ValidationSchema, field_name: str, data: Any, dirty: bool) -> FieldState:
    """Evaluate a field and wrap the result with the supplied dirty flag."""
    return FieldState.from_result(evaluate(schema, field_name, data), dirty=dirty)


def merge_field(state: Mapping[str, FieldState], field_name: str, field_state: FieldState) -> ValidationState:
    """Return a new state with exactly one field replaced."""
    return {**state, field_name: field_state}


def is_property_valid(state: Mapping[str, FieldState], field_name: str) -> bool:
    field_state = state.get(field_name)
    if field_state is None:
        return True
    return field_state.is_valid


def calculate_is_valid(state: Mapping[str, FieldState]) -> bool:
    """Aggregate validity: True only if every tracked field is valid.

    All keys are visited, in state order; an empty state is valid.
    """
    valid = True
    for name in state:
        valid = is_property_valid(state, name) and valid
    return valid


def get_error(state: Mapping[str, FieldState], field_name: str) -> str:
    """First error of a field, or an empty string."""
    field_state = state.get(field_name)
    if field_state is None or not field_state.errors:
        return ""
    return field_state.errors[0]


def get_all_errors(state: Mapping[str, FieldState], field_name: str) -> list[str]:
    """Copy of every error of a field, or an empty list."""
    field_state = state.get(field_name)
    if field_state is None:
        return []
    return list(field_state.errors)


def gather_validation_errors(state: Mapping[str, FieldState]) -> list[str]:
    """First error of each field that has one, in state key order."""
    errors = []
    for name in state:
        error = get_error(state, name)
        if error:
            errors.append(error)
    return errors
