"""Validation state models.

The state is a plain ``dict`` of field name to :class:`FieldState`. It is
never edited in place: every update builds a new dict and carries the
untouched ``FieldState`` objects over by reference.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class FieldResult(BaseModel):
    """Outcome of evaluating one field against one data snapshot."""
    is_valid: bool = Field(alias="isValid", default=True)
    errors: list[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @classmethod
    def from_errors(cls, errors: list[str]) -> "FieldResult":
        """Build a result whose validity follows from the error list."""
        return cls(is_valid=not errors, errors=list(errors))


class FieldState(BaseModel):
    """Stored validation state of a single field."""
    dirty: bool = False
    is_valid: bool = Field(alias="isValid", default=True)
    errors: tuple[str, ...] = ()

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @classmethod
    def initial(cls) -> "FieldState":
        """Clean, valid state every field starts from."""
        return cls(dirty=False, is_valid=True, errors=())

    @classmethod
    def from_result(cls, result: FieldResult, dirty: bool) -> "FieldState":
        return cls(dirty=dirty, is_valid=result.is_valid, errors=tuple(result.errors))

    @field_serializer("errors")
    def serialize_errors(self, errors: tuple[str, ...]) -> list[str]:
        return list(errors)

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: ``{"dirty", "isValid", "errors"}``."""
        return self.model_dump(by_alias=True)


ValidationState = dict[str, FieldState]


def state_to_dict(state: Mapping[str, FieldState]) -> dict[str, dict[str, Any]]:
    """Serialize a validation state to its wire shape."""
    return {name: field_state.to_dict() for name, field_state in state.items()}


def state_from_dict(data: Mapping[str, Any]) -> ValidationState:
    """Build a validation state from wire-shaped mappings or FieldState values.

    Keys are taken as given; nothing is reconciled against a schema.

    Raises:
        pydantic.ValidationError: If an entry does not have the FieldState shape
    """
    return {
        name: value if isinstance(value, FieldState) else FieldState.model_validate(value)
        for name, value in data.items()
    }
