"""Configuration for formstate using Pydantic models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SchemaAdapter(str, Enum):
    """Schema variants a Validation instance can be built from."""
    NATIVE = "native"
    PYDANTIC = "pydantic"
    JSONSCHEMA = "jsonschema"


class SchemaConfig(BaseModel):
    """Construction-time configuration for a Validation instance."""
    adapter: SchemaAdapter = SchemaAdapter.NATIVE
    checkbox_type: str = Field(alias="checkboxType", default="checkbox")

    @field_validator("checkbox_type")
    @classmethod
    def validate_checkbox_type(cls, v):
        if not v.strip():
            raise ValueError("checkbox_type must be a non-empty string")
        return v

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)


def resolve_config(config: SchemaConfig | dict[str, Any] | None = None) -> SchemaConfig:
    """Coerce the accepted config forms into a SchemaConfig.

    Args:
        config: A SchemaConfig, a dictionary with the same keys, or None

    Returns:
        SchemaConfig: Validated configuration (defaults when None)

    Raises:
        pydantic.ValidationError: If the dictionary holds unknown or invalid keys
    """
    if config is None:
        return SchemaConfig()
    if isinstance(config, SchemaConfig):
        return config
    return SchemaConfig.model_validate(config)
