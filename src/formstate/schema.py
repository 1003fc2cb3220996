"""Schema variants.

A schema maps field names to whatever knows how to validate them. Every
variant exposes the same two things: the ordered field names, and
``evaluate_field(name, data)``. Field order drives state key order and
therefore the order of ``validation_errors``.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .config import SchemaAdapter, SchemaConfig
from .evaluator import evaluate_rules
from .exceptions import SchemaDefinitionError
from .models import FieldResult
from .rules import Rule, coerce_rule

logger = logging.getLogger(__name__)


class ValidationSchema(ABC):
    """Base class for schema variants."""

    @property
    @abstractmethod
    def fields(self) -> tuple[str, ...]:
        """Declared field names in declaration order."""
        pass

    @abstractmethod
    def evaluate_field(self, name: str, data: Any) -> FieldResult:
        """Validate a single declared field against a data snapshot.

        Args:
            name: Field declared by this schema
            data: Caller-owned data snapshot

        Returns:
            FieldResult with the field's error messages
        """
        pass

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __iter__(self):
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


class NativeSchema(ValidationSchema):
    """Schema built from a mapping of field name to a list of rules.

    Rule entries may be :class:`Rule` objects, auto rules, or mappings with
    ``error`` and ``validation`` keys; they are all converted to bound
    rules here, once.
    """

    def __init__(self, rules: Mapping[str, Any]):
        if not isinstance(rules, Mapping):
            raise SchemaDefinitionError(
                f"Native schema must be a mapping of field names to rules, got {type(rules).__name__}"
            )
        bound: dict[str, tuple[Rule, ...]] = {}
        for name, entries in rules.items():
            if isinstance(entries, (str, bytes, Mapping)) or not hasattr(entries, "__iter__"):
                raise SchemaDefinitionError(
                    f"Rules for '{name}' must be a list", field_name=name
                )
            bound[name] = tuple(coerce_rule(entry, name) for entry in entries)
        self._rules = bound
        self._fields = tuple(bound)

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    def rules_for(self, name: str) -> tuple[Rule, ...]:
        """Bound rules for a field, empty when the field is unknown."""
        return self._rules.get(name, ())

    def evaluate_field(self, name: str, data: Any) -> FieldResult:
        return evaluate_rules(self.rules_for(name), data)


def build_schema(schema: Any, config: SchemaConfig) -> ValidationSchema:
    """Build the schema variant selected by the configuration.

    Args:
        schema: Rule mapping, pydantic model class or JSON Schema document,
            or an already built ValidationSchema
        config: Resolved schema configuration

    Returns:
        ValidationSchema: Schema ready for evaluation

    Raises:
        SchemaDefinitionError: If the schema does not fit the selected variant
    """
    if isinstance(schema, ValidationSchema):
        return schema

    if config.adapter == SchemaAdapter.PYDANTIC:
        from .adapters.pydantic_model import PydanticSchema
        built = PydanticSchema(schema)
    elif config.adapter == SchemaAdapter.JSONSCHEMA:
        from .adapters.json_schema import JsonSchemaAdapter
        built = JsonSchemaAdapter(schema)
    else:
        built = NativeSchema(schema)

    logger.debug(f"Built {type(built).__name__} with {len(built.fields)} fields")
    return built
