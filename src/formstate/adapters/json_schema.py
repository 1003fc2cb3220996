"""Adapter that validates fields with a JSON Schema document."""

import logging
from collections.abc import Mapping
from typing import Any

from jsonschema.validators import validator_for

from ..exceptions import SchemaDefinitionError
from ..models import FieldResult
from ..schema import ValidationSchema

logger = logging.getLogger(__name__)


class JsonSchemaAdapter(ValidationSchema):
    """Schema backed by an object-typed JSON Schema document.

    Fields are the keys of the document's ``properties``. The document is
    checked against its metaschema on construction, so a malformed document
    raises ``jsonschema.exceptions.SchemaError`` there and not during
    evaluation.

    An error is kept for a field when its instance path starts at that
    field. ``required`` errors are kept for the field they name. Any other
    error on the root object, such as a wrong root type,
    ``additionalProperties`` or ``dependentRequired``, is kept for every
    field.
    """

    def __init__(self, schema: Mapping[str, Any]):
        if not isinstance(schema, Mapping):
            raise SchemaDefinitionError(
                f"JSON Schema adapter requires a schema document, got {type(schema).__name__}"
            )
        schema = dict(schema)
        validator_cls = validator_for(schema)
        validator_cls.check_schema(schema)
        self.schema = schema
        self.validator = validator_cls(schema, format_checker=validator_cls.FORMAT_CHECKER)
        self._fields = tuple(schema.get("properties", {}))

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    def evaluate_field(self, name: str, data: Any) -> FieldResult:
        instance = dict(data) if isinstance(data, Mapping) else data
        errors = []
        for error in self.validator.iter_errors(instance):
            if error.absolute_path:
                if error.absolute_path[0] == name:
                    errors.append(error.message)
            elif error.validator == "required":
                # required errors sit on the parent object
                if error.message.startswith(f"{name!r} "):
                    errors.append(error.message)
            else:
                errors.append(error.message)
        logger.debug(f"JSON Schema field '{name}': {len(errors)} errors")
        return FieldResult.from_errors(errors)
