"""Adapter that validates fields with a pydantic model."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from ..exceptions import SchemaDefinitionError
from ..models import FieldResult
from ..schema import ValidationSchema

logger = logging.getLogger(__name__)


class PydanticSchema(ValidationSchema):
    """Schema backed by a pydantic model class.

    Fields are the model's declared fields. A field is evaluated by
    validating the whole snapshot, which makes pydantic collect every error
    instead of stopping at the first, and keeping the errors located at that
    field. Errors without a location, raised by model validators or by a
    snapshot that is not a mapping at all, are kept for every field. Only
    ``pydantic.ValidationError`` is treated as a validation failure;
    anything else raised by a validator propagates.
    """

    def __init__(self, model: type[BaseModel]):
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            raise SchemaDefinitionError(
                f"Pydantic adapter requires a BaseModel subclass, got {model!r}"
            )
        self.model = model
        self._fields = tuple(model.model_fields)
        self._locations: dict[str, set[str]] = {}
        for name, info in model.model_fields.items():
            locations = {name}
            if info.alias:
                locations.add(info.alias)
            if isinstance(info.validation_alias, str):
                locations.add(info.validation_alias)
            self._locations[name] = locations

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    def evaluate_field(self, name: str, data: Any) -> FieldResult:
        if isinstance(data, Mapping):
            data = dict(data)
        try:
            self.model.model_validate(data)
        except ValidationError as e:
            locations = self._locations.get(name, {name})
            errors = [
                error["msg"]
                for error in e.errors()
                # model-level errors have no location and belong to every field
                if not error["loc"] or error["loc"][0] in locations
            ]
            logger.debug(f"{self.model.__name__}.{name}: {len(errors)} errors")
            return FieldResult.from_errors(errors)
        return FieldResult()
