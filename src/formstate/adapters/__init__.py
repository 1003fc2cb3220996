"""Schema adapters over foreign declarative validators.

Each adapter enumerates fields through the foreign schema and turns the
foreign library's validation-failure signal into per-field error lists.
"""

from .json_schema import JsonSchemaAdapter
from .pydantic_model import PydanticSchema

__all__ = [
    "JsonSchemaAdapter",
    "PydanticSchema",
]
