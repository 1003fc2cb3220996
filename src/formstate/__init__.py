"""formstate - schema-driven validation state for form-like input.

formstate keeps per-field validity, error messages and a dirty flag for data
the caller owns, and updates them as the caller supplies new snapshots.

Basic usage:
    from formstate import Validation, required, min_value

    v = Validation({"name": [required()], "age": [min_value(18)]})
    v.validate_all({"name": "", "age": 15})   # False
    v.validation_errors                        # ['Name is required.', 'Age must be greater than 18.']
"""

__version__ = "0.1.0"
__author__ = "formstate contributors"
__description__ = "Schema-driven validation state for form-like input"

from formstate.autorules import is_, longer_than, matches, max_value, min_value, required, shorter_than
from formstate.config import SchemaAdapter, SchemaConfig
from formstate.dirty import CommitMode
from formstate.events import ChangeEvent
from formstate.exceptions import (
    FormStateError,
    MalformedEventError,
    RuleTypeError,
    SchemaDefinitionError,
    UsageError,
)
from formstate.models import FieldResult, FieldState, ValidationState, state_from_dict, state_to_dict
from formstate.rules import AutoRule, Rule
from formstate.schema import NativeSchema, ValidationSchema
from formstate.utils import string_is_less_than, string_is_more_than, string_is_not_empty
from formstate.validation import Validation

__all__ = [
    "__version__",
    "__author__",
    "__description__",

    # Facade
    "Validation",

    # Schema and rules
    "ValidationSchema",
    "NativeSchema",
    "Rule",
    "AutoRule",
    "required",
    "matches",
    "longer_than",
    "shorter_than",
    "min_value",
    "max_value",
    "is_",

    # State
    "FieldResult",
    "FieldState",
    "ValidationState",
    "state_to_dict",
    "state_from_dict",
    "CommitMode",
    "ChangeEvent",

    # Configuration
    "SchemaAdapter",
    "SchemaConfig",

    # Errors
    "FormStateError",
    "UsageError",
    "MalformedEventError",
    "RuleTypeError",
    "SchemaDefinitionError",

    # Helpers
    "string_is_not_empty",
    "string_is_more_than",
    "string_is_less_than",
]
