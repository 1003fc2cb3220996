"""Validation facade.

:class:`Validation` owns one validation state and exposes every operation a
form integration needs::

    v = Validation({
        "name": [{"error": "Name is required.", "validation": lambda d: d["name"].strip() != ""}],
    })
    v.validate("name", {"name": ""})   # False
    v.get_error("name")                # 'Name is required.'

The caller keeps the data; each call passes a full snapshot of it. Every
operation evaluates first and then replaces the stored state in a single
assignment, so an exception raised while evaluating leaves the state as it
was.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .config import SchemaConfig, resolve_config
from .dirty import CommitMode, next_dirty, should_commit
from .events import ChangeEvent
from .exceptions import UsageError
from .models import FieldState, ValidationState, state_from_dict
from .reducer import (
    calculate_is_valid,
    create_validation_state,
    gather_validation_errors,
    get_all_errors,
    get_error,
    is_property_valid,
    merge_field,
    update_property,
)
from .schema import ValidationSchema, build_schema

logger = logging.getLogger(__name__)


class Validation:
    """Validation state for one schema.

    Args:
        schema: Rule mapping for the native variant, or the foreign schema
            selected by ``config.adapter``
        config: SchemaConfig, a dictionary with the same keys, or None
    """

    def __init__(self, schema: Any, config: SchemaConfig | dict[str, Any] | None = None):
        self._config = resolve_config(config)
        self._schema: ValidationSchema = build_schema(schema, self._config)
        self._validation_state: ValidationState = create_validation_state(self._schema)

    @property
    def schema(self) -> ValidationSchema:
        return self._schema

    @property
    def config(self) -> SchemaConfig:
        return self._config

    @property
    def validation_state(self) -> ValidationState:
        """Current state. Replaced on every commit, never edited in place."""
        return self._validation_state

    @property
    def is_valid(self) -> bool:
        """True if every tracked field is valid."""
        return calculate_is_valid(self._validation_state)

    @property
    def validation_errors(self) -> list[str]:
        """First error of every invalid field, in schema order."""
        return gather_validation_errors(self._validation_state)

    def reset_validation_state(self) -> None:
        """Return every field to clean and valid."""
        logger.debug("Resetting validation state")
        self._validation_state = create_validation_state(self._schema)

    def set_validation_state(self, new_state: Mapping[str, FieldState | Mapping[str, Any]]) -> None:
        """Replace the whole state, e.g. with results computed by a server.

        Values may be FieldState objects or wire-shaped mappings
        (``{"dirty", "isValid", "errors"}``). Keys are not checked against
        the schema.
        """
        state = state_from_dict(new_state)
        logger.debug(f"Replacing validation state with {len(state)} fields")
        self._validation_state = state

    def _commit(self, state: ValidationState) -> None:
        self._validation_state = state

    def _validate_field(self, mode: CommitMode, field_name: str, data: Any) -> bool:
        if field_name not in self._schema:
            return True

        state = self._validation_state
        commit = should_commit(mode, state, field_name)
        field_state = update_property(
            self._schema, field_name, data, dirty=next_dirty(mode, state, field_name)
        )

        if commit:
            self._commit(merge_field(state, field_name, field_state))
            logger.debug(f"Committed '{field_name}' (valid={field_state.is_valid})")
        else:
            logger.debug(f"Skipped commit for clean field '{field_name}'")
        return field_state.is_valid

    def _validate_fields(self, mode: CommitMode, data: Any, fields: Iterable[str] | None) -> bool:
        if isinstance(fields, (str, bytes)):
            raise UsageError(f"fields must be a list of field names, got {fields!r}")
        names = self._schema.fields if fields is None else tuple(fields)
        original = self._validation_state
        state = original
        merged = 0

        for name in names:
            if name not in self._schema:
                continue
            commit = should_commit(mode, state, name)
            field_state = update_property(self._schema, name, data, dirty=next_dirty(mode, state, name))
            # clean fields are evaluated but not stored
            if commit:
                state = merge_field(state, name, field_state)
                merged += 1

        if mode == CommitMode.ALWAYS or state is not original:
            self._commit(state)
            logger.debug(f"Committed {merged} of {len(names)} fields ({mode.value})")
        return calculate_is_valid(state)

    def validate(self, field_name: str, data: Any) -> bool:
        """Validate one field, mark it dirty and store the result.

        Args:
            field_name: Field to validate; unknown fields are valid
            data: Full data snapshot

        Returns:
            True if the field is valid
        """
        return self._validate_field(CommitMode.ALWAYS, field_name, data)

    def validate_if_dirty(self, field_name: str, data: Any) -> bool:
        """Validate one field, storing the result only if it is already dirty.

        Returns:
            The computed validity, whether or not it was stored
        """
        return self._validate_field(CommitMode.IF_DIRTY, field_name, data)

    def validate_all(self, data: Any, fields: Iterable[str] | None = None) -> bool:
        """Validate many fields, mark them dirty and store the results.

        Args:
            data: Full data snapshot
            fields: Subset of field names, defaults to every schema field;
                unknown names are ignored

        Returns:
            Aggregate validity of the resulting state
        """
        return self._validate_fields(CommitMode.ALWAYS, data, fields)

    def validate_all_if_dirty(self, data: Any, fields: Iterable[str] | None = None) -> bool:
        """Validate many fields, storing results only for dirty fields.

        Returns:
            Aggregate validity of the resulting state
        """
        return self._validate_fields(CommitMode.IF_DIRTY, data, fields)

    def get_error(self, field_name: str) -> str:
        return get_error(self._validation_state, field_name)

    def get_all_errors(self, field_name: str) -> list[str]:
        return get_all_errors(self._validation_state, field_name)

    def get_field_valid(self, field_name: str) -> bool:
        return is_property_valid(self._validation_state, field_name)

    def _event(self, event: Any) -> ChangeEvent:
        return ChangeEvent.from_event(event, checkbox_type=self._config.checkbox_type)

    def validate_on_blur(self, data: Mapping[str, Any]) -> Callable[[Any], None]:
        """Build a blur handler that validates the event's field.

        Args:
            data: Data snapshot the event's value is merged into

        Returns:
            Handler taking a change event
        """
        def handle_blur(event: Any) -> None:
            change = self._event(event)
            self.validate(change.target_name, change.apply_to(data))

        return handle_blur

    def validate_on_change(self, on_change: Callable[[Any], Any], data: Mapping[str, Any]) -> Callable[[Any], Any]:
        """Build a change handler that re-validates dirty fields.

        The downstream ``on_change`` callback is always called with the
        original event and its return value is passed through, whatever the
        validation outcome.

        Args:
            on_change: Downstream change callback
            data: Data snapshot the event's value is merged into

        Returns:
            Handler taking a change event
        """
        def handle_change(event: Any) -> Any:
            change = self._event(event)
            self.validate_if_dirty(change.target_name, change.apply_to(data))
            return on_change(event)

        return handle_change
