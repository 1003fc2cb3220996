"""Rule types for native schemas.

A rule pairs a predicate over the whole data snapshot with an error
descriptor. The descriptor is either a literal message or a callable that
builds the message from the same snapshot.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import SchemaDefinitionError

ErrorSpec = str | Callable[[Any], str]
Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class Rule:
    """A single field-level predicate and its error descriptor."""
    error: ErrorSpec
    validation: Predicate

    def check(self, data: Any) -> bool:
        """Run the predicate against a data snapshot."""
        return bool(self.validation(data))

    def resolve_error(self, data: Any) -> str:
        """Build the error message for a failing snapshot."""
        if callable(self.error):
            return self.error(data)
        return self.error


@dataclass(frozen=True)
class AutoRule:
    """Rule factory that needs the name of the field it is attached to.

    Native schemas bind auto rules once, when the schema is constructed,
    so evaluation only ever sees plain :class:`Rule` objects.
    """
    name: str
    factory: Callable[[str], Rule]

    def bind(self, field_name: str) -> Rule:
        return self.factory(field_name)


def coerce_rule(entry: Any, field_name: str) -> Rule:
    """Turn one schema entry into a bound :class:`Rule`.

    Args:
        entry: A Rule, an AutoRule, or a mapping with ``error`` and
            ``validation`` keys
        field_name: Field the entry is declared under

    Returns:
        Bound rule

    Raises:
        SchemaDefinitionError: If the entry has none of the supported shapes
    """
    if isinstance(entry, Rule):
        return entry
    if isinstance(entry, AutoRule):
        return entry.bind(field_name)
    if isinstance(entry, Mapping):
        if "validation" not in entry or "error" not in entry:
            raise SchemaDefinitionError(
                f"Rule for '{field_name}' must define 'error' and 'validation'",
                field_name=field_name,
            )
        if not callable(entry["validation"]):
            raise SchemaDefinitionError(
                f"Rule 'validation' for '{field_name}' must be callable",
                field_name=field_name,
            )
        return Rule(error=entry["error"], validation=entry["validation"])
    raise SchemaDefinitionError(
        f"Unsupported rule for '{field_name}': {entry!r}",
        field_name=field_name,
    )
