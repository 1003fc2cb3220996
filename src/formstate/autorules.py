"""Field-bound rule factories.

Each factory returns an :class:`~formstate.rules.AutoRule`. When a native
schema is built the auto rule is bound to its field name, which provides
both the value to check and a readable default error message::

    schema = {
        "first_name": [required(), longer_than(2)],
        "age": [min_value(18, "You must be an adult.")],
    }

Length and number rules raise :class:`~formstate.exceptions.RuleTypeError`
when they meet a value they cannot interpret, since that points at a schema
mistake rather than bad user input.
"""

import re
from collections.abc import Callable, Mapping
from numbers import Number
from typing import Any

from .exceptions import RuleTypeError
from .rules import AutoRule, Rule
from .utils import start_case


def read_field(data: Any, field_name: str) -> Any:
    """Read a field from a mapping or an object; missing fields read as None."""
    if isinstance(data, Mapping):
        return data.get(field_name)
    return getattr(data, field_name, None)


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


def _as_number(value: Any, rule: str) -> float:
    if _is_number(value):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            pass
    raise RuleTypeError(rule, "requires a number representation", value)


def _sized(value: Any, rule: str) -> int:
    if isinstance(value, str):
        return len(value.strip())
    if isinstance(value, (list, tuple)):
        return len(value)
    raise RuleTypeError(rule, "must be used on a string", value)


def required(error: str | None = None) -> AutoRule:
    """Fail when the value is missing, None or a blank string."""
    def factory(field_name: str) -> Rule:
        def validation(data: Any) -> bool:
            value = read_field(data, field_name)
            if value is None:
                return False
            if isinstance(value, str):
                return bool(value.strip())
            return True

        return Rule(error=error or f"{start_case(field_name)} is required.", validation=validation)

    return AutoRule("required", factory)


def matches(pattern: str | re.Pattern, error: str | None = None) -> AutoRule:
    """Fail when a string value does not match ``pattern`` anywhere."""
    regex = re.compile(pattern)

    def factory(field_name: str) -> Rule:
        def validation(data: Any) -> bool:
            value = read_field(data, field_name)
            if not isinstance(value, str):
                raise RuleTypeError("matches", "must be used on a string", value)
            return regex.search(value) is not None

        return Rule(error=error or f"{start_case(field_name)} is invalid.", validation=validation)

    return AutoRule("matches", factory)


def longer_than(length: int, error: str | None = None) -> AutoRule:
    """Fail unless the trimmed string (or sequence) is longer than ``length``."""
    def factory(field_name: str) -> Rule:
        def validation(data: Any) -> bool:
            return _sized(read_field(data, field_name), "longerThan") > length

        return Rule(
            error=error or f"{start_case(field_name)} must be more than {length} characters.",
            validation=validation,
        )

    return AutoRule("longerThan", factory)


def shorter_than(length: int, error: str | None = None) -> AutoRule:
    """Fail unless the trimmed string (or sequence) is shorter than ``length``."""
    def factory(field_name: str) -> Rule:
        def validation(data: Any) -> bool:
            return _sized(read_field(data, field_name), "shorterThan") < length

        return Rule(
            error=error or f"{start_case(field_name)} must be fewer than {length} characters.",
            validation=validation,
        )

    return AutoRule("shorterThan", factory)


def min_value(minimum: float, error: str | None = None) -> AutoRule:
    """Fail when the value, or the number a string represents, is below ``minimum``.

    A blank string fails the check. Any other value that is not a number or
    a numeric string raises RuleTypeError.
    """
    def factory(field_name: str) -> Rule:
        def validation(data: Any) -> bool:
            value = read_field(data, field_name)
            if _is_blank(value):
                return False
            return _as_number(value, "min") >= minimum

        return Rule(
            error=error or f"{start_case(field_name)} must be greater than {minimum}.",
            validation=validation,
        )

    return AutoRule("min", factory)


def max_value(maximum: float, error: str | None = None) -> AutoRule:
    """Fail when the value, or the number a string represents, is above ``maximum``.

    Blank strings fail, as for :func:`min_value`.
    """
    def factory(field_name: str) -> Rule:
        def validation(data: Any) -> bool:
            value = read_field(data, field_name)
            if _is_blank(value):
                return False
            return _as_number(value, "max") <= maximum

        return Rule(
            error=error or f"{start_case(field_name)} must be less than {maximum}.",
            validation=validation,
        )

    return AutoRule("max", factory)


def is_(expected: Any | Callable[[Any], bool], error: str | None = None) -> AutoRule:
    """Fail unless the value equals ``expected``, or ``expected(value)`` is truthy."""
    def factory(field_name: str) -> Rule:
        def validation(data: Any) -> bool:
            value = read_field(data, field_name)
            if callable(expected):
                return bool(expected(value))
            return value == expected

        return Rule(error=error or f"{start_case(field_name)} must be {expected}.", validation=validation)

    return AutoRule("is", factory)
