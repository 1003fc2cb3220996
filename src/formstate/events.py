"""Change-event contract for the blur/change handler helpers.

UI integrations hand the handlers whatever their toolkit produces. The only
thing the engine reads from it is the target's name and value, captured in
:class:`ChangeEvent`. Events may be mappings (``{"target": {...}}``) or
objects with a ``target`` attribute.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import MalformedEventError

_MISSING = object()


def _read(source: Any, key: str, default: Any = None) -> Any:
    if isinstance(source, Mapping):
        return source.get(key, default)
    return getattr(source, key, default)


@dataclass(frozen=True)
class ChangeEvent:
    """Name and value of the field that changed."""
    target_name: str
    target_value: Any

    @classmethod
    def from_event(cls, event: Any, checkbox_type: str = "checkbox") -> "ChangeEvent":
        """Adapt a raw UI event.

        The target's ``checked`` flag is used when its ``type`` equals
        ``checkbox_type``, otherwise its ``value``.

        Args:
            event: ChangeEvent, mapping or object carrying a ``target``
            checkbox_type: Target type whose ``checked`` flag holds the value

        Returns:
            ChangeEvent

        Raises:
            MalformedEventError: If the event has no target or the target no name
        """
        if isinstance(event, ChangeEvent):
            return event

        target = _read(event, "target", _MISSING)
        if target is _MISSING or target is None:
            raise MalformedEventError("Change event has no target", event=event)

        name = _read(target, "name")
        if name is None:
            raise MalformedEventError("Change event target has no name", event=event)

        if _read(target, "type") == checkbox_type:
            return cls(target_name=name, target_value=_read(target, "checked"))
        return cls(target_name=name, target_value=_read(target, "value"))

    def apply_to(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Copy of ``data`` with the changed field set to the event's value."""
        return {**data, self.target_name: self.target_value}
