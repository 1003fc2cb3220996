"""Dirty tracking.

Each field is either clean or dirty. ``validate`` and ``validate_all``
commit unconditionally and leave every field they touch dirty. The
"if dirty" operations still compute a result, but only commit it for fields
that were already dirty before the call. Only a full reset makes a field
clean again.
"""

from collections.abc import Mapping
from enum import Enum

from .models import FieldState


class CommitMode(str, Enum):
    """How a validate-family operation commits its results."""
    ALWAYS = "always"
    IF_DIRTY = "if_dirty"


def is_dirty(state: Mapping[str, FieldState], field_name: str) -> bool:
    field_state = state.get(field_name)
    return field_state is not None and field_state.dirty


def should_commit(mode: CommitMode, state: Mapping[str, FieldState], field_name: str) -> bool:
    """Decide whether a freshly computed field result may be written.

    Args:
        mode: Commit mode of the calling operation
        state: Stored state before the write
        field_name: Field the result belongs to

    Returns:
        True if the result should replace the stored field state
    """
    if mode == CommitMode.ALWAYS:
        return True
    return is_dirty(state, field_name)



def next_dirty(mode: CommitMode, state: Mapping[str, FieldState], field_name: str) -> bool:
    """Dirty flag a freshly computed field result carries.

    ``ALWAYS`` operations move the field to dirty. ``IF_DIRTY`` operations
    keep the stored flag, so a clean field stays clean.
    """
    if mode == CommitMode.ALWAYS:
        return True
    return is_dirty(state, field_name)
