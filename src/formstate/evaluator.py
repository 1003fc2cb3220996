"""Field evaluation.

Runs the rules declared for one field against one data snapshot. The
evaluator has no side effects; committing its result is the facade's job.
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from .models import FieldResult
from .rules import Rule

if TYPE_CHECKING:
    from .schema import ValidationSchema

logger = logging.getLogger(__name__)


def evaluate_rules(rules: Iterable[Rule], data: Any) -> FieldResult:
    """Run every rule in declaration order and collect failing messages.

    Exceptions raised by a predicate are not caught.

    Args:
        rules: Bound rules for a single field
        data: Caller-owned data snapshot

    Returns:
        FieldResult with one message per failing rule
    """
    errors = [rule.resolve_error(data) for rule in rules if not rule.check(data)]
    return FieldResult.from_errors(errors)


def evaluate(schema: "ValidationSchema", field_name: str, data: Any) -> FieldResult:
    """Evaluate one field of a schema against a data snapshot.

    Fields the schema does not declare are reported valid.
    """
    if field_name not in schema:
        logger.debug(f"Field '{field_name}' not in schema, reporting valid")
        return FieldResult()
    return schema.evaluate_field(field_name, data)
