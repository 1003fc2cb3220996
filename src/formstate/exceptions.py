"""Exception hierarchy for formstate.

Failing validation is never an exception: it is recorded as data on the
validation state. The classes below signal programming mistakes in a schema
or in the caller's integration code and always propagate to the caller.
"""


class FormStateError(Exception):
    """Base class for all formstate errors."""


class UsageError(FormStateError):
    """Raised when the engine is used in a way it cannot support."""


class MalformedEventError(UsageError):
    """Raised when a change event does not carry a usable target."""

    def __init__(self, message: str, event: object = None):
        self.event = event
        super().__init__(message)


class RuleTypeError(UsageError, TypeError):
    """Raised when an auto rule is applied to a value of the wrong type."""

    def __init__(self, rule: str, requirement: str, received: object):
        self.rule = rule
        self.received = received
        super().__init__(f"{rule} {requirement} but received {received}")


class SchemaDefinitionError(UsageError):
    """Raised when a schema value does not fit the selected schema variant."""

    def __init__(self, message: str, field_name: str = ""):
        self.field_name = field_name
        super().__init__(message)
