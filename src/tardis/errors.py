"""
Errors — exceptions raised by tardis

Builder errors signal a malformed expression (programmer misuse); they are
raised immediately and are not meant to be caught and retried.
"""

from typing import Final

from tardis.core.domain.units import TimeUnit

UNIT_METHODS: Final[str] = ", ".join(unit.value + "(s)" for unit in TimeUnit)


class TardisError(Exception):
    """Base class of all tardis errors."""
    pass


class MissingBuilderState(TardisError):
    """
    A direction, chain or origin was used on a seed that never received a
    unit method.

    Attributes:
        operation: Name of the builder method that was called
    """

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation


class DirectionWithoutUnit(MissingBuilderState):
    """A direction (before/after/from_) was used before any unit."""

    def __init__(self, operation: str):
        super().__init__(
            operation,
            f"Use a unit method ({UNIT_METHODS}) before '{operation}'",
        )


class UnresolvableDefinition(MissingBuilderState):
    """A chain (and_) or an origin was used before any unit."""

    def __init__(self, operation: str):
        super().__init__(
            operation,
            f"No valid date definition has been built yet; "
            f"call a unit method before '{operation}'",
        )


class ContractViolation(TardisError):
    """A serialized document does not match its JSON Schema contract."""
    pass
