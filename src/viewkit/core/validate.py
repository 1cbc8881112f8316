"""Validator outcomes (Result pattern)."""

from typing import Any, TypeAlias

from returns.result import Result, Success, Failure

# What a component validator hands back: Success for valid props,
# Failure(reason) otherwise.
ValidationOutcome: TypeAlias = Result[Any, Any]


def valid(value: Any = None) -> ValidationOutcome:
    """Build a success outcome."""
    return Success(value)


def invalid(reason: Any) -> ValidationOutcome:
    """Build a failure outcome carrying a human-readable reason."""
    return Failure(reason)


def to_outcome(value: Any) -> ValidationOutcome:
    """
    Normalize a validator's return value into a Result.

    ``Result`` values pass through. Predicate-style validators are also
    accepted: the literal ``True`` is success, anything else is a failure
    whose reason is that value unchanged.

    Examples:
        >>> to_outcome(True)
        <Success: True>
        >>> to_outcome("name required")
        <Failure: name required>
    """
    if isinstance(value, Result):
        return value
    if value is True:
        return Success(True)
    return Failure(value)


def failure_reason(outcome: ValidationOutcome) -> Any | None:
    """Return the failure payload, or None for a success."""
    if isinstance(outcome, Failure):
        return outcome.failure()
    return None


__all__ = [
    "ValidationOutcome",
    "valid",
    "invalid",
    "to_outcome",
    "failure_reason",
]
