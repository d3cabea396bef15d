"""
Result type for expected outcomes.

Validation steps return a Result instead of raising, so that the caller
decides, visibly, what an expected failure means for the flow.

Example:
    def validate_count(count: int) -> Result[int, GenerationFailure]:
        if count < 1:
            return Failure(GenerationFailure(GenerationErrorKind.INVALID_COUNT, "..."))
        return Success(count)

    match validate_count(requested):
        case Success(value=count):
            ...
        case Failure(error=failure):
            raise error_for_failure(failure)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False


# Type alias for Result - a union of Success and Failure
Result = Success[T] | Failure[E]
