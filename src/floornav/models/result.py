"""Result values returned by mutators and validating services.

Business-rule failures travel back to the caller as a failed Result
carrying a message and a FailureType; the caller decides how to report it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class FailureType(str, Enum):
    """Failure classification, used by callers to pick a response."""

    INVALID_INPUT = "invalid_input"
    ENTITY_DOES_NOT_EXIST = "entity_does_not_exist"
    ENTITY_ALREADY_EXISTS = "entity_already_exists"
    DATABASE_ERROR = "database_error"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation: either a value or an error message."""

    is_success: bool
    _value: T | None = None
    error: str | None = None
    failure_type: FailureType | None = None

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def value(self) -> T | None:
        """The success value. Raises if the result is a failure."""
        if not self.is_success:
            raise ValueError(f"Can't get the value of a failed result: {self.error}")
        return self._value

    @classmethod
    def ok(cls, value: T | None = None) -> Result[T]:
        return cls(is_success=True, _value=value)

    @classmethod
    def fail(
        cls,
        error: str,
        failure_type: FailureType = FailureType.INVALID_INPUT,
    ) -> Result[T]:
        return cls(is_success=False, error=error, failure_type=failure_type)
