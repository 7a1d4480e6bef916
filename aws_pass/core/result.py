"""Result types for railway-oriented programming.

Every operation that can fail (backend calls, credential refresh, local store
files) returns a Result instead of raising. Failures travel as data up to the
CLI, which is the single place that turns them into an exit status.

Usage:
    def read_serial(path: Path) -> Result[str, DomainError]:
        if not path.exists():
            return Failure(error=ConfigurationError(...))
        return Success(value=path.read_text().strip())

    match read_serial(path):
        case Success(value=serial):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
