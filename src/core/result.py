"""Result types for railway-oriented programming.

Catalog operations can fail for reasons outside this client's control (the
metadata service is down, a table key is unknown, the preview backend rejects a
query). Those failures are returned as values instead of raised, so callers
must handle them explicitly.

Usage:
    result = await handler.handle(GetTableOwners(table_key=key))
    match result:
        case Success(value=owners):
            render(owners)
        case Failure(error=error):
            show_error(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

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


Result: TypeAlias = Success[T] | Failure[E]
