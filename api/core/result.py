"""
Two-variant outcome for data-access calls.

Repositories return `Ok(value)` or `Err(error)` instead of raising store
errors; routers decide the HTTP response.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

import asyncpg

T = TypeVar("T")

# Failures a single query can raise: server-side errors, client/driver misuse,
# and a dropped or refused connection.
STORE_ERRORS: tuple[type[BaseException], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: BaseException
    message: str = ""

    def __str__(self) -> str:
        return self.message or str(self.error)


Result = Union[Ok[T], Err]
