"""Lazily resolved, memoized entity relationships."""

import threading
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Generic, TypeVar


T = TypeVar("T")


class RelationState(Enum):
    UNRESOLVED = "unresolved"
    RESOLVING = "resolving"
    RESOLVED = "resolved"


class LazyRelation(Generic[T]):
    """
    A relationship computed on first access and cached once it succeeds.

    Concurrent first accesses may each call the resolver, but only the first
    result to finish is stored and every caller gets that stored value. A
    failed resolution leaves nothing cached, so the next access tries again.
    """

    def __init__(self, resolver: Callable[[], Awaitable[T]]) -> None:
        self._resolver = resolver
        self._lock = threading.Lock()
        self._resolved = False
        self._value: T | None = None
        self._in_flight = 0

    @property
    def state(self) -> RelationState:
        with self._lock:
            if self._resolved:
                return RelationState.RESOLVED
            if self._in_flight:
                return RelationState.RESOLVING
            return RelationState.UNRESOLVED

    async def get(self) -> T:
        if self._resolved:
            return self._value  # type: ignore[return-value]

        with self._lock:
            self._in_flight += 1
        try:
            value = await self._resolver()
        finally:
            with self._lock:
                self._in_flight -= 1

        with self._lock:
            if not self._resolved:
                self._value = value
                self._resolved = True
            return self._value  # type: ignore[return-value]
