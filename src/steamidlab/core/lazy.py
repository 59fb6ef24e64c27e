"""
Compute-once cells for per-member derived values.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class LazyValue(Generic[T]):
    """
    A value computed on first access and shared by every later caller.

    The factory runs at most once, even when several threads ask for the value
    at the same moment. Once published, reads take no lock.

    Attributes:
        computed: Whether the value has been published
    """

    __slots__ = ("_factory", "_value", "_lock")

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._value: object = _UNSET
        self._lock = threading.Lock()

    @property
    def computed(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        """Return the value, computing it under the lock if nobody has yet."""
        value = self._value
        if value is not _UNSET:
            return value  # type: ignore[return-value]

        with self._lock:
            # Another thread may have published while we waited
            if self._value is _UNSET:
                self._value = self._factory()
            return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self.computed:
            return f"LazyValue({self._value!r})"
        return "LazyValue(<uncomputed>)"
