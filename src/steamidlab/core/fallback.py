"""
Total lookup helpers shared by every enumeration.

Each helper resolves a value or hands back the caller's default; none of them
raises for a missing, unmapped or malformed key.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K")


def if_not_none(obj: Optional[T], getter: Callable[[T], R], default: R) -> R:
    """Apply ``getter`` to ``obj``, or return ``default`` when ``obj`` is None."""
    if obj is None:
        return default
    return getter(obj)


def if_none(value: Optional[R], supplier: Callable[[], R]) -> R:
    """
    Return ``value``, or the supplier's result when ``value`` is None.

    The supplier is only called on the None path, and only once.
    """
    if value is None:
        return supplier()
    return value


def map_get_or_else(
    key: Any, mapping: Mapping[K, R], default: R, key_type: Optional[type] = None
) -> R:
    """
    Look ``key`` up in ``mapping``.

    Returns ``default`` when the key is None, unmapped or unhashable. When
    ``key_type`` is given, keys of any other type miss too, so ``True`` or
    ``1.0`` never stand in for the integer ``1``.
    """
    if key is None:
        return default
    if key_type is not None and not _is_instance_of(key, key_type):
        return default
    try:
        return mapping.get(key, default)
    except TypeError:
        # unhashable key
        return default


def _is_instance_of(key: Any, key_type: type) -> bool:
    if isinstance(key, bool) and not issubclass(key_type, bool):
        return False
    return isinstance(key, key_type)


def seq_get_or_else(index: Any, items: Sequence[R], default: R) -> R:
    """
    Positional access into ``items``, bounds-checked against ``[0, len)``.

    Negative indices are treated as out of range, not as offsets from the end.
    Anything that is not a plain ``int`` (including ``bool``) misses.
    """
    if index is None or isinstance(index, bool) or not isinstance(index, int):
        return default
    if 0 <= index < len(items):
        return items[index]
    return default
