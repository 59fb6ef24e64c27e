"""
Registry of reverse-lookup indexes for constant enumerations.

Built once when an enumeration is defined; read-only afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Generic, Optional, TypeVar

from .errors import DuplicateKeyError
from .fallback import map_get_or_else, seq_get_or_else

log = logging.getLogger(__name__)

E = TypeVar("E")


class EnumRegistry(Generic[E]):
    """
    Reverse-lookup indexes over the members of one enumeration.

    The EnumRegistry class maps every lookup key an enumeration defines back to
    the member that owns it, and gives O(1) positional access in declaration
    order. It is built once, from the members in declaration order, and never
    changes afterwards.

    **Example Usage:**
        ```python
        from operator import attrgetter
        from steamidlab.core.registry import EnumRegistry
        from steamidlab.types import AccountType

        registry = EnumRegistry(
            "AccountType",
            list(AccountType),
            {"id": attrgetter("id"), "char": attrgetter("char")},
            {"id": int, "char": str},
        )

        registry.lookup("char", "U")     # AccountType.INDIVIDUAL
        registry.lookup("id", 99, None)  # None
        registry.lookup("id", True)      # None, ids are plain ints
        registry.at(0)                   # AccountType.INVALID
        ```

    **Key Features:**
    - Fails loudly on construction when two members share a key
    - Members whose key is None are left out of that key's index
    - Misses resolve to a default, never to an exception
    """

    def __init__(
        self,
        owner: str,
        members: Iterable[E],
        keys: Mapping[str, Callable[[E], Any]],
        key_types: Optional[Mapping[str, type]] = None,
    ):
        """
        Build the indexes.

        Args:
            owner: Name of the enumeration, used in error messages
            members: Members in declaration order
            keys: Mapping of key name to a function extracting that key
            key_types: Optional mapping of key name to the only type accepted
                by lookups through that index

        Raises:
            DuplicateKeyError: If two members share a key value
        """
        self._owner = owner
        self._members: tuple[E, ...] = tuple(members)
        self._indexes: dict[str, Mapping[Any, E]] = {}
        self._key_types: dict[str, type] = dict(key_types or {})

        for key_name, extract in keys.items():
            self._indexes[key_name] = MappingProxyType(
                self._build_index(key_name, extract)
            )
            log.debug(
                "Indexed %d %s members by %s",
                len(self._indexes[key_name]),
                owner,
                key_name,
            )

    def _build_index(self, key_name: str, extract: Callable[[E], Any]) -> dict[Any, E]:
        index: dict[Any, E] = {}
        for member in self._members:
            key = extract(member)
            if key is None:
                continue
            if key in index:
                raise DuplicateKeyError(
                    self._owner,
                    key_name,
                    key,
                    _member_name(index[key]),
                    _member_name(member),
                )
            index[key] = member
        return index

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def members(self) -> tuple[E, ...]:
        """Members in declaration order."""
        return self._members

    def key_names(self) -> list[str]:
        """Names of the indexed key kinds."""
        return list(self._indexes)

    def index(self, key_name: str) -> Mapping[Any, E]:
        """Read-only view of one index."""
        return self._indexes[key_name]

    def lookup(self, key_name: str, key: Any, default: Optional[E] = None) -> Optional[E]:
        """Resolve ``key`` through the ``key_name`` index, or return ``default``."""
        return map_get_or_else(
            key, self._indexes[key_name], default, self._key_types.get(key_name)
        )

    def at(self, position: Any, default: Optional[E] = None) -> Optional[E]:
        """Member at declaration ``position``, or ``default`` when out of range."""
        return seq_get_or_else(position, self._members, default)

    def __iter__(self) -> Iterator[E]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __str__(self) -> str:
        return f"EnumRegistry({self._owner}, members={len(self._members)})"

    def __repr__(self) -> str:
        return f"EnumRegistry({self._owner!r}, keys={self.key_names()})"


def _member_name(member: Any) -> str:
    return getattr(member, "name", repr(member))
