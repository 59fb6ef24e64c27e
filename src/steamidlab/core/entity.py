"""
Base class and build step shared by every constant enumeration.

Members carry an integer identifier, optionally further attributes, and a
lazily formatted display string. The ``indexed`` decorator builds the
reverse-lookup registry once the enumeration class exists.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from operator import attrgetter
from typing import Any, Optional, TypeVar

from .errors import DefinitionError, UnknownAliasError
from .fallback import if_none, if_not_none
from .lazy import LazyValue
from .registry import EnumRegistry

log = logging.getLogger(__name__)

S = TypeVar("S", bound="SteamEnum")

# Lookups through these indexes only accept keys of exactly this type
KEY_TYPES: dict[str, type] = {"id": int, "char": str}


class SteamEnum(Enum):
    """
    Closed set of constants with reverse lookups and fallback accessors.

    Subclasses declare members as ``NAME = <id>`` (or a tuple of attributes)
    and implement ``__init__`` to store them. The enum value of each member is
    its zero-based declaration index, so two members never alias each other;
    duplicate identifiers are reported by the registry instead.

    Every accessor comes in four shapes:

    - ``*_or_else(key, default)``: resolve or return ``default``
    - ``*_or_else_get(key, supplier)``: resolve or return ``supplier()``
    - ``*_or_base(key)``: resolve or return the base value
    - ``*_or_null(key)``: resolve or return None

    None of them raise for a missing or unmapped key. Every concrete subclass
    must be decorated with ``indexed``; lookups on one that is not raise
    ``DefinitionError``.
    """

    def __new__(cls, *args: Any):
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__)
        obj._display = LazyValue(obj._format_display)
        return obj

    def __init__(self, id: int, *args: Any):
        self._id = id

    @property
    def id(self) -> int:
        return self._id

    @property
    def index(self) -> int:
        """Zero-based declaration position."""
        return self._value_

    def _display_fields(self) -> list[tuple[str, Any]]:
        return [("id", self._id)]

    def _format_display(self) -> str:
        fields = ", ".join(f"{label}={value}" for label, value in self._display_fields())
        return f"{type(self).__name__}::{self.name}[{fields}]"

    def __str__(self) -> str:
        return self._display.get()

    @classmethod
    def values(cls: type[S]) -> tuple[S, ...]:
        """All members in declaration order."""
        return cls.registry().members

    @classmethod
    def registry(cls: type[S]) -> EnumRegistry[S]:
        registry = getattr(cls, "_index_registry", None)
        if registry is None:
            raise DefinitionError(cls.__name__, "not built, decorate it with @indexed")
        return registry

    @classmethod
    def _base(cls: type[S]) -> S:
        cls.registry()
        return cls.BASE

    # --- attribute-from-member -------------------------------------------

    @classmethod
    def _own(cls: type[S], member: Any) -> Optional[S]:
        # Members of another enumeration count as absent
        return member if isinstance(member, cls) else None

    @classmethod
    def get_id_or_else(cls, member: Any, default: Optional[int]) -> Optional[int]:
        """Identifier of ``member``, or ``default`` when it is None."""
        return if_not_none(cls._own(member), attrgetter("id"), default)

    @classmethod
    def get_id_or_else_get(
        cls, member: Any, supplier: Callable[[], Optional[int]]
    ) -> Optional[int]:
        return if_none(cls.get_id_or_null(member), supplier)

    @classmethod
    def get_id_or_null(cls, member: Any) -> Optional[int]:
        return cls.get_id_or_else(member, None)

    # --- member-from-key -------------------------------------------------

    @classmethod
    def from_id_or_else(cls: type[S], id: Any, default: Optional[S]) -> Optional[S]:
        """Member whose identifier is ``id``, or ``default``."""
        return cls.registry().lookup("id", id, default)

    @classmethod
    def from_id_or_else_get(
        cls: type[S], id: Any, supplier: Callable[[], Optional[S]]
    ) -> Optional[S]:
        return if_none(cls.from_id_or_null(id), supplier)

    @classmethod
    def from_id_or_base(cls: type[S], id: Any) -> S:
        return cls.from_id_or_else(id, cls._base())

    @classmethod
    def from_id_or_null(cls: type[S], id: Any) -> Optional[S]:
        return cls.from_id_or_else(id, None)

    @classmethod
    def from_index_or_else(cls: type[S], index: Any, default: Optional[S]) -> Optional[S]:
        """
        Member at declaration position ``index``, or ``default``.

        Only ``0 <= index < len(cls)`` resolves; negative positions miss.
        """
        return cls.registry().at(index, default)

    @classmethod
    def from_index_or_else_get(
        cls: type[S], index: Any, supplier: Callable[[], Optional[S]]
    ) -> Optional[S]:
        return if_none(cls.from_index_or_null(index), supplier)

    @classmethod
    def from_index_or_base(cls: type[S], index: Any) -> S:
        return cls.from_index_or_else(index, cls._base())

    @classmethod
    def from_index_or_null(cls: type[S], index: Any) -> Optional[S]:
        return cls.from_index_or_else(index, None)


def indexed(
    *,
    base: str,
    minimum: Optional[str] = None,
    maximum: Optional[str] = None,
    keys: tuple[str, ...] = ("id",),
) -> Callable[[type[S]], type[S]]:
    """
    Class decorator that finishes building a ``SteamEnum`` subclass.

    Builds the registry over ``keys`` (member attribute names) and binds the
    ``BASE``, ``MIN`` and ``MAX`` class attributes to the named members. The
    aliases are plain references and do not show up when iterating the enum.

    Args:
        base: Name of the member returned by the ``*_or_base`` lookups
        minimum: Name of the member bound to ``MIN``
        maximum: Name of the member bound to ``MAX``
        keys: Member attributes to index; lookups by a key listed in
            ``KEY_TYPES`` miss on keys of another type, and ``bool`` is not an ``int``

    Raises:
        DuplicateKeyError: If two members share a key value
        UnknownAliasError: If an alias names a member that does not exist
    """

    def decorate(cls: type[S]) -> type[S]:
        owner = cls.__name__
        cls._index_registry = EnumRegistry(
            owner,
            list(cls),
            {key: attrgetter(key) for key in keys},
            {key: KEY_TYPES[key] for key in keys if key in KEY_TYPES},
        )

        for alias, target in (("BASE", base), ("MIN", minimum), ("MAX", maximum)):
            if target is None:
                continue
            member = cls.__members__.get(target)
            if member is None:
                raise UnknownAliasError(owner, alias, target)
            setattr(cls, alias, member)
            log.debug("Bound %s.%s to %s", owner, alias, target)

        return cls

    return decorate
