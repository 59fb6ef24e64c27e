"""
Core module for steamidlab.

This module contains the shared machinery behind every constant enumeration:
the reverse-lookup registry, the fallback accessors and the lazy display cache.
"""

from .entity import SteamEnum, indexed
from .errors import DefinitionError, DuplicateKeyError, UnknownAliasError
from .fallback import if_none, if_not_none, map_get_or_else, seq_get_or_else
from .lazy import LazyValue
from .registry import EnumRegistry

__all__ = [
    # Errors
    "DefinitionError",
    "DuplicateKeyError",
    "UnknownAliasError",
    # Enumerations
    "SteamEnum",
    "indexed",
    "EnumRegistry",
    # Fallback helpers
    "if_none",
    "if_not_none",
    "map_get_or_else",
    "seq_get_or_else",
    # Lazy values
    "LazyValue",
]
