"""
Error classes for steamidlab.

Lookups never raise: a miss is resolved by the fallback accessors. The classes
below signal defects in the constant definitions themselves and are raised
while an enumeration is being built, so a broken enumeration never becomes
importable.
"""

from __future__ import annotations

from typing import Any


class DefinitionError(Exception):
    """
    Defect in the definition of a constant enumeration.

    Raised at import time, never during a lookup.

    **Common Causes:**
    - Two members sharing the same identifier
    - Two members sharing the same character code
    - A ``BASE``/``MIN``/``MAX`` alias naming a member that does not exist

    **Example Usage:**
        ```python
        from steamidlab.core.errors import DefinitionError

        try:
            from my_package import BrokenEnum
        except DefinitionError as e:
            print(f"Enumeration is broken: {e}")
        ```
    """

    def __init__(self, owner: str, message: str):
        self.owner = owner
        super().__init__(f"[{owner}] {message}")


class DuplicateKeyError(DefinitionError):
    """
    Raised when a lookup key is claimed by two members of one enumeration.

    Attributes:
        owner: Name of the enumeration being indexed
        key_name: Name of the key kind (``id``, ``char``)
        key: The colliding key value
        first: Name of the member that claimed the key first
        second: Name of the member that collided with it
    """

    def __init__(self, owner: str, key_name: str, key: Any, first: str, second: str):
        self.key_name = key_name
        self.key = key
        self.first = first
        self.second = second
        super().__init__(owner, f"duplicate {key_name} {key!r}: {first} and {second}")


class UnknownAliasError(DefinitionError):
    """Raised when an alias points at a member the enumeration does not declare."""

    def __init__(self, owner: str, alias: str, target: str):
        self.alias = alias
        self.target = target
        super().__init__(owner, f"alias {alias} refers to unknown member {target!r}")
