"""
steamidlab - Typed Steam account constants with total lookups

steamidlab classifies the parts of a Steam identifier with small, closed
enumerations. Every enumeration builds its reverse-lookup indexes once, at
import time, and exposes the same family of lookups that never raise.

Key Features:
- **Closed enumerations**: ``Universe`` and ``AccountType`` are fixed at import
- **Reverse lookups**: by identifier, by letter code and by declaration index
- **Total accessors**: ``*_or_else``, ``*_or_else_get``, ``*_or_base``, ``*_or_null``
- **Loud definitions**: duplicate keys fail the import with ``DuplicateKeyError``
- **Lazy display strings**: formatted once per member, safe across threads

Quick Start:
    ```python
    from steamidlab import AccountType, Universe

    Universe.from_id_or_base(1)              # Universe.PUBLIC
    Universe.from_index_or_null(42)          # None
    AccountType.from_char_or_null("U")       # AccountType.INDIVIDUAL
    AccountType.from_id_or_else_get(99, lambda: AccountType.UNKNOWN)
    str(AccountType.CLAN)                    # "AccountType::CLAN[id=7, ch='g']"
    ```

Plain constants (domains, endpoints, URL prefixes) live in
``steamidlab.constants``.
"""

# Version information
__version__ = "0.1.0"
__description__ = "Typed Steam account constants with total lookups"

from .core.errors import DefinitionError, DuplicateKeyError, UnknownAliasError
from .types import AccountType, Universe

__all__ = [
    "AccountType",
    "Universe",
    "DefinitionError",
    "DuplicateKeyError",
    "UnknownAliasError",
    "__version__",
]
