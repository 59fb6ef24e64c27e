"""
Steam account universe enumeration.
"""

from __future__ import annotations

from typing import Any, Optional

from ..constants import universe as U
from ..core.entity import SteamEnum, indexed


@indexed(base="INVALID", minimum="PUBLIC", maximum="RC")
class Universe(SteamEnum):
    """
    Steam account universe.

    Wraps the identifiers in ``steamidlab.constants.universe``.

    Example:
        ```python
        from steamidlab.types import Universe

        Universe.from_id_or_base(1)    # Universe.PUBLIC
        Universe.from_id_or_base(99)   # Universe.INVALID
        Universe.get_id_or_null(None)  # None
        str(Universe.PUBLIC)           # 'Universe::PUBLIC[id=1]'
        ```
    """

    INVALID = U.INVALID
    PUBLIC = U.PUBLIC
    BETA = U.BETA
    INTERNAL = U.INTERNAL
    DEV = U.DEV
    RC = U.RC

    @classmethod
    def get_id_or_base(cls, member: Any) -> Optional[int]:
        """Identifier of ``member``, or ``constants.universe.BASE``."""
        return cls.get_id_or_else(member, U.BASE)
