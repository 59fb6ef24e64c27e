"""
Steam account type enumeration.
"""

from __future__ import annotations

from collections.abc import Callable
from operator import attrgetter
from typing import Any, Optional

from ..constants import account as A
from ..core.entity import SteamEnum, indexed
from ..core.fallback import if_none, if_not_none


@indexed(base="INVALID", minimum="INDIVIDUAL", maximum="UNKNOWN", keys=("id", "char"))
class AccountType(SteamEnum):
    """
    Steam account type.

    Each type has an identifier and, for most types, the one-letter code used
    in textual SteamIDs (``[U:1:...]``). Wraps ``steamidlab.constants.account``.

    Example:
        ```python
        from steamidlab.types import AccountType

        AccountType.from_char_or_null("g")          # AccountType.CLAN
        AccountType.from_char_or_base("?")          # AccountType.INVALID
        AccountType.get_char_or_null(AccountType.CONSOLE_USER)  # None
        ```
    """

    INVALID = (A.INVALID_ID, A.INVALID_CHAR)
    INDIVIDUAL = (A.INDIVIDUAL_ID, A.INDIVIDUAL_CHAR)
    MULTISEAT = (A.MULTISEAT_ID, A.MULTISEAT_CHAR)
    GAME_SERVER = (A.GAME_SERVER_ID, A.GAME_SERVER_CHAR)
    ANON_GAME_SERVER = (A.ANON_GAME_SERVER_ID, A.ANON_GAME_SERVER_CHAR)
    PENDING = (A.PENDING_ID, A.PENDING_CHAR)
    CONTENT_SERVER = (A.CONTENT_SERVER_ID, A.CONTENT_SERVER_CHAR)
    CLAN = (A.CLAN_ID, A.CLAN_CHAR)
    CHAT = (A.CHAT_ID, A.CHAT_CHAR)
    CONSOLE_USER = (A.CONSOLE_USER_ID, A.CONSOLE_USER_CHAR)
    ANON_USER = (A.ANON_USER_ID, A.ANON_USER_CHAR)
    UNKNOWN = (A.UNKNOWN_ID, A.UNKNOWN_CHAR)

    def __init__(self, id: int, char: Optional[str] = None):
        super().__init__(id)
        self._char = char

    @property
    def char(self) -> Optional[str]:
        return self._char

    def _display_fields(self) -> list[tuple[str, Any]]:
        return [("id", self._id), ("ch", repr(self._char))]

    @classmethod
    def get_id_or_base(cls, member: Any) -> Optional[int]:
        """Identifier of ``member``, or ``constants.account.BASE_ID``."""
        return cls.get_id_or_else(member, A.BASE_ID)

    @classmethod
    def get_char_or_else(cls, member: Any, default: Optional[str]) -> Optional[str]:
        """
        Letter code of ``member``, or ``default``.

        Falls back when ``member`` is None and when the type has no letter.
        """
        char = if_not_none(cls._own(member), attrgetter("char"), None)
        return default if char is None else char

    @classmethod
    def get_char_or_else_get(
        cls, member: Any, supplier: Callable[[], Optional[str]]
    ) -> Optional[str]:
        return if_none(cls.get_char_or_null(member), supplier)

    @classmethod
    def get_char_or_base(cls, member: Any) -> Optional[str]:
        """Letter code of ``member``, or ``constants.account.BASE_CHAR``."""
        return cls.get_char_or_else(member, A.BASE_CHAR)

    @classmethod
    def get_char_or_null(cls, member: Any) -> Optional[str]:
        return cls.get_char_or_else(member, None)

    @classmethod
    def from_char_or_else(
        cls, char: Any, default: Optional[AccountType]
    ) -> Optional[AccountType]:
        """Account type whose letter is ``char`` (case-sensitive), or ``default``."""
        return cls.registry().lookup("char", char, default)

    @classmethod
    def from_char_or_else_get(
        cls, char: Any, supplier: Callable[[], Optional[AccountType]]
    ) -> Optional[AccountType]:
        return if_none(cls.from_char_or_null(char), supplier)

    @classmethod
    def from_char_or_base(cls, char: Any) -> AccountType:
        return cls.from_char_or_else(char, cls._base())

    @classmethod
    def from_char_or_null(cls, char: Any) -> Optional[AccountType]:
        return cls.from_char_or_else(char, None)
