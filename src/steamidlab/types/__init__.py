"""
Steam constant enumerations.
"""

from .account import AccountType
from .universe import Universe

__all__ = ["AccountType", "Universe"]
