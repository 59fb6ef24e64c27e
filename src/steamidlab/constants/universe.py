"""
Steam account universe identifiers.
"""

INVALID = 0
PUBLIC = 1
BETA = 2
INTERNAL = 3
DEV = 4
RC = 5  # Release candidate

BASE = INVALID
MIN = PUBLIC
MAX = RC
