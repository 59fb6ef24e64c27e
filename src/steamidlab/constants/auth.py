"""
Steam authentication server flag.
"""

NO = 0
YES = 1

MIN = NO
MAX = YES
