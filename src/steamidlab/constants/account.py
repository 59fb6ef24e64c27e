"""
Steam account type identifiers and their one-letter codes.

Types without a letter in the textual SteamID scheme have a None character.
"""

INVALID_ID = 0
INVALID_CHAR = "I"

INDIVIDUAL_ID = 1
INDIVIDUAL_CHAR = "U"

MULTISEAT_ID = 2
MULTISEAT_CHAR = "M"

GAME_SERVER_ID = 3
GAME_SERVER_CHAR = "G"

ANON_GAME_SERVER_ID = 4
ANON_GAME_SERVER_CHAR = "A"

PENDING_ID = 5
PENDING_CHAR = "P"

CONTENT_SERVER_ID = 6
CONTENT_SERVER_CHAR = "C"

CLAN_ID = 7
CLAN_CHAR = "g"

CHAT_ID = 8
CHAT_CHAR = "T"

CONSOLE_USER_ID = 9  # also P2P super seeder
CONSOLE_USER_CHAR = None

ANON_USER_ID = 10
ANON_USER_CHAR = "a"

UNKNOWN_ID = 11
UNKNOWN_CHAR = None

BASE_ID = INVALID_ID
BASE_CHAR = INVALID_CHAR
MIN_ID = INDIVIDUAL_ID
MAX_ID = UNKNOWN_ID
