"""
Steam web domains.
"""

COMMUNITY = "steamcommunity.com"
INVITE = "s.team"
CHINA = "my.steamchina.com"
