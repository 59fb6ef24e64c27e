"""
Steam community URL path segments.
"""

ID = "id"  # vanity URLs
PROFILES = "profiles"
USER = "user"
P = "p"  # invite links
