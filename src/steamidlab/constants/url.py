"""
Steam profile URL prefixes.
"""

from __future__ import annotations

from typing import Optional

from . import domain as _domain
from . import endpoint as _endpoint


def url(domain: Optional[str], endpoint: Optional[str]) -> str:
    """
    Build an HTTPS URL prefix from a domain and an endpoint.

    Args:
        domain: Host name, e.g. ``steamcommunity.com``
        endpoint: First path segment, e.g. ``profiles``

    Returns:
        ``https://<domain>/<endpoint>/``

    Raises:
        ValueError: If either argument is None or empty
    """
    if domain is None:
        raise ValueError("Domain must not be None")
    if not domain:
        raise ValueError("Domain must not be empty")
    if endpoint is None:
        raise ValueError("Endpoint must not be None")
    if not endpoint:
        raise ValueError("Endpoint must not be empty")

    return f"https://{domain}/{endpoint}/"


VANITY = url(_domain.COMMUNITY, _endpoint.ID)
PROFILE = url(_domain.COMMUNITY, _endpoint.PROFILES)
USER = url(_domain.COMMUNITY, _endpoint.USER)
INVITE = url(_domain.INVITE, _endpoint.P)
CHINA = url(_domain.CHINA, _endpoint.PROFILES)
