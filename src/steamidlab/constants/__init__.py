"""
Plain Steam constants: universes, account types, auth flags, domains, endpoints and URLs.

These are the raw values the enumerations in ``steamidlab.types`` wrap.
"""

from . import account, auth, domain, endpoint, universe, url

__all__ = ["account", "auth", "domain", "endpoint", "universe", "url"]
