"""Utilities for validating and joining absolute URLs."""

from urllib.parse import urljoin, urlsplit

# Schemes that cannot be used without a host.
HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def parse_url(url: str) -> str | None:
    """Return `url` if it is a usable absolute URL, else None."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if not parts.scheme or any(c.isspace() for c in url):
        return None
    if parts.scheme.lower() in HOST_SCHEMES and not parts.netloc:
        return None
    return url


def join_url(base: str | None, reference: str) -> str | None:
    """Resolve `reference` against `base` like a browser would."""
    if base is None:
        return None
    try:
        return parse_url(urljoin(base, reference))
    except ValueError:
        return None
