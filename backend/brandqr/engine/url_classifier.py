"""Heuristic URL detection and normalization.

``is_url`` accepts anything that parses as an absolute URL, plus bare
domains such as ``example.com/path`` that users type without a scheme.
Both functions are total: odd input yields False / unchanged text.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

# RFC 3986 scheme followed by ":".
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")

_WHITESPACE_RE = re.compile(r"\s")

# One or more "label." segments, a 2+ letter top-level label, optional path.
_BARE_DOMAIN_RE = re.compile(r"^([A-Za-z0-9-]+\.)+[A-Za-z]{2,}(/.*)?$")

# Schemes that are meaningless without a host.
_HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def is_absolute_url(text: str) -> bool:
    """Scheme plus a non-empty remainder.

    Hierarchical URLs (``scheme://authority/...``) may carry spaces in the
    path, query or fragment but not in the authority. Opaque ones
    (``mailto:``, ``tel:``) must be free of whitespace.
    """
    if not isinstance(text, str) or text != text.strip():
        return False
    match = _SCHEME_RE.match(text)
    if match is None:
        return False
    rest = text[match.end():]
    if not rest:
        return False
    try:
        parts = urlsplit(text)
        # .port raises ValueError on a malformed authority
        _ = parts.port
    except ValueError:
        return False
    if rest.startswith("//"):
        if not parts.netloc or _WHITESPACE_RE.search(parts.netloc):
            return False
    elif _WHITESPACE_RE.search(rest):
        return False
    if parts.scheme.lower() in _HOST_SCHEMES:
        return bool(parts.hostname)
    return True


def is_url(text: str) -> bool:
    if not isinstance(text, str):
        return False
    if is_absolute_url(text):
        return True
    return _BARE_DOMAIN_RE.match(text) is not None


def normalize_url(text: str) -> str:
    """Prefix ``https://`` to bare domains; everything else is returned as-is."""
    if not isinstance(text, str) or is_absolute_url(text):
        return text
    if is_url(text):
        return f"https://{text}"
    return text
