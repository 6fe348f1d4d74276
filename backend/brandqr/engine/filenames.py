"""Download filenames for exported artifacts."""

from __future__ import annotations

import re
from datetime import datetime, timezone

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]", re.IGNORECASE | re.ASCII)

FILENAME_PREFIX = "qr-code"


def timestamp(now: datetime | None = None) -> str:
    """UTC ``YYYY-MM-DDTHH-MM-SS``."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H-%M-%S")


def slugify(text: str) -> str:
    return _NON_ALNUM_RE.sub("-", text).lower()


def export_filename(caption: str | None, extension: str, now: datetime | None = None) -> str:
    ext = extension.lstrip(".").lower()
    stamp = timestamp(now)
    if caption:
        return f"{FILENAME_PREFIX}-{slugify(caption)}-{stamp}.{ext}"
    return f"{FILENAME_PREFIX}-{stamp}.{ext}"
