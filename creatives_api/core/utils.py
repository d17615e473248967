"""
Utility helpers shared across services.
"""

import hashlib
import secrets
from datetime import datetime, timezone
from urllib.parse import urlencode

GRAVATAR_BASE = "https://www.gravatar.com/avatar/"
GRAVATAR_OPTIONS = {"s": "200", "r": "pg", "d": "mm"}


def new_id() -> str:
    """Opaque 24-hex identifier for documents and sub-items."""
    return secrets.token_hex(12)


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def gravatar_url(email: str) -> str:
    """
    Avatar reference derived from the email: 200px, pg rating, mystery-man fallback.
    """
    digest = hashlib.md5(normalize_email(email).encode("utf-8")).hexdigest()
    return f"{GRAVATAR_BASE}{digest}?{urlencode(GRAVATAR_OPTIONS)}"


def isoformat(value: datetime | None) -> str | None:
    """Serialize a stored timestamp; naive values (SQLite) are read as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
