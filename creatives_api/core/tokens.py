"""
Bearer token issuance and verification.

Tokens are HS256 JWTs carrying ``{"user": {"id": <account id>}}`` and an
``exp`` claim.  They hold no roles or scopes; the account id is the only
authorization state.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from jose import JWTError, jwt

from creatives_api.core.config import get_settings
from creatives_api.core.errors import TokenSigningError

logger = logging.getLogger(__name__)


def issue_token(account_id: str, *, expires_in: Optional[int] = None) -> str:
    """Sign a token for ``account_id``.

    ``expires_in`` overrides ``settings.token_ttl_seconds``.  A failure in
    the signing step is raised as ``TokenSigningError``.
    """
    settings = get_settings()
    ttl = settings.token_ttl_seconds if expires_in is None else expires_in
    claims = {
        "user": {"id": str(account_id)},
        "exp": int(time.time()) + ttl,
    }
    try:
        return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    except JWTError as exc:
        logger.error("Token signing failed: %s", exc)
        raise TokenSigningError("Server error") from exc


def verify_token(token: str | None) -> Optional[str]:
    """Return the account id carried by ``token``, or None when invalid."""
    if not token:
        return None
    settings = get_settings()
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    user = claims.get("user")
    if not isinstance(user, dict):
        return None
    account_id = user.get("id")
    if not account_id or not isinstance(account_id, str):
        return None
    return account_id
