"""Request authentication (bearer token gate)."""
from __future__ import annotations

from fastapi import Request

from creatives_api.core.errors import Unauthorized
from creatives_api.core.tokens import verify_token

TOKEN_HEADER_NAME = "x-auth-token"


def extract_token(request: Request) -> str | None:
    """Read the token from ``x-auth-token`` or an ``Authorization: Bearer`` header."""
    token = (request.headers.get(TOKEN_HEADER_NAME) or "").strip()
    if token:
        return token
    authorization = (request.headers.get("authorization") or "").strip()
    scheme, _, value = authorization.partition(" ")
    if scheme.lower() == "bearer" and value.strip():
        return value.strip()
    return None


def authenticate(request: Request) -> str:
    """Resolve the caller's account id or raise ``Unauthorized``.

    The id is also stored on ``request.state.account_id`` for downstream
    handlers.  No store access happens here.
    """
    token = extract_token(request)
    if not token:
        raise Unauthorized("No token, authorization denied")
    account_id = verify_token(token)
    if not account_id:
        raise Unauthorized("Token is not valid")
    request.state.account_id = account_id
    return account_id


def current_account_id(request: Request) -> str:
    """FastAPI dependency for routes that require an authenticated caller."""
    return authenticate(request)
