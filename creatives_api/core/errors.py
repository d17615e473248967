"""Error taxonomy shared by services and the HTTP layer."""
from __future__ import annotations

from typing import Iterable


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500
    code = "internal"
    # Rendered as ``{"errors": [...]}`` instead of ``{"msg": ...}``.
    listed = False

    def __init__(self, message: str, status_code: int | None = None, code: str | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code

    def to_payload(self) -> dict:
        if self.listed:
            return {"errors": [{"msg": self.message}]}
        return {"msg": self.message}


class ValidationError(ApiError):
    status_code = 400
    code = "validation"
    listed = True

    def __init__(self, errors: Iterable[dict] | str):
        if isinstance(errors, str):
            errors = [{"msg": errors}]
        self.errors = list(errors)
        message = "; ".join(err.get("msg", "") for err in self.errors) or "Invalid input"
        super().__init__(message)

    def to_payload(self) -> dict:
        return {"errors": self.errors}


class DuplicateAccount(ApiError):
    status_code = 400
    code = "duplicate_account"
    listed = True


class InvalidCredentials(ApiError):
    status_code = 400
    code = "invalid_credentials"
    listed = True


class Unauthorized(ApiError):
    status_code = 401
    code = "unauthorized"


class Forbidden(ApiError):
    status_code = 403
    code = "forbidden"


class NotFound(ApiError):
    status_code = 404
    code = "not_found"


class AlreadyLiked(ApiError):
    status_code = 400
    code = "already_liked"


class NotLiked(ApiError):
    status_code = 400
    code = "not_liked"


class UpstreamError(ApiError):
    status_code = 404
    code = "upstream"


class Internal(ApiError):
    status_code = 500
    code = "internal"


class TokenSigningError(Internal):
    code = "token_signing"
