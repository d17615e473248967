from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from creatives_api.core.auth_guard import current_account_id
from creatives_api.routers._state import get_service
from creatives_api.schemas import LoginRequest

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("")
def me(request: Request, account_id: str = Depends(current_account_id)):
    return get_service(request, "auth_service").get_account(account_id)


@router.post("")
def login(payload: LoginRequest, request: Request):
    token = get_service(request, "auth_service").login(payload.email, payload.password)
    return {"token": token}
