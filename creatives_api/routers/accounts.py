from fastapi import APIRouter, Request

from creatives_api.routers._state import get_service
from creatives_api.schemas import RegisterRequest

router = APIRouter(prefix="/api/accounts", tags=["accounts"])


@router.post("")
def register(payload: RegisterRequest, request: Request):
    svc = get_service(request, "auth_service")
    token = svc.register(payload.name, payload.email, payload.password)
    return {"token": token}
