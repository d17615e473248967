from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from creatives_api.core.auth_guard import current_account_id
from creatives_api.routers._state import get_service
from creatives_api.schemas import (
    CareerRequest,
    EducationRequest,
    ProfileRequest,
    PublicationRequest,
    body_fields,
)
from creatives_api.services.profile_service import ProfileService

router = APIRouter(prefix="/api/profiles", tags=["profiles"])


def _profiles(request: Request) -> ProfileService:
    return get_service(request, "profile_service")


# -------------------------- reads --------------------------
@router.get("/me")
def my_profile(request: Request, account_id: str = Depends(current_account_id)):
    return _profiles(request).get_own(account_id)


@router.get("")
def all_profiles(request: Request):
    return _profiles(request).list_all()


@router.get("/by-user/{user_id}")
def profile_by_user(user_id: str, request: Request):
    return _profiles(request).get_by_user(user_id)


@router.get("/github/{username}")
def github_repos(username: str, request: Request):
    return get_service(request, "github_service").list_repos(username)


# -------------------------- writes --------------------------
@router.post("")
def upsert_profile(payload: ProfileRequest, request: Request, account_id: str = Depends(current_account_id)):
    return _profiles(request).upsert(account_id, body_fields(payload))


@router.put("/publications")
def add_publication(payload: PublicationRequest, request: Request, account_id: str = Depends(current_account_id)):
    return _profiles(request).add_sub_item(account_id, "publications", body_fields(payload))


@router.put("/career")
def add_career(payload: CareerRequest, request: Request, account_id: str = Depends(current_account_id)):
    return _profiles(request).add_sub_item(account_id, "career", body_fields(payload))


@router.put("/education")
def add_education(payload: EducationRequest, request: Request, account_id: str = Depends(current_account_id)):
    return _profiles(request).add_sub_item(account_id, "education", body_fields(payload))


@router.delete("/publications/{item_id}")
def remove_publication(item_id: str, request: Request, account_id: str = Depends(current_account_id)):
    return _profiles(request).remove_sub_item(account_id, "publications", item_id)


@router.delete("/career/{item_id}")
def remove_career(item_id: str, request: Request, account_id: str = Depends(current_account_id)):
    return _profiles(request).remove_sub_item(account_id, "career", item_id)


@router.delete("/education/{item_id}")
def remove_education(item_id: str, request: Request, account_id: str = Depends(current_account_id)):
    return _profiles(request).remove_sub_item(account_id, "education", item_id)


@router.delete("")
def delete_account(request: Request, account_id: str = Depends(current_account_id)):
    _profiles(request).delete_account(account_id)
    return {"msg": "User deleted"}
