from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from creatives_api.core.auth_guard import current_account_id
from creatives_api.routers._state import get_service
from creatives_api.schemas import TextRequest
from creatives_api.services.post_service import PostService

# Every feed route requires a token.
router = APIRouter(prefix="/api/posts", tags=["posts"], dependencies=[Depends(current_account_id)])


def _posts(request: Request) -> PostService:
    return get_service(request, "post_service")


@router.post("")
def create_post(payload: TextRequest, request: Request, account_id: str = Depends(current_account_id)):
    return _posts(request).create(account_id, payload.text)


@router.get("")
def list_posts(request: Request):
    return _posts(request).list_all()


@router.get("/{post_id}")
def get_post(post_id: str, request: Request):
    return _posts(request).get(post_id)


@router.delete("/{post_id}")
def delete_post(post_id: str, request: Request, account_id: str = Depends(current_account_id)):
    _posts(request).delete(account_id, post_id)
    return {"msg": "Post removed"}


@router.put("/like/{post_id}")
def like_post(post_id: str, request: Request, account_id: str = Depends(current_account_id)):
    return _posts(request).like(account_id, post_id)


@router.put("/unlike/{post_id}")
def unlike_post(post_id: str, request: Request, account_id: str = Depends(current_account_id)):
    return _posts(request).unlike(account_id, post_id)


@router.post("/comment/{post_id}")
def add_comment(post_id: str, payload: TextRequest, request: Request, account_id: str = Depends(current_account_id)):
    return _posts(request).add_comment(account_id, post_id, payload.text)


@router.delete("/comment/{post_id}/{comment_id}")
def remove_comment(post_id: str, comment_id: str, request: Request, account_id: str = Depends(current_account_id)):
    return _posts(request).remove_comment(account_id, post_id, comment_id)
