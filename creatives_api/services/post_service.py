"""
Feed use cases: posts, likes and comments.
"""

from __future__ import annotations

from typing import Optional

from creatives_api.core.errors import AlreadyLiked, Forbidden, NotFound, NotLiked, ValidationError
from creatives_api.core.utils import isoformat, new_id, utcnow
from creatives_api.domain.profiles import index_of, insert_head, remove_at
from creatives_api.repositories.sql_repository import SQLRepository
from creatives_api.services.documents import post_document

POST_NOT_FOUND = "Post not found"
NOT_AUTHORIZED = "User not authorized"


class PostService:
    """Posts with embedded likes and comments; only authors may delete."""

    def __init__(self, repository: Optional[SQLRepository] = None) -> None:
        self.repository = repository or SQLRepository()

    def _require_text(self, text: str | None) -> str:
        value = (text or "").strip()
        if not value:
            raise ValidationError([{"msg": "Text is required", "param": "text"}])
        return value

    def _author(self, account_id: str):
        account = self.repository.get_account(account_id)
        if not account:
            raise NotFound("User not found")
        return account

    def _post(self, post_id: str):
        post = self.repository.get_post(post_id)
        if not post:
            raise NotFound(POST_NOT_FOUND)
        return post

    def _save(self, post_id: str, changes: dict):
        post = self.repository.update_post(post_id, changes)
        if post is None:
            raise NotFound(POST_NOT_FOUND)
        return post

    # -------------------------------------- posts --------------------------------------
    def create(self, account_id: str, text: str) -> dict:
        value = self._require_text(text)
        author = self._author(account_id)
        post = self.repository.create_post(account_id, value, author.name, author.avatar)
        return post_document(post)

    def list_all(self) -> list[dict]:
        return [post_document(post) for post in self.repository.list_posts()]

    def get(self, post_id: str) -> dict:
        return post_document(self._post(post_id))

    def delete(self, account_id: str, post_id: str) -> None:
        post = self._post(post_id)
        if post.user_id != account_id:
            raise Forbidden(NOT_AUTHORIZED)
        self.repository.delete_post(post.id)

    # -------------------------------------- likes --------------------------------------
    def like(self, account_id: str, post_id: str) -> list[dict]:
        self._author(account_id)
        post = self._post(post_id)
        likes = list(post.likes or [])
        if any(like.get("user") == account_id for like in likes):
            raise AlreadyLiked("Post already liked")
        likes = insert_head(likes, {"id": new_id(), "user": account_id})
        return list(self._save(post.id, {"likes": likes}).likes)

    def unlike(self, account_id: str, post_id: str) -> list[dict]:
        self._author(account_id)
        post = self._post(post_id)
        likes = list(post.likes or [])
        users = [like.get("user") for like in likes]
        if account_id not in users:
            raise NotLiked("Post has not yet been liked")
        likes = remove_at(likes, users.index(account_id))
        return list(self._save(post.id, {"likes": likes}).likes)

    # -------------------------------------- comments --------------------------------------
    def add_comment(self, account_id: str, post_id: str, text: str) -> list[dict]:
        value = self._require_text(text)
        author = self._author(account_id)
        post = self._post(post_id)
        comment = {
            "id": new_id(),
            "text": value,
            "name": author.name,
            "avatar": author.avatar,
            "user": account_id,
            "date": isoformat(utcnow()),
        }
        comments = insert_head(post.comments or [], comment)
        return list(self._save(post.id, {"comments": comments}).comments)

    def remove_comment(self, account_id: str, post_id: str, comment_id: str) -> list[dict]:
        post = self._post(post_id)
        comments = list(post.comments or [])
        index = index_of(comments, comment_id)
        if index == -1:
            raise NotFound("Comment does not exist")
        if comments[index].get("user") != account_id:
            raise Forbidden(NOT_AUTHORIZED)
        return list(self._save(post.id, {"comments": remove_at(comments, index)}).comments)
