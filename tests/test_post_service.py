from __future__ import annotations

import pytest

from creatives_api.core.errors import AlreadyLiked, Forbidden, NotFound, NotLiked, ValidationError
from creatives_api.core.tokens import verify_token
from creatives_api.repositories.sql_repository import SQLRepository
from creatives_api.services.auth_service import AuthService
from creatives_api.services.post_service import PostService


@pytest.fixture()
def accounts(db_env) -> tuple[str, str]:
    svc = AuthService()
    alice = verify_token(svc.register("Alice", "alice@example.com", "secret1"))
    bob = verify_token(svc.register("Bob", "bob@example.com", "secret1"))
    return alice, bob


def test_create_snapshots_author(accounts):
    alice, _ = accounts
    post = PostService().create(alice, "  hello  ")
    assert post["text"] == "hello"
    assert post["name"] == "Alice"
    assert post["avatar"].startswith("https://www.gravatar.com/avatar/")
    assert post["user"] == alice


def test_create_requires_text(accounts):
    with pytest.raises(ValidationError):
        PostService().create(accounts[0], "   ")


def test_list_is_newest_first(accounts):
    svc = PostService()
    svc.create(accounts[0], "one")
    svc.create(accounts[1], "two")
    assert [p["text"] for p in svc.list_all()] == ["two", "one"]


def test_like_twice_fails(accounts):
    alice, bob = accounts
    svc = PostService()
    post = svc.create(alice, "hello")

    likes = svc.like(bob, post["id"])
    with pytest.raises(AlreadyLiked):
        svc.like(bob, post["id"])

    assert len(likes) == 1
    assert len(svc.get(post["id"])["likes"]) == 1


def test_like_is_newest_first_and_unlike_removes_caller(accounts):
    alice, bob = accounts
    svc = PostService()
    post = svc.create(alice, "hello")
    svc.like(alice, post["id"])
    likes = svc.like(bob, post["id"])
    assert [like["user"] for like in likes] == [bob, alice]

    assert [like["user"] for like in svc.unlike(alice, post["id"])] == [bob]
    with pytest.raises(NotLiked):
        svc.unlike(alice, post["id"])


def test_delete_by_non_author_is_forbidden(accounts):
    alice, bob = accounts
    svc = PostService()
    post = svc.create(alice, "hello")

    with pytest.raises(Forbidden):
        svc.delete(bob, post["id"])
    assert svc.get(post["id"])["text"] == "hello"

    svc.delete(alice, post["id"])
    with pytest.raises(NotFound):
        svc.get(post["id"])


def test_missing_post_is_not_found(accounts):
    svc = PostService()
    with pytest.raises(NotFound):
        svc.like(accounts[0], "missing")
    with pytest.raises(NotFound):
        svc.delete(accounts[0], "missing")


def test_comments(accounts):
    alice, bob = accounts
    svc = PostService()
    post = svc.create(alice, "hello")

    svc.add_comment(alice, post["id"], "first")
    comments = svc.add_comment(bob, post["id"], "second")
    assert [c["text"] for c in comments] == ["second", "first"]
    assert comments[0]["name"] == "Bob"

    with pytest.raises(Forbidden):
        svc.remove_comment(alice, post["id"], comments[0]["id"])
    with pytest.raises(NotFound):
        svc.remove_comment(bob, post["id"], "missing")

    remaining = svc.remove_comment(bob, post["id"], comments[0]["id"])
    assert [c["text"] for c in remaining] == ["first"]


def test_deleted_account_cannot_like(accounts):
    alice, bob = accounts
    svc = PostService()
    post = svc.create(alice, "hello")
    SQLRepository().delete_account(bob)

    with pytest.raises(NotFound):
        svc.like(bob, post["id"])
    with pytest.raises(NotFound):
        svc.unlike(bob, post["id"])
    assert svc.get(post["id"])["likes"] == []
