from __future__ import annotations

import pytest

from creatives_api.core.errors import NotFound, ValidationError
from creatives_api.core.tokens import verify_token
from creatives_api.repositories.sql_repository import SQLRepository
from creatives_api.services.auth_service import AuthService
from creatives_api.services.post_service import PostService
from creatives_api.services.profile_service import ProfileService


@pytest.fixture()
def account_id(db_env) -> str:
    return verify_token(AuthService().register("Ada", "ada@example.com", "secret1"))


def _publication(title: str = "Poems", date: str = "2021-05-01") -> dict:
    return {"title": title, "publisher": "Press", "publicationDate": date}


def test_upsert_update_keeps_omitted_fields(account_id):
    svc = ProfileService()
    created = svc.upsert(account_id, {"genres": "rock, jazz", "location": "Porto"})
    updated = svc.upsert(account_id, {"bio": "x"})

    assert updated["id"] == created["id"]
    assert updated["genres"] == ["rock", "jazz"]
    assert updated["location"] == "Porto"
    assert updated["bio"] == "x"
    assert updated["user"]["name"] == "Ada"


def test_upsert_merges_social_links(account_id):
    svc = ProfileService()
    svc.upsert(account_id, {"genres": "rock", "youtube": "yt"})
    profile = svc.upsert(account_id, {"twitter": "tw"})
    assert profile["social"] == {"youtube": "yt", "twitter": "tw"}


def test_upsert_never_touches_sub_collections(account_id):
    svc = ProfileService()
    svc.upsert(account_id, {"genres": "rock"})
    svc.add_sub_item(account_id, "publications", _publication())
    profile = svc.upsert(account_id, {"genres": "folk"})
    assert profile["genres"] == ["folk"]
    assert len(profile["publications"]) == 1


def test_create_requires_genres(account_id):
    with pytest.raises(ValidationError):
        ProfileService().upsert(account_id, {"bio": "no genres"})
    assert SQLRepository().get_profile_by_user(account_id) is None


def test_blank_genres_rejected(account_id):
    svc = ProfileService()
    svc.upsert(account_id, {"genres": "rock"})
    with pytest.raises(ValidationError):
        svc.upsert(account_id, {"genres": " , "})


def test_publications_are_newest_first(account_id):
    svc = ProfileService()
    svc.upsert(account_id, {"genres": "poetry"})
    for title in ("first", "second", "third"):
        profile = svc.add_sub_item(account_id, "publications", _publication(title))

    assert [p["title"] for p in profile["publications"]] == ["third", "second", "first"]
    assert len({p["id"] for p in profile["publications"]}) == 3


def test_add_sub_item_without_profile_is_not_found(account_id):
    with pytest.raises(NotFound):
        ProfileService().add_sub_item(account_id, "publications", _publication())


def test_add_sub_item_validates_required_fields(account_id):
    svc = ProfileService()
    svc.upsert(account_id, {"genres": "poetry"})
    with pytest.raises(ValidationError) as exc:
        svc.add_sub_item(account_id, "career", {"company": "Acme"})
    assert [e["param"] for e in exc.value.errors] == ["jobTitle", "from"]


def test_remove_sub_item_removes_exactly_one_duplicate(account_id):
    svc = ProfileService()
    svc.upsert(account_id, {"genres": "poetry"})
    svc.add_sub_item(account_id, "publications", _publication("same"))
    svc.add_sub_item(account_id, "publications", _publication("same"))
    profile = svc.add_sub_item(account_id, "publications", _publication("other"))
    target = profile["publications"][1]

    after = svc.remove_sub_item(account_id, "publications", target["id"])

    remaining = after["publications"]
    assert len(remaining) == 2
    assert target["id"] not in [p["id"] for p in remaining]
    assert [p["title"] for p in remaining] == ["other", "same"]


def test_remove_unknown_sub_item_is_not_found(account_id):
    svc = ProfileService()
    svc.upsert(account_id, {"genres": "poetry"})
    before = svc.add_sub_item(account_id, "education", {
        "school": "MIT", "degree": "BA", "fieldOfStudy": "Lit", "from": "2010-09-01",
    })

    with pytest.raises(NotFound) as exc:
        svc.remove_sub_item(account_id, "education", "5")

    assert exc.value.message == "Education entry not found"
    assert svc.get_own(account_id)["education"] == before["education"]


def test_reads(account_id):
    svc = ProfileService()
    with pytest.raises(NotFound):
        svc.get_own(account_id)
    svc.upsert(account_id, {"genres": "poetry"})

    assert svc.get_by_user(account_id)["user"]["id"] == account_id
    assert [p["user"]["name"] for p in svc.list_all()] == ["Ada"]
    with pytest.raises(NotFound):
        svc.get_by_user("not-a-real-id")


def test_delete_account_cascades(account_id):
    svc = ProfileService()
    svc.upsert(account_id, {"genres": "poetry"})
    PostService().create(account_id, "hello")

    svc.delete_account(account_id)

    repo = SQLRepository()
    assert repo.get_account(account_id) is None
    assert repo.get_profile_by_user(account_id) is None
    assert repo.list_posts() == []


def test_deleted_account_cannot_write_profile(account_id):
    svc = ProfileService()
    svc.upsert(account_id, {"genres": "poetry"})
    svc.delete_account(account_id)

    with pytest.raises(NotFound) as exc:
        svc.upsert(account_id, {"genres": "poetry"})
    assert exc.value.message == "User not found"
    with pytest.raises(NotFound):
        svc.add_sub_item(account_id, "publications", _publication())
    assert svc.list_all() == []
