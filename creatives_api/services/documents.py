"""
Entity -> JSON document conversions shared across services.
"""

from __future__ import annotations

from typing import Optional

from creatives_api.core.utils import isoformat
from creatives_api.db.models import Account, Post, Profile
from creatives_api.domain.profiles import SCALAR_FIELDS, TAG_FIELDS


def account_document(entity: Account) -> dict:
    """Public view of an account; the password hash never leaves the service."""
    return {
        "id": entity.id,
        "name": entity.name,
        "email": entity.email,
        "avatar": entity.avatar,
        "date": isoformat(entity.created_at),
    }


def owner_document(user_id: str, owner: Optional[Account]) -> dict:
    if owner is None:
        return {"id": user_id, "name": None, "avatar": None}
    return {"id": owner.id, "name": owner.name, "avatar": owner.avatar}


def profile_fields(entity: Profile) -> dict:
    """Mutable fields of a profile as plain values (the merge input)."""
    doc = {name: getattr(entity, name) for name in SCALAR_FIELDS}
    doc.update({name: list(getattr(entity, name) or []) for name in TAG_FIELDS})
    doc["social"] = dict(entity.social or {})
    return doc


def profile_document(entity: Profile, owner: Optional[Account] = None, *, populate: bool = True) -> dict:
    doc = {"id": entity.id}
    doc["user"] = owner_document(entity.user_id, owner) if populate else entity.user_id
    doc.update(profile_fields(entity))
    doc["publications"] = list(entity.publications or [])
    doc["career"] = list(entity.career or [])
    doc["education"] = list(entity.education or [])
    doc["date"] = isoformat(entity.created_at)
    return doc


def post_document(entity: Post) -> dict:
    return {
        "id": entity.id,
        "user": entity.user_id,
        "text": entity.text,
        "name": entity.name,
        "avatar": entity.avatar,
        "likes": list(entity.likes or []),
        "comments": list(entity.comments or []),
        "date": isoformat(entity.created_at),
    }
