"""Domain helpers for profile patches and sub-collections.

Everything here is pure: functions take plain values and return new
objects, never touching the store.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields as dc_fields
from typing import Any, Iterable, Mapping, Optional

from creatives_api.core.utils import new_id

SCALAR_FIELDS = ("website", "location", "bio", "githubusername", "agent")
TAG_FIELDS = ("genres", "specialties", "influences")
SOCIAL_FIELDS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


@dataclass(frozen=True)
class SubItemSchema:
    required: tuple[tuple[str, str], ...]
    optional: tuple[str, ...]
    has_current_flag: bool
    label: str


SUB_ITEM_SCHEMAS: dict[str, SubItemSchema] = {
    "publications": SubItemSchema(
        required=(
            ("title", "Title is required"),
            ("publisher", "Publisher is required"),
            ("publicationDate", "Publication date is required"),
        ),
        optional=("description",),
        has_current_flag=False,
        label="Publication",
    ),
    "career": SubItemSchema(
        required=(
            ("jobTitle", "Job title is required"),
            ("company", "Company is required"),
            ("from", "From date is required"),
        ),
        optional=("website", "to", "description"),
        has_current_flag=True,
        label="Career entry",
    ),
    "education": SubItemSchema(
        required=(
            ("school", "School is required"),
            ("degree", "Degree is required"),
            ("fieldOfStudy", "Field of study is required"),
            ("from", "From date is required"),
        ),
        optional=("to", "description"),
        has_current_flag=True,
        label="Education entry",
    ),
}


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def split_tags(value: str | Iterable[str] | None) -> list[str]:
    """Split a comma separated value into an ordered set of trimmed tags."""
    if value is None:
        return []
    chunks = value.split(",") if isinstance(value, str) else [part for item in value for part in str(item).split(",")]
    tags: list[str] = []
    for chunk in chunks:
        tag = chunk.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


@dataclass
class SocialPatch:
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    def present(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in dc_fields(self) if getattr(self, f.name) is not None}


@dataclass
class ProfilePatch:
    """Sparse profile update: ``None`` means "not supplied, leave alone"."""

    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    agent: Optional[str] = None
    genres: Optional[list[str]] = None
    specialties: Optional[list[str]] = None
    influences: Optional[list[str]] = None
    social: SocialPatch = field(default_factory=SocialPatch)

    def present(self) -> dict[str, Any]:
        """Supplied top-level fields, excluding ``social``."""
        values = {}
        for name in SCALAR_FIELDS + TAG_FIELDS:
            value = getattr(self, name)
            if value is not None:
                values[name] = value
        return values

    def keys(self) -> set[str]:
        keys = set(self.present())
        if self.social.present():
            keys.add("social")
        return keys


def build_profile_patch(data: Mapping[str, Any]) -> ProfilePatch:
    """Build a patch from request fields, keeping only non-empty values.

    Social links may arrive flat (``youtube=...``) or nested under
    ``social``; flat keys win.
    """
    patch = ProfilePatch()
    for name in SCALAR_FIELDS:
        setattr(patch, name, _clean(data.get(name)))
    for name in TAG_FIELDS:
        raw = data.get(name)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            continue
        setattr(patch, name, split_tags(raw))

    nested = data.get("social") or {}
    for name in SOCIAL_FIELDS:
        value = _clean(data.get(name))
        if value is None and isinstance(nested, Mapping):
            value = _clean(nested.get(name))
        setattr(patch.social, name, value)
    return patch


def apply_patch(document: Mapping[str, Any], patch: ProfilePatch) -> dict[str, Any]:
    """Merge ``patch`` over ``document``; only supplied fields overwrite.

    Social links merge key by key.  Sub-collections are never touched.
    """
    merged = dict(document)
    merged.update(patch.present())
    social = dict(document.get("social") or {})
    social.update(patch.social.present())
    merged["social"] = social
    return merged


def validate_sub_item(kind: str, data: Mapping[str, Any]) -> list[dict[str, str]]:
    schema = SUB_ITEM_SCHEMAS[kind]
    return [
        {"msg": message, "param": name}
        for name, message in schema.required
        if _clean(data.get(name)) is None
    ]


def new_sub_item(kind: str, data: Mapping[str, Any]) -> dict[str, Any]:
    """Build a stored sub-item with a fresh id. Input is assumed valid."""
    schema = SUB_ITEM_SCHEMAS[kind]
    item: dict[str, Any] = {"id": new_id()}
    for name, _ in schema.required:
        item[name] = _clean(data.get(name))
    for name in schema.optional:
        value = _clean(data.get(name))
        if value is not None:
            item[name] = value
    if schema.has_current_flag:
        item["current"] = bool(data.get("current") or False)
    return item


def insert_head(items: Iterable[dict], item: dict) -> list[dict]:
    return [item, *items]


def index_of(items: Iterable[Mapping[str, Any]], sub_id: Any) -> int:
    """Position of the entry whose id equals ``sub_id`` as a string, or -1."""
    target = str(sub_id)
    ids = [str(entry.get("id")) for entry in items]
    try:
        return ids.index(target)
    except ValueError:
        return -1


def remove_at(items: Iterable[dict], index: int) -> list[dict]:
    remaining = list(items)
    del remaining[index]
    return remaining
