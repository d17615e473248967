"""
Profile use cases: sparse upsert, sub-item editing, reads and account removal.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from creatives_api.core.errors import NotFound, ValidationError
from creatives_api.domain.profiles import (
    SUB_ITEM_SCHEMAS,
    apply_patch,
    build_profile_patch,
    index_of,
    insert_head,
    new_sub_item,
    remove_at,
    validate_sub_item,
)
from creatives_api.repositories.sql_repository import SQLRepository
from creatives_api.services.documents import profile_document, profile_fields

logger = logging.getLogger(__name__)

NO_PROFILE = "There is no profile for this user"


class ProfileService:
    """Creates, edits and deletes profiles owned by an account."""

    def __init__(self, repository: Optional[SQLRepository] = None) -> None:
        self.repository = repository or SQLRepository()

    def _document(self, profile) -> dict:
        owner = self.repository.get_account(profile.user_id)
        return profile_document(profile, owner)

    def _save(self, profile_id: str, changes: dict):
        updated = self.repository.update_profile(profile_id, changes)
        if updated is None:
            raise NotFound(NO_PROFILE)
        return updated

    def _owner(self, account_id: str):
        account = self.repository.get_account(account_id)
        if not account:
            raise NotFound("User not found")
        return account

    def _check_kind(self, kind: str) -> None:
        if kind not in SUB_ITEM_SCHEMAS:
            raise ValueError(f"Unknown sub-collection: {kind}")

    # -------------------------------------- reads --------------------------------------
    def get_own(self, account_id: str) -> dict:
        found = self.repository.get_profile_with_owner(account_id)
        if not found:
            raise NotFound(NO_PROFILE)
        return profile_document(*found)

    def get_by_user(self, user_id: str) -> dict:
        found = self.repository.get_profile_with_owner(user_id)
        if not found:
            raise NotFound("Profile not found")
        return profile_document(*found)

    def list_all(self) -> list[dict]:
        return [profile_document(profile, owner) for profile, owner in self.repository.list_profiles_with_owner()]

    # -------------------------------------- upsert --------------------------------------
    def upsert(self, account_id: str, fields: Mapping[str, Any]) -> dict:
        """Create the caller's profile or merge the supplied fields into it.

        Omitted fields keep their stored value on update.  ``genres`` is
        required when the profile does not exist yet.
        """
        patch = build_profile_patch(fields)
        if patch.genres == [] or (fields.get("genres") is not None and patch.genres is None):
            raise ValidationError([{"msg": "Genres is required", "param": "genres"}])

        self._owner(account_id)
        existing = self.repository.get_profile_by_user(account_id)
        if existing:
            merged = apply_patch(profile_fields(existing), patch)
            changes = {key: merged[key] for key in patch.keys()}
            if changes:
                existing = self._save(existing.id, changes)
            return self._document(existing)

        if not patch.genres:
            raise ValidationError([{"msg": "Genres is required", "param": "genres"}])
        document = apply_patch({}, patch)
        profile = self.repository.create_profile(account_id, document)
        logger.info("Created profile %s for account %s", profile.id, account_id)
        return self._document(profile)

    # -------------------------------------- sub-items --------------------------------------
    def add_sub_item(self, account_id: str, kind: str, data: Mapping[str, Any]) -> dict:
        """Insert a new entry at the head of ``kind`` (newest first)."""
        self._check_kind(kind)
        errors = validate_sub_item(kind, data)
        if errors:
            raise ValidationError(errors)
        self._owner(account_id)
        profile = self.repository.get_profile_by_user(account_id)
        if not profile:
            raise NotFound(NO_PROFILE)
        items = insert_head(getattr(profile, kind) or [], new_sub_item(kind, data))
        updated = self._save(profile.id, {kind: items})
        return self._document(updated)

    def remove_sub_item(self, account_id: str, kind: str, sub_id: str) -> dict:
        """Remove exactly one entry, located by position of its id."""
        self._check_kind(kind)
        profile = self.repository.get_profile_by_user(account_id)
        if not profile:
            raise NotFound(NO_PROFILE)
        items = list(getattr(profile, kind) or [])
        index = index_of(items, sub_id)
        if index == -1:
            raise NotFound(f"{SUB_ITEM_SCHEMAS[kind].label} not found")
        updated = self._save(profile.id, {kind: remove_at(items, index)})
        return self._document(updated)

    # -------------------------------------- account removal --------------------------------------
    def delete_account(self, account_id: str) -> None:
        """Remove the account's posts, profile and the account itself."""
        self.repository.delete_posts_by_user(account_id)
        self.repository.delete_profiles_by_user(account_id)
        self.repository.delete_account(account_id)
        logger.info("Deleted account %s with its profile and posts", account_id)
