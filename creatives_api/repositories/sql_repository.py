"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import select, delete

from creatives_api.core.utils import utcnow
from creatives_api.db.models import Account, Profile, Post
from creatives_api.db.session import get_session

PROFILE_FIELDS = frozenset(
    {
        "website",
        "location",
        "bio",
        "githubusername",
        "agent",
        "genres",
        "specialties",
        "influences",
        "publications",
        "career",
        "education",
        "social",
    }
)
POST_FIELDS = frozenset({"text", "likes", "comments"})


def _checked(fields: dict[str, Any], allowed: frozenset) -> dict[str, Any]:
    unknown = set(fields) - allowed
    if unknown:
        raise ValueError(f"Unknown fields: {', '.join(sorted(unknown))}")
    return fields


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- accounts --------------------------
    def get_account(self, account_id: str) -> Optional[Account]:
        with get_session() as session:
            return session.get(Account, account_id)

    def get_account_by_email(self, email: str) -> Optional[Account]:
        with get_session() as session:
            stmt = select(Account).where(Account.email == email)
            return session.execute(stmt).scalar_one_or_none()

    def create_account(self, name: str, email: str, password_hash: str, avatar: str | None) -> Account:
        entity = Account(name=name, email=email, password_hash=password_hash, avatar=avatar, created_at=utcnow())
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def delete_account(self, account_id: str) -> None:
        with get_session() as session:
            session.execute(delete(Account).where(Account.id == account_id))
            session.commit()

    # -------------------------- profiles --------------------------
    def get_profile_by_user(self, user_id: str) -> Optional[Profile]:
        with get_session() as session:
            stmt = select(Profile).where(Profile.user_id == user_id).order_by(Profile.created_at).limit(1)
            return session.execute(stmt).scalars().first()

    def get_profile_with_owner(self, user_id: str) -> Optional[tuple[Profile, Optional[Account]]]:
        with get_session() as session:
            stmt = (
                select(Profile, Account)
                .outerjoin(Account, Account.id == Profile.user_id)
                .where(Profile.user_id == user_id)
                .order_by(Profile.created_at)
                .limit(1)
            )
            row = session.execute(stmt).first()
            return (row[0], row[1]) if row else None

    def list_profiles_with_owner(self) -> list[tuple[Profile, Optional[Account]]]:
        with get_session() as session:
            stmt = (
                select(Profile, Account)
                .outerjoin(Account, Account.id == Profile.user_id)
                .order_by(Profile.created_at)
            )
            return [(profile, account) for profile, account in session.execute(stmt).all()]

    def create_profile(self, user_id: str, fields: dict[str, Any]) -> Profile:
        values = _checked(dict(fields), PROFILE_FIELDS)
        entity = Profile(user_id=user_id, created_at=utcnow(), **values)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def update_profile(self, profile_id: str, fields: dict[str, Any]) -> Optional[Profile]:
        values = _checked(dict(fields), PROFILE_FIELDS)
        with get_session() as session:
            profile = session.get(Profile, profile_id)
            if not profile:
                return None
            for key, value in values.items():
                setattr(profile, key, value)
            session.commit()
            session.refresh(profile)
            return profile

    def delete_profiles_by_user(self, user_id: str) -> None:
        with get_session() as session:
            session.execute(delete(Profile).where(Profile.user_id == user_id))
            session.commit()

    # -------------------------- posts --------------------------
    def create_post(self, user_id: str, text: str, name: str | None, avatar: str | None) -> Post:
        entity = Post(user_id=user_id, text=text, name=name, avatar=avatar, likes=[], comments=[], created_at=utcnow())
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def get_post(self, post_id: str) -> Optional[Post]:
        with get_session() as session:
            return session.get(Post, post_id)

    def list_posts(self) -> list[Post]:
        with get_session() as session:
            stmt = select(Post).order_by(Post.created_at.desc())
            return session.execute(stmt).scalars().all()

    def update_post(self, post_id: str, fields: dict[str, Any]) -> Optional[Post]:
        values = _checked(dict(fields), POST_FIELDS)
        with get_session() as session:
            post = session.get(Post, post_id)
            if not post:
                return None
            for key, value in values.items():
                setattr(post, key, value)
            session.commit()
            session.refresh(post)
            return post

    def delete_post(self, post_id: str) -> None:
        with get_session() as session:
            session.execute(delete(Post).where(Post.id == post_id))
            session.commit()

    def delete_posts_by_user(self, user_id: str) -> None:
        with get_session() as session:
            session.execute(delete(Post).where(Post.user_id == user_id))
            session.commit()
