"""SQLAlchemy models for accounts, profiles and posts.

Array and struct sub-documents (publications, likes, social links, ...)
live in JSON columns so each record reads and writes as one document.
"""
from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, JSON

from creatives_api.core.utils import new_id, utcnow

from .session import Base


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String(24), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(Text, nullable=False)
    avatar = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(24), primary_key=True, default=new_id)
    # One profile per account is enforced by lookup-before-create.
    user_id = Column(String(24), ForeignKey("accounts.id", ondelete="CASCADE"), index=True, nullable=False)
    website = Column(Text, nullable=True)
    location = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    githubusername = Column(String(255), nullable=True)
    agent = Column(Text, nullable=True)
    genres = Column(JSON, nullable=False, default=list)
    specialties = Column(JSON, nullable=False, default=list)
    influences = Column(JSON, nullable=False, default=list)
    publications = Column(JSON, nullable=False, default=list)
    career = Column(JSON, nullable=False, default=list)
    education = Column(JSON, nullable=False, default=list)
    social = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class Post(Base):
    __tablename__ = "posts"

    id = Column(String(24), primary_key=True, default=new_id)
    user_id = Column(String(24), ForeignKey("accounts.id", ondelete="CASCADE"), index=True, nullable=False)
    text = Column(Text, nullable=False)
    name = Column(String(255), nullable=True)
    avatar = Column(Text, nullable=True)
    likes = Column(JSON, nullable=False, default=list)
    comments = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True, nullable=False)
