"""
Request bodies.

The models only describe shape and types (dates, booleans); required-ness
and business rules are checked by the services so every caller gets the
same error list.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class SocialLinks(BaseModel):
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ProfileRequest(BaseModel):
    """Sparse profile fields; tag fields are comma separated strings."""

    website: Optional[str] = None
    location: Optional[str] = None
    genres: Optional[Union[str, list[str]]] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    agent: Optional[str] = None
    specialties: Optional[Union[str, list[str]]] = None
    influences: Optional[Union[str, list[str]]] = None
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None
    social: Optional[SocialLinks] = None


class PublicationRequest(BaseModel):
    title: Optional[str] = None
    publisher: Optional[str] = None
    publicationDate: Optional[date] = None
    description: Optional[str] = None


class CareerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    jobTitle: Optional[str] = None
    company: Optional[str] = None
    website: Optional[str] = None
    from_: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


class EducationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    school: Optional[str] = None
    degree: Optional[str] = None
    fieldOfStudy: Optional[str] = None
    from_: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


class TextRequest(BaseModel):
    text: Optional[str] = None


def body_fields(model: BaseModel) -> dict:
    """Supplied fields as JSON-ready values (dates become ISO strings)."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)
