"""
Pydantic schemas for profiles.
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devnet.core.validators import split_skills
from devnet.schemas.auth import UserBrief

SOCIAL_FIELDS = ("youtube", "twitter", "facebook", "linkedin", "instagram")
PROFILE_FIELDS = ("company", "website", "location", "bio", "status", "githubusername")


def _required(value: Optional[str], message: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(message)
    return value


class ProfileUpsert(BaseModel):
    """
    Body of the create-or-update call.

    Only fields that are present and non-empty are written; everything else
    stays as it is on an existing profile.
    """
    status: Optional[str] = Field(None, validate_default=True, description="Professional status")
    skills: Optional[str] = Field(None, validate_default=True, description="Comma-separated skills")
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator("status")
    @classmethod
    def check_status(cls, v: Optional[str]) -> str:
        return _required(v, "Status is required")

    @field_validator("skills")
    @classmethod
    def check_skills(cls, v: Optional[str]) -> str:
        v = _required(v, "Skills is required")
        if not split_skills(v):
            raise ValueError("Skills is required")
        return v


class ExperienceCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(None, validate_default=True)
    company: Optional[str] = Field(None, validate_default=True)
    location: Optional[str] = None
    from_date: Optional[date] = Field(None, alias="from", validate_default=True)
    to_date: Optional[date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, v: Optional[str]) -> str:
        return _required(v, "Title is required")

    @field_validator("company")
    @classmethod
    def check_company(cls, v: Optional[str]) -> str:
        return _required(v, "Company is required")

    @field_validator("from_date")
    @classmethod
    def check_from(cls, v: Optional[date]) -> date:
        if v is None:
            raise ValueError("From date is required")
        return v


class EducationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    school: Optional[str] = Field(None, validate_default=True)
    degree: Optional[str] = Field(None, validate_default=True)
    fieldofstudy: Optional[str] = Field(None, validate_default=True)
    from_date: Optional[date] = Field(None, alias="from", validate_default=True)
    to_date: Optional[date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None

    @field_validator("school")
    @classmethod
    def check_school(cls, v: Optional[str]) -> str:
        return _required(v, "School is required")

    @field_validator("degree")
    @classmethod
    def check_degree(cls, v: Optional[str]) -> str:
        return _required(v, "Degree is required")

    @field_validator("fieldofstudy")
    @classmethod
    def check_fieldofstudy(cls, v: Optional[str]) -> str:
        return _required(v, "Field of study is required")

    @field_validator("from_date")
    @classmethod
    def check_from(cls, v: Optional[date]) -> date:
        if v is None:
            raise ValueError("From date is required")
        return v


class ExperienceRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_date: date = Field(..., alias="from")
    to_date: Optional[date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None


class EducationRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(..., alias="from")
    to_date: Optional[date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None


class SocialLinks(BaseModel):
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ProfileRead(BaseModel):
    """Profile as returned to clients, with the owner's name and avatar joined in."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    user: UserBrief
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: str
    githubusername: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    social: SocialLinks = Field(default_factory=SocialLinks)
    experience: List[ExperienceRead] = Field(default_factory=list)
    education: List[EducationRead] = Field(default_factory=list)
    date: datetime = Field(..., validation_alias="created_at")


class GithubRepo(BaseModel):
    """Subset of the upstream repository listing passed through to clients."""
    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    name: Optional[str] = None
    html_url: Optional[str] = None
    description: Optional[str] = None
    stargazers_count: Optional[int] = None
    watchers_count: Optional[int] = None
    forks_count: Optional[int] = None


def sparse_profile_fields(body: ProfileUpsert) -> Dict[str, Any]:
    """Collect the top-level profile fields that were actually supplied."""
    data = body.model_dump()
    return {field: data[field] for field in PROFILE_FIELDS if data.get(field)}


def sparse_social_fields(body: ProfileUpsert) -> Dict[str, str]:
    """Collect the social links that were actually supplied."""
    data = body.model_dump()
    return {field: data[field] for field in SOCIAL_FIELDS if data.get(field)}


# Attribute name -> wire name for request fields whose JSON key is not a
# valid Python identifier ("from", "to")
REQUEST_FIELD_ALIASES: Dict[str, str] = {
    name: field.alias
    for model in (ExperienceCreate, EducationCreate)
    for name, field in model.model_fields.items()
    if field.alias
}
