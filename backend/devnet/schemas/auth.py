"""
Schemas for registration, login and the authenticated account.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devnet.core.validators import validate_email, validate_password


def _normalize_email(value: Optional[str]) -> str:
    is_valid, message = validate_email(value or "")
    if not is_valid:
        raise ValueError(message)
    return value.strip().lower()


class LoginRequest(BaseModel):
    """Request model for email/password login."""
    email: Optional[str] = Field(None, validate_default=True, description="Account email address")
    password: Optional[str] = Field(None, validate_default=True, description="Account password")

    @field_validator("email")
    @classmethod
    def check_email(cls, v: Optional[str]) -> str:
        return _normalize_email(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("Password is required")
        return v


class RegisterRequest(BaseModel):
    """Request model for account registration."""
    name: Optional[str] = Field(None, validate_default=True, description="Display name")
    email: Optional[str] = Field(None, validate_default=True, description="Account email address")
    password: Optional[str] = Field(None, validate_default=True, description="Password, 6 characters or more")

    @field_validator("name")
    @classmethod
    def check_name(cls, v: Optional[str]) -> str:
        if not v or not v.strip():
            raise ValueError("Name is required")
        return v.strip()

    @field_validator("email")
    @classmethod
    def check_email(cls, v: Optional[str]) -> str:
        return _normalize_email(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v: Optional[str]) -> str:
        is_valid, message = validate_password(v or "")
        if not is_valid:
            raise ValueError(message)
        return v


class TokenResponse(BaseModel):
    token: str = Field(..., description="Bearer token for authenticated requests")


class UserRead(BaseModel):
    """Public account fields. The password hash is never part of this schema."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    avatar: Optional[str] = None
    date: datetime = Field(..., validation_alias="created_at")


class UserBrief(BaseModel):
    """Account fields joined into profiles."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    avatar: Optional[str] = None
