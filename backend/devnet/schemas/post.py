"""
Pydantic schemas for posts.
"""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TextBody(BaseModel):
    """Body shared by post and comment creation."""
    text: Optional[str] = Field(None, validate_default=True, description="Text content")

    @field_validator("text")
    @classmethod
    def check_text(cls, v: Optional[str]) -> str:
        if not v:
            raise ValueError("Text is required")
        return v


class PostCreate(TextBody):
    """Schema for creating a new post."""
    pass


class CommentCreate(TextBody):
    """Schema for commenting on a post."""
    pass


class LikeRead(BaseModel):
    id: str
    user: UUID


class CommentRead(BaseModel):
    """
    A comment. ``name`` and ``avatar`` are the author's values at the time
    the comment was written.
    """
    id: str
    user: UUID
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    date: datetime


class PostRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user: UUID = Field(..., validation_alias="user_id")
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    likes: List[LikeRead] = Field(default_factory=list)
    comments: List[CommentRead] = Field(default_factory=list)
    date: datetime = Field(..., validation_alias="created_at")


class MessageResponse(BaseModel):
    msg: str
