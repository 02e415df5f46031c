"""
Developer profile model.
"""
from sqlalchemy import Column, String, Text, ForeignKey, JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from ..base import Base, UUIDMixin, TimestampMixin, VersionedMixin

# JSONB on PostgreSQL, plain JSON elsewhere
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


class Profile(Base, UUIDMixin, TimestampMixin, VersionedMixin):
    """
    One profile per account.

    ``experience`` and ``education`` are ordered lists of embedded entries,
    newest first. Each entry has its own ``id`` so it can be removed on its own.
    """
    __tablename__ = "profiles"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)
    company = Column(String(255))
    website = Column(String(255))
    location = Column(String(255))
    bio = Column(Text)
    status = Column(String(255), nullable=False)
    githubusername = Column(String(255))
    skills = Column(JSONDocument, nullable=False, default=list)
    social = Column(JSONDocument, nullable=False, default=dict)
    experience = Column(JSONDocument, nullable=False, default=list)
    education = Column(JSONDocument, nullable=False, default=list)

    # Relationships
    user = relationship("User", lazy="joined")
