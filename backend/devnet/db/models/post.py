"""
Post model with embedded likes and comments.
"""
from sqlalchemy import Column, String, Text, JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB

from ..base import Base, UUIDMixin, TimestampMixin, VersionedMixin

JSONDocument = JSON().with_variant(JSONB(), "postgresql")


class Post(Base, UUIDMixin, TimestampMixin, VersionedMixin):
    """
    A post by an account.

    ``name`` and ``avatar`` are a snapshot of the author taken when the post
    is created; they are never refreshed afterwards. The same holds for the
    author fields of each comment.

    ``user_id`` is a plain reference without a foreign key: deleting an
    account leaves its posts in place.
    """
    __tablename__ = "posts"

    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    text = Column(Text, nullable=False)
    name = Column(String(255))
    avatar = Column(String)
    likes = Column(JSONDocument, nullable=False, default=list)
    comments = Column(JSONDocument, nullable=False, default=list)
