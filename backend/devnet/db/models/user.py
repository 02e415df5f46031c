"""
Account model for authentication.
"""
from sqlalchemy import Column, String

from ..base import Base, UUIDMixin, TimestampMixin


class User(Base, UUIDMixin, TimestampMixin):
    """
    Account record. The password hash never leaves the server.
    """
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    avatar = Column(String)
    password_hash = Column(String(255), nullable=False)
