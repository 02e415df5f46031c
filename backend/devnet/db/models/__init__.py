"""
Import all models to ensure they are registered with SQLAlchemy.
"""
from ..base import Base
from .user import User
from .profile import Profile
from .post import Post
