"""
CRUD operations for the application.
"""
from devnet.crud import user
from devnet.crud import profile
from devnet.crud import post

__all__ = ["user", "profile", "post"]
