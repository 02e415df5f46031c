"""
Pydantic schemas for the application.
"""
from devnet.schemas import auth
from devnet.schemas import profile
from devnet.schemas import post

__all__ = ["auth", "profile", "post"]
