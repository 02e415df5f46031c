"""
CRUD operations for accounts.
"""
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete

from devnet.db.models.user import User
from devnet.db.models.profile import Profile


async def get_user(db: AsyncSession, user_id: UUID) -> Optional[User]:
    return await db.get(User, user_id)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """
    Get an account by its (normalised) email.

    Args:
        db: Database session
        email: Lower-cased, trimmed email

    Returns:
        Optional[User]: Account if found, None otherwise
    """
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, name: str, email: str, password_hash: str, avatar: Optional[str]) -> User:
    db_user = User(name=name, email=email, password_hash=password_hash, avatar=avatar)
    db.add(db_user)
    await db.flush()
    return db_user


async def delete_user(db: AsyncSession, user_id: UUID) -> None:
    """
    Delete an account together with its profile.

    Posts written by the account are not removed.
    """
    # TODO: remove the account's posts (and its likes/comments on other posts) as part of account deletion
    await db.execute(delete(Profile).where(Profile.user_id == user_id))
    await db.execute(delete(User).where(User.id == user_id))
    await db.flush()
