"""
CRUD operations for profiles.
"""
import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from devnet.crud import embedded
from devnet.db.models.profile import Profile
from devnet.db.models.user import User

logger = logging.getLogger(__name__)

# Embedded list columns that can be added to / removed from by entry id
ENTRY_LISTS = ("experience", "education")


async def get_profile_by_user(db: AsyncSession, user_id: UUID) -> Optional[Profile]:
    """
    Get the profile owned by an account.

    Args:
        db: Database session
        user_id: Owning account id

    Returns:
        Optional[Profile]: Profile if found, None otherwise
    """
    result = await db.execute(select(Profile).where(Profile.user_id == user_id))
    return result.unique().scalar_one_or_none()


async def get_profiles(db: AsyncSession) -> List[Profile]:
    result = await db.execute(select(Profile).order_by(Profile.created_at))
    return list(result.unique().scalars().all())


async def upsert_profile(
    db: AsyncSession,
    user: User,
    fields: Dict[str, Any],
    social: Dict[str, str],
) -> Profile:
    """
    Merge the supplied fields into the account's profile, creating it if needed.

    Args:
        db: Database session
        user: Owning account
        fields: Top-level fields to set (already filtered to those supplied)
        social: Social links to set (already filtered to those supplied)

    Returns:
        Profile: The created or updated profile
    """
    profile = await get_profile_by_user(db, user.id)

    if profile is None:
        logger.info(f"[PROFILE] Creating profile for user {user.id}")
        profile = Profile(user=user, social=social, experience=[], education=[], **fields)
        db.add(profile)
    else:
        logger.info(f"[PROFILE] Updating profile {profile.id} for user {user.id}: {sorted(fields)}")
        for field, value in fields.items():
            setattr(profile, field, value)
        if social:
            profile.social = {**(profile.social or {}), **social}

    await db.flush()
    return profile


async def add_entry(db: AsyncSession, profile: Profile, list_name: str, entry: Dict[str, Any]) -> Profile:
    """
    Prepend an experience/education entry, assigning it a fresh id.
    """
    if list_name not in ENTRY_LISTS:
        raise ValueError(f"Unknown profile list: {list_name}")

    entry = {"id": embedded.new_entry_id(), **entry}
    setattr(profile, list_name, embedded.prepend(getattr(profile, list_name), entry))
    await db.flush()
    return profile


async def remove_entry(db: AsyncSession, profile: Profile, list_name: str, entry_id: str) -> bool:
    """
    Remove an experience/education entry by its id.

    Returns:
        bool: False when no entry has that id (the list is left untouched)
    """
    if list_name not in ENTRY_LISTS:
        raise ValueError(f"Unknown profile list: {list_name}")

    entries = getattr(profile, list_name)
    if embedded.find_by_id(entries, entry_id) is None:
        return False

    setattr(profile, list_name, embedded.without_id(entries, entry_id))
    await db.flush()
    return True
