"""
API endpoints for developer profiles.
"""
import logging
from typing import List
from uuid import UUID

import httpx
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devnet.api.dependencies import get_github_service
from devnet.auth.dependencies import get_current_user, get_current_user_id
from devnet.core.errors import Conflict, NotFound, ServerError
from devnet.core.validators import parse_object_id, split_skills
from devnet.crud import profile as profile_crud
from devnet.crud import user as user_crud
from devnet.db.models.user import User
from devnet.db.session import get_db
from devnet.github.service import GithubReposService, GithubUserNotFound
from devnet.schemas.post import MessageResponse
from devnet.schemas.profile import (
    EducationCreate,
    ExperienceCreate,
    GithubRepo,
    ProfileRead,
    ProfileUpsert,
    sparse_profile_fields,
    sparse_social_fields,
)

# Configure logger
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profiles"])


async def _own_profile(db: AsyncSession, user_id: UUID):
    profile = await profile_crud.get_profile_by_user(db, user_id)
    if profile is None:
        raise NotFound("There is no profile for this user")
    return profile


@router.get("/me", response_model=ProfileRead)
async def read_my_profile(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Get the authenticated account's profile."""
    return await _own_profile(db, user_id)


@router.post("", response_model=ProfileRead)
async def upsert_profile(
    body: ProfileUpsert,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Create or update the authenticated account's profile.

    This is a merge: fields missing from the body keep their stored value.
    ``skills`` is a comma-separated string stored as a trimmed list.
    """
    fields = sparse_profile_fields(body)
    fields["skills"] = split_skills(body.skills)
    social = sparse_social_fields(body)

    try:
        return await profile_crud.upsert_profile(db, current_user, fields, social)
    except IntegrityError:
        # Lost a race with a concurrent first upsert for the same account
        logger.info(f"[PROFILE] Concurrent profile creation for user {current_user.id}")
        raise Conflict()


@router.get("", response_model=List[ProfileRead])
async def list_profiles(db: AsyncSession = Depends(get_db)):
    """Get all profiles. Public."""
    return await profile_crud.get_profiles(db)


@router.get("/user/{user_id}", response_model=ProfileRead)
async def read_profile_by_user(user_id: str, db: AsyncSession = Depends(get_db)):
    """
    Get the profile of an account. Public.

    A malformed id is answered like an unknown one.
    """
    owner_id = parse_object_id(user_id)
    if owner_id is None:
        raise NotFound("Profile not found")

    profile = await profile_crud.get_profile_by_user(db, owner_id)
    if profile is None:
        raise NotFound("Profile not found")
    return profile


@router.delete("", response_model=MessageResponse)
async def delete_account(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete the authenticated account and its profile."""
    await user_crud.delete_user(db, user_id)
    logger.info(f"[PROFILE] Deleted account and profile for user {user_id}")
    return MessageResponse(msg="User deleted")


@router.put("/experience", response_model=ProfileRead)
async def add_experience(
    body: ExperienceCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Add an experience entry at the top of the list."""
    profile = await _own_profile(db, user_id)
    entry = body.model_dump(mode="json", by_alias=True)
    return await profile_crud.add_entry(db, profile, "experience", entry)


@router.delete("/experience/{exp_id}", response_model=ProfileRead)
async def delete_experience(
    exp_id: str,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Remove one of the authenticated account's experience entries."""
    profile = await _own_profile(db, user_id)
    if not await profile_crud.remove_entry(db, profile, "experience", exp_id):
        raise NotFound("Experience not found")
    return profile


@router.put("/education", response_model=ProfileRead)
async def add_education(
    body: EducationCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Add an education entry at the top of the list."""
    profile = await _own_profile(db, user_id)
    entry = body.model_dump(mode="json", by_alias=True)
    return await profile_crud.add_entry(db, profile, "education", entry)


@router.delete("/education/{edu_id}", response_model=ProfileRead)
async def delete_education(
    edu_id: str,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Remove one of the authenticated account's education entries."""
    profile = await _own_profile(db, user_id)
    if not await profile_crud.remove_entry(db, profile, "education", edu_id):
        raise NotFound("Education not found")
    return profile


@router.get("/github/{username}", response_model=List[GithubRepo])
async def read_github_repos(
    username: str,
    github: GithubReposService = Depends(get_github_service),
):
    """Proxy the user's latest GitHub repositories. Public."""
    try:
        return await github.list_repos(username)
    except GithubUserNotFound:
        raise NotFound("No Github profile found")
    except httpx.HTTPError as e:
        logger.error(f"[GITHUB] Request for {username} failed: {e}")
        raise ServerError()
