"""
API endpoints for posts, likes and comments.
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from devnet.auth.dependencies import get_current_user, get_current_user_id
from devnet.core.errors import Forbidden, NotFound
from devnet.core.validators import parse_object_id
from devnet.crud import post as post_crud
from devnet.db.models.post import Post
from devnet.db.models.user import User
from devnet.db.session import get_db
from devnet.schemas.post import CommentCreate, CommentRead, LikeRead, MessageResponse, PostCreate, PostRead

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/posts",
    tags=["posts"],
)


async def _load_post(db: AsyncSession, post_id: str) -> Post:
    """Fetch a post by its path id; malformed and unknown ids are both 404."""
    parsed = parse_object_id(post_id)
    post = await post_crud.get_post(db, parsed) if parsed is not None else None
    if post is None:
        raise NotFound("Post not found")
    return post


@router.post("", response_model=PostRead)
async def create_post(
    body: PostCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a post as the authenticated account."""
    post = await post_crud.create_post(db, current_user, body.text)
    logger.info(f"[POSTS] User {current_user.id} created post {post.id}")
    return post


@router.get("", response_model=List[PostRead])
async def list_posts(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """All posts, newest first."""
    return await post_crud.get_posts(db)


@router.get("/{post_id}", response_model=PostRead)
async def read_post(
    post_id: str,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await _load_post(db, post_id)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete a post. Only its author may do so."""
    post = await _load_post(db, post_id)

    # check if post belongs to user
    if post.user_id != user_id:
        logger.warning(f"[POSTS] User {user_id} tried to delete post {post.id} owned by {post.user_id}")
        raise Forbidden()

    await post_crud.delete_post(db, post)
    return MessageResponse(msg="Post removed")


@router.put("/like/{post_id}", response_model=List[LikeRead])
async def toggle_like(
    post_id: str,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Like a post, or remove the like if the account already liked it.

    Returns the resulting like list.
    """
    post = await _load_post(db, post_id)
    return await post_crud.toggle_like(db, post, user_id)


@router.post("/{post_id}/comment", response_model=List[CommentRead])
async def add_comment(
    post_id: str,
    body: CommentCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Comment on a post. Returns the resulting comment list."""
    post = await _load_post(db, post_id)
    return await post_crud.add_comment(db, post, current_user, body.text)


@router.delete("/{post_id}/comment/{comment_id}", response_model=List[CommentRead])
async def delete_comment(
    post_id: str,
    comment_id: str,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete a comment. Only the comment's author may do so, and only that
    comment is removed even if the author wrote several on the post.
    """
    post = await _load_post(db, post_id)

    comment = post_crud.get_comment(post, comment_id)
    if comment is None:
        raise NotFound("Comment does not exist")

    if comment["user"] != str(user_id):
        raise Forbidden()

    return await post_crud.remove_comment(db, post, comment["id"])
