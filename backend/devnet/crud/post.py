"""
CRUD operations for posts.
"""
import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from devnet.crud import embedded
from devnet.db.base import utcnow
from devnet.db.models.post import Post
from devnet.db.models.user import User

logger = logging.getLogger(__name__)


async def create_post(db: AsyncSession, author: User, text: str) -> Post:
    """
    Create a new post, snapshotting the author's name and avatar.

    Args:
        db: Database session
        author: Posting account
        text: Post body

    Returns:
        Post: Created post
    """
    db_post = Post(
        user_id=author.id,
        text=text,
        name=author.name,
        avatar=author.avatar,
        likes=[],
        comments=[],
    )
    db.add(db_post)
    # Flush to send changes to DB within the transaction
    await db.flush()
    return db_post


async def get_post(db: AsyncSession, post_id: UUID) -> Optional[Post]:
    """
    Get a post by ID.

    Args:
        db: Database session
        post_id: Post ID

    Returns:
        Optional[Post]: Post if found, None otherwise
    """
    result = await db.execute(select(Post).where(Post.id == post_id))
    return result.scalar_one_or_none()


async def get_posts(db: AsyncSession) -> List[Post]:
    """All posts, newest first."""
    result = await db.execute(select(Post).order_by(Post.created_at.desc()))
    return list(result.scalars().all())


async def delete_post(db: AsyncSession, post: Post) -> None:
    await db.delete(post)
    await db.flush()


async def toggle_like(db: AsyncSession, post: Post, user_id: UUID) -> List[Dict[str, Any]]:
    """
    Like the post, or take the like back if this account already liked it.

    Returns:
        The resulting like list, newest first
    """
    user_key = str(user_id)
    existing = embedded.find_by_user(post.likes, user_key)

    if existing is not None:
        logger.info(f"[POSTS] User {user_key} unliked post {post.id}")
        post.likes = embedded.without_id(post.likes, existing["id"])
    else:
        logger.info(f"[POSTS] User {user_key} liked post {post.id}")
        post.likes = embedded.prepend(post.likes, {"id": embedded.new_entry_id(), "user": user_key})

    await db.flush()
    return post.likes


async def add_comment(db: AsyncSession, post: Post, author: User, text: str) -> List[Dict[str, Any]]:
    """
    Prepend a comment carrying its own id and a snapshot of the author.

    Returns:
        The resulting comment list, newest first
    """
    comment = {
        "id": embedded.new_entry_id(),
        "user": str(author.id),
        "text": text,
        "name": author.name,
        "avatar": author.avatar,
        "date": utcnow().isoformat(),
    }
    post.comments = embedded.prepend(post.comments, comment)
    await db.flush()
    return post.comments


def get_comment(post: Post, comment_id: str) -> Optional[Dict[str, Any]]:
    return embedded.find_by_id(post.comments, comment_id)


async def remove_comment(db: AsyncSession, post: Post, comment_id: str) -> List[Dict[str, Any]]:
    """
    Remove exactly the comment with this id.

    Returns:
        The resulting comment list
    """
    post.comments = embedded.without_id(post.comments, comment_id)
    await db.flush()
    return post.comments
