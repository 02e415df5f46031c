"""
Database session management module.

The engine is created once per process by the application lifespan and kept
on ``app.state``; request handlers receive sessions through ``get_db``.
"""
import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .base import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create the async engine for the configured database.
    SQLite (used by the test suite) does not take the pool sizing options.
    """
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url)

    return create_async_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        pool_timeout=30,
        pool_recycle=1800,
    )


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create tables if they don't exist."""
    # Importing the models registers them on Base.metadata
    from . import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session.
    Handles commit on success and rollback on failure.

    Yields:
        AsyncSession: Database session
    """
    session_factory = request.app.state.sessionmaker
    async with session_factory() as session:
        try:
            yield session
            # If the request handler completed successfully, commit the transaction
            await session.commit()
        except Exception:
            # If any exception occurred during the request handling, rollback
            await session.rollback()
            raise # Re-raise the exception so FastAPI can handle it
