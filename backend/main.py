"""
Main module for the FastAPI application.
"""
import logging
import os
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devnet.__version__ import __version__
from devnet.core.config import settings
from devnet.core.errors import register_exception_handlers
from devnet.db.session import build_engine, build_sessionmaker, init_models
from devnet.user.routes import router as user_router
from devnet.auth.routes import router as auth_router
from devnet.api.v1.profiles import router as profiles_router
from devnet.api.v1.posts import router as posts_router

# Setup logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# Lifespan event handler
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan event handler - runs on startup and shutdown.

    Acquires the database engine and the outbound HTTP client once for the
    whole process. A database that cannot be reached aborts startup.
    """
    # Startup
    engine = build_engine(settings.DATABASE_URL)
    try:
        await init_models(engine)
    except Exception as e:
        logger.critical(f"[STARTUP] Database connection failed: {e}")
        await engine.dispose()
        raise

    logger.info("[STARTUP] Database connected")
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)
    app.state.http_client = httpx.AsyncClient(timeout=settings.GITHUB_TIMEOUT)

    yield

    # Shutdown
    logger.info("[SHUTDOWN] Closing database engine and HTTP client")
    await app.state.http_client.aclose()
    await engine.dispose()


app = FastAPI(
    title="DevNet API",
    description="Accounts, developer profiles and posts",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
if settings.CORS_ORIGINS:
    origins = settings.CORS_ORIGINS if isinstance(settings.CORS_ORIGINS, list) else [settings.CORS_ORIGINS]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

# Include routers
app.include_router(user_router, prefix="/api")
app.include_router(auth_router, prefix="/api")
app.include_router(profiles_router, prefix="/api")
app.include_router(posts_router, prefix="/api")


@app.get("/")
async def root():
    """
    Root endpoint for health checks.
    """
    return {"message": "DevNet API is running"}


@app.get("/health")
async def health():
    """
    Health check endpoint.
    """
    return {"status": "ok"}


@app.get("/version", tags=["health"])
async def get_version():
    """
    Get API version and feature flags.
    """
    from devnet.core.version import get_version_info
    return get_version_info()


if __name__ == "__main__":
    """
    Run the application directly.
    """
    import uvicorn

    port = int(os.getenv("API_PORT", settings.API_PORT))
    host = os.getenv("API_HOST", settings.API_HOST)

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
    )
