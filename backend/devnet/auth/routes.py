"""
Authentication routes: email/password login and the current-account probe.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from devnet.auth.dependencies import get_current_user
from devnet.core.errors import InvalidCredentials
from devnet.core.security import create_access_token, verify_password
from devnet.crud import user as user_crud
from devnet.db.models.user import User
from devnet.db.session import get_db
from devnet.schemas.auth import LoginRequest, TokenResponse, UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.get("", response_model=UserRead, summary="Get the authenticated account")
async def read_current_user(current_user: User = Depends(get_current_user)):
    """Return the public fields of the account the token belongs to."""
    return current_user


@router.post("/login", response_model=TokenResponse, summary="Login with Email/Password")
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Authenticate with email and password and receive a bearer token.

    An unknown email and a wrong password produce the same error so the
    endpoint cannot be used to discover which emails are registered.

    Args:
        credentials: Email and password
        db: Database session

    Returns:
        TokenResponse with the signed token

    Raises:
        InvalidCredentials: 400 if the email is unknown or the password is wrong
    """
    logger.info(f"[AUTH] Login attempt for email: {credentials.email}")

    user = await user_crud.get_user_by_email(db, credentials.email)
    if user is None:
        logger.info(f"[AUTH] Login failed, unknown email: {credentials.email}")
        raise InvalidCredentials()

    if not verify_password(credentials.password, user.password_hash):
        logger.info(f"[AUTH] Login failed, wrong password for user: {user.id}")
        raise InvalidCredentials()

    logger.info(f"[AUTH] Login succeeded for user: {user.id}")
    return TokenResponse(token=create_access_token(user.id))
