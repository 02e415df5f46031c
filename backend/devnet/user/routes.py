"""
Account registration.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devnet.core.errors import UserAlreadyExists
from devnet.core.security import create_access_token, get_password_hash, gravatar_url
from devnet.crud import user as user_crud
from devnet.db.session import get_db
from devnet.schemas.auth import RegisterRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=TokenResponse, summary="Register an account")
async def register(
    registration: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Create an account and return a bearer token for it.

    The avatar is the Gravatar image for the email address.

    Raises:
        UserAlreadyExists: 400 if the email is already registered
    """
    existing = await user_crud.get_user_by_email(db, registration.email)
    if existing is not None:
        logger.info(f"[USERS] Registration rejected, email already registered: {registration.email}")
        raise UserAlreadyExists()

    try:
        user = await user_crud.create_user(
            db,
            name=registration.name,
            email=registration.email,
            password_hash=get_password_hash(registration.password),
            avatar=gravatar_url(registration.email),
        )
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        raise UserAlreadyExists()
    logger.info(f"[USERS] New account created: {user.id}")

    return TokenResponse(token=create_access_token(user.id))
