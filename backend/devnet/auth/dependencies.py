"""
Authentication dependencies for FastAPI.
"""
import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer, APIKeyHeader
from sqlalchemy.ext.asyncio import AsyncSession

from devnet.core import security
from devnet.core.errors import Unauthorized
from devnet.crud import user as user_crud
from devnet.db.models.user import User
from devnet.db.session import get_db

# Configure logging
logger = logging.getLogger(__name__)

# OAuth2 scheme for token authentication
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="api/auth/login",
    # Missing tokens are reported by get_current_user_id with our own error body
    auto_error=False
)

# Legacy header still sent by older clients
LEGACY_TOKEN_HEADER_NAME = "x-auth-token"
legacy_token_scheme = APIKeyHeader(name=LEGACY_TOKEN_HEADER_NAME, auto_error=False)


async def get_current_user_id(
    bearer_token: Optional[str] = Depends(oauth2_scheme),
    legacy_token: Optional[str] = Depends(legacy_token_scheme),
) -> UUID:
    """
    Verify the request's token and return the account id it identifies.

    Args:
        bearer_token: Token from ``Authorization: Bearer``
        legacy_token: Token from the ``x-auth-token`` header

    Returns:
        UUID: The authenticated account id

    Raises:
        Unauthorized: If no token is present or it fails verification
    """
    token = bearer_token or legacy_token
    if not token:
        raise Unauthorized("No token, authorization denied")

    user_id = security.verify_token(token)
    if user_id is None:
        raise Unauthorized("Token is not valid")

    return user_id


async def get_current_user(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Load the authenticated account.

    Raises:
        Unauthorized: If the token refers to an account that no longer exists
    """
    user = await user_crud.get_user(db, user_id)
    if user is None:
        logger.warning(f"[AUTH] Token for deleted account {user_id}")
        raise Unauthorized("Token is not valid")
    return user
