import hashlib
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import jwt, JWTError
from passlib.context import CryptContext

from .config import settings

logger = logging.getLogger(__name__)

# --- Hashing Setup ---
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
# --- End Hashing Setup ---


def gravatar_url(email: str, size: int = 200) -> str:
    """Build the Gravatar avatar URL for an email (rating pg, mystery-man fallback)."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"https://www.gravatar.com/avatar/{digest}?s={size}&r=pg&d=mm"


def create_access_token(user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign a bearer token identifying the given account.

    Args:
        user_id: Account id embedded as ``user.id`` in the payload
        expires_delta: Lifetime override, defaults to JWT_EXPIRATION_SECONDS

    Returns:
        str: Encoded JWT
    """
    if expires_delta is None:
        expires_delta = timedelta(seconds=settings.JWT_EXPIRATION_SECONDS)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {"user": {"id": str(user_id)}, "exp": expire}
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> Optional[UUID]:
    """
    Decode a bearer token and return the account id it carries.

    Returns None when the signature, expiry or payload shape is invalid.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.info(f"[AUTH] Token rejected: {e}")
        return None

    user = payload.get("user")
    if not isinstance(user, dict) or not user.get("id"):
        return None
    try:
        return UUID(str(user["id"]))
    except ValueError:
        return None
