"""
Validation utilities for authentication and user data.
"""
import re
from typing import List, Tuple
from uuid import UUID


def validate_email(email: str) -> Tuple[bool, str]:
    """
    Validate email format using basic regex.

    Args:
        email: Email address to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    # Basic email regex pattern
    email_pattern = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'

    if not email:
        return False, "Please include a valid email"

    if not re.match(email_pattern, email.strip()):
        return False, "Please include a valid email"

    return True, ""


def validate_password(password: str) -> Tuple[bool, str]:
    """
    Validate password strength.

    Args:
        password: Password to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not password or len(password) < 6:
        return False, "Please enter a password with 6 or more characters"

    return True, ""


def split_skills(skills: str) -> List[str]:
    """
    Turn a comma-separated skills string into a trimmed, ordered list.

    "node, react , css" -> ["node", "react", "css"]
    """
    return [skill.strip() for skill in skills.split(",") if skill.strip()]


def parse_object_id(value: str) -> UUID | None:
    """Parse a path identity, returning None when it is malformed."""
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        return None
