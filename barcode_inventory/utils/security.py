from datetime import datetime, timedelta, timezone

import jwt
from werkzeug.security import generate_password_hash, check_password_hash

from barcode_inventory.config import get_settings


def hash_password(password: str) -> str:
    """Return a salted hash of the password."""
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    return check_password_hash(password_hash, password)


def create_access_token(user_id: int) -> str:
    """
    Issue a signed bearer token bound to a user id.

    Args:
        user_id: ID of the authenticated user

    Returns:
        Encoded JWT expiring after ACCESS_TOKEN_EXPIRE_DAYS
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> int:
    """
    Verify a bearer token and return the user id it was issued for.

    Raises:
        jwt.InvalidTokenError: If the token is malformed, tampered with or expired
    """
    settings = get_settings()
    payload = jwt.decode(
        token,
        settings.SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )
    try:
        return int(payload["sub"])
    except (TypeError, ValueError):
        raise jwt.InvalidTokenError("Token subject is not a user id")
