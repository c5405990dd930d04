from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from barcode_inventory.database import get_db
from barcode_inventory.models.user import User
from barcode_inventory.services.auth_service import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """
    Dependency resolving the `Authorization: Bearer <token>` header to a user.

    Raises Unauthorized before the route handler runs when the token is
    missing or invalid.
    """
    token = credentials.credentials if credentials else None
    return AuthService(db).authenticate(token)
