from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import Optional
import logging

import jwt

from barcode_inventory.models.user import User
from barcode_inventory.schemas.auth import RegisterRequest, LoginRequest, AuthResponse, UserPublic
from barcode_inventory.services.exceptions import Conflict, Unauthorized
from barcode_inventory.utils.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """
    Service class for user registration, login and token verification.

    Unknown emails and wrong passwords fail with the same message so the
    response does not reveal whether an account exists.
    """

    def __init__(self, db: Session):
        self.db = db

    def register(self, data: RegisterRequest) -> AuthResponse:
        """
        Register a new user and issue a token.

        Raises:
            Conflict: If a user with the same email already exists
        """
        email = data.email.lower()

        if self._get_by_email(email):
            raise Conflict("User with this email already exists")

        user = User(
            name=data.name,
            email=email,
            password_hash=hash_password(data.password),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Concurrent registration with the same email
            self.db.rollback()
            raise Conflict("User with this email already exists")
        self.db.refresh(user)

        logger.info(f"User #{user.id} registered")
        return self._auth_response("User registered successfully", user)

    def login(self, data: LoginRequest) -> AuthResponse:
        """
        Authenticate a user by email and password.

        Raises:
            Unauthorized: If the email is unknown or the password is wrong
        """
        user = self._get_by_email(data.email.strip().lower())

        if not user or not verify_password(user.password_hash, data.password):
            logger.info("Failed login attempt")
            raise Unauthorized(INVALID_CREDENTIALS)

        return self._auth_response("Login successful", user)

    def authenticate(self, token: Optional[str]) -> User:
        """
        Resolve a bearer token to its user.

        Raises:
            Unauthorized: If the token is missing, invalid, expired, or its user is gone
        """
        if not token:
            raise Unauthorized("Authentication token is required")

        try:
            user_id = decode_access_token(token)
        except jwt.ExpiredSignatureError:
            raise Unauthorized("Token has expired")
        except jwt.InvalidTokenError:
            raise Unauthorized("Invalid token")

        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise Unauthorized("Invalid token")
        return user

    def _get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def _auth_response(self, message: str, user: User) -> AuthResponse:
        return AuthResponse(
            message=message,
            token=create_access_token(user.id),
            user=UserPublic.model_validate(user),
        )
