from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from barcode_inventory.database import get_db
from barcode_inventory.services.auth_service import AuthService
from barcode_inventory.schemas.auth import RegisterRequest, LoginRequest, AuthResponse

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a user account and receive a bearer token valid for 7 days."
)
def register(
    data: RegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a user.

    - **name**: Display name (required)
    - **email**: Unique email address (required)
    - **password**: At least 6 characters (required)
    """
    return AuthService(db).register(data)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Log in",
    description="Exchange email and password for a fresh bearer token."
)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db)
):
    return AuthService(db).login(data)
