from pydantic import BaseModel, EmailStr, Field, ConfigDict


class RegisterRequest(BaseModel):
    """Schema for user registration."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(..., description="Login email")
    password: str = Field(..., min_length=6, max_length=128, description="Password (min 6 characters)")


class LoginRequest(BaseModel):
    # Plain str so a malformed email fails as bad credentials rather than bad input
    email: str
    password: str


class UserPublic(BaseModel):
    """Public user fields; the password hash is never exposed."""
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserPublic
