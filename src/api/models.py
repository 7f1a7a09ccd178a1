"""Pydantic models for API request/response.

UserResponse is the only shape a User may take outside the service; it has
no password field. The auth endpoints currently return no user data.
"""

from typing import Optional
from pydantic import BaseModel, Field

from domain.model.user import User


class Credentials(BaseModel):
    """Phone/password pair accepted by both auth endpoints."""
    phone: str = Field(..., min_length=1, description="Phone number, compared as-is")
    password: str = Field(..., min_length=1)


class RegisterRequest(Credentials):
    """Request model for user registration."""


class LoginRequest(Credentials):
    """Request model for user login."""


class RegisterResponse(BaseModel):
    """Response model for a successful registration."""
    message: str = "User registered successfully"
    user_id: str = Field(..., serialization_alias="userId", description="Generated user ID")


class UserResponse(BaseModel):
    """Outward view of a user. Never carries the password digest."""
    id: str
    phone: str
    first_name: str = Field("", serialization_alias="firstName")
    last_name: str = Field("", serialization_alias="lastName")
    avatar_logo: Optional[str] = Field(None, serialization_alias="avatarLogo")
    amount: float = 0.0
    balance: float = 0.0
    point: int = 0
    role: str

    @classmethod
    def from_user(cls, user: User) -> 'UserResponse':
        return cls(
            id=user.id,
            phone=user.phone,
            first_name=user.first_name,
            last_name=user.last_name,
            avatar_logo=user.avatar_logo,
            amount=user.amount,
            balance=user.balance,
            point=user.point,
            role=user.role,
        )
