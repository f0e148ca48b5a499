"""User registration and session schemas."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from staydesk.schemas.base import BaseSchema, IDMixin, TimestampMixin
from staydesk.models.enums import UserRole


class UserCreate(BaseSchema):
    """Register a dashboard user."""

    username: str = Field(..., min_length=3, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    role: UserRole = UserRole.STAFF
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)


class UserResponse(BaseSchema, IDMixin, TimestampMixin):
    """User as exposed over the API; never carries the password hash."""

    username: str
    email: str
    role: UserRole
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None


class LoginRequest(BaseSchema):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseSchema):
    token: str
    expires_at: datetime
    user: UserResponse
