"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from tripsplit.models.user import UserRole


class UserBase(BaseModel):
    """Base user schema."""
    username: str = Field(min_length=1, max_length=50)


class UserCreate(UserBase):
    """Schema for user registration."""
    password: str = Field(min_length=1)


class UserResponse(UserBase):
    """Schema for user response."""
    id: int
    is_admin: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RoleUpdate(BaseModel):
    """Schema for changing a user's role."""
    role: UserRole


class UserLogin(BaseModel):
    """Schema for user login."""
    username: str
    password: str


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
    is_admin: bool = False
