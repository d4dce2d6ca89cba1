"""
User data schemas for Dead Poets

Pydantic models for signup, login and user listings.
"""

from pydantic import BaseModel, Field
from enum import Enum


class UserRole(str, Enum):
    """User role enumeration"""
    USER = "user"
    ADMIN = "admin"


class UserSignupSchema(BaseModel):
    """Schema for creating a new user"""
    name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=255)
    password: str


class UserLoginSchema(BaseModel):
    """Schema for user login"""
    email: str
    password: str


class UserResponseSchema(BaseModel):
    """Schema for user API responses (password never included)"""
    id: int
    name: str
    email: str
    role: str = UserRole.USER.value

    class Config:
        from_attributes = True


class ProfileUserSchema(BaseModel):
    """Public profile fields"""
    id: int
    name: str
    email: str


class UserProfileSchema(BaseModel):
    """Schema for the profile page: user plus authored poem and received like counts"""
    user: ProfileUserSchema
    poems: int = 0
    likes: int = 0
