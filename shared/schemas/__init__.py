"""
Shared data schemas for Dead Poets

Request and response models used by the poetry service.
"""

from .user import (
    UserRole, UserSignupSchema, UserLoginSchema, UserResponseSchema, UserProfileSchema
)
from .poem import PoemCreateSchema, PoemSchema, UserPoemSchema, LikeCreateSchema, LikeCountSchema
from .report import ReportCreateSchema, ReportSchema

__all__ = [
    "UserRole",
    "UserSignupSchema",
    "UserLoginSchema",
    "UserResponseSchema",
    "UserProfileSchema",
    "PoemCreateSchema",
    "PoemSchema",
    "UserPoemSchema",
    "LikeCreateSchema",
    "LikeCountSchema",
    "ReportCreateSchema",
    "ReportSchema",
]

__version__ = "1.0.0"
