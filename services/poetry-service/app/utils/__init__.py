"""
Utility modules for poetry service
"""

from .database import PoetryDatabase
from .exceptions import (
    PoetryServiceError, DuplicateEmailError, UserNotFoundError,
    InvalidCredentialsError, StoreError
)

__all__ = [
    "PoetryDatabase",
    "PoetryServiceError",
    "DuplicateEmailError",
    "UserNotFoundError",
    "InvalidCredentialsError",
    "StoreError"
]
