"""
Business logic services for poetry service
"""

from .auth_service import AuthService
from .poem_service import PoemService
from .moderation_service import ModerationService
from .admin_service import AdminService

__all__ = ["AuthService", "PoemService", "ModerationService", "AdminService"]
