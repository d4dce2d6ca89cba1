"""
Data models for poetry service
"""

from .user import User, DEFAULT_ROLE, ADMIN_ROLE

__all__ = ["User", "DEFAULT_ROLE", "ADMIN_ROLE"]
