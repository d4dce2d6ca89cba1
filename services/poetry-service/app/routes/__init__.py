"""
API routes for poetry service
"""

from . import health, auth, poems, likes, reports, users

__all__ = ["health", "auth", "poems", "likes", "reports", "users"]
