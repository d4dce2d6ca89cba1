"""
Admin Service
User listing, user deletion and profile statistics
"""

from typing import List, Dict
import logging

from app.utils.database import PoetryDatabase, DATABASE_ERRORS, affected_rows
from app.utils.exceptions import StoreError, UserNotFoundError

logger = logging.getLogger(__name__)

# Child rows first, the user row last
DELETE_USER_STATEMENTS = (
    "DELETE FROM likes WHERE user_id = $1",
    "DELETE FROM likes WHERE poem_id IN (SELECT id FROM poems WHERE user_id = $1)",
    "DELETE FROM reports WHERE reported_by = $1",
    "DELETE FROM reports WHERE poem_id IN (SELECT id FROM poems WHERE user_id = $1)",
    "DELETE FROM poems WHERE user_id = $1",
    "DELETE FROM users WHERE id = $1",
)


class AdminService:
    """User administration"""

    def __init__(self, db: PoetryDatabase):
        self.db = db

    async def list_users(self) -> List[Dict]:
        """Every user without the password hash"""
        try:
            return await self.db.fetch("SELECT id, name, email, role FROM users ORDER BY id")
        except DATABASE_ERRORS as e:
            logger.error(f"List users failed: {e}")
            raise StoreError() from e

    async def delete_user(self, user_id: int) -> bool:
        """
        Delete a user and everything that depends on them

        Removes the likes they gave, the reports they filed, likes and reports on
        their poems, their poems and finally the user, in one transaction.

        Returns:
            bool: True if a user row was removed
        """
        try:
            async with self.db.transaction() as conn:
                for statement in DELETE_USER_STATEMENTS:
                    status = await conn.execute(statement, user_id)
        except DATABASE_ERRORS as e:
            logger.error(f"Delete user {user_id} failed: {e}")
            raise StoreError() from e

        return affected_rows(status) > 0

    async def get_profile(self, user_id: int) -> Dict:
        """
        Public user fields with authored poem count and received like count

        Raises:
            UserNotFoundError: No user has this id
            StoreError: Database failure
        """
        try:
            user = await self.db.fetchrow(
                "SELECT id, name, email FROM users WHERE id = $1",
                user_id
            )
            if not user:
                raise UserNotFoundError()

            poem_count = await self.db.fetchval(
                "SELECT COUNT(*) FROM poems WHERE user_id = $1",
                user_id
            )
            like_count = await self.db.fetchval(
                """
                SELECT COUNT(*)
                FROM likes
                JOIN poems ON likes.poem_id = poems.id
                WHERE poems.user_id = $1
                """,
                user_id
            )
        except DATABASE_ERRORS as e:
            logger.error(f"Profile error for user {user_id}: {e}")
            raise StoreError("Profile load failed") from e

        return {
            'user': user,
            'poems': poem_count or 0,
            'likes': like_count or 0
        }
