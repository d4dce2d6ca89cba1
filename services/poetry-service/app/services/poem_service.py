"""
Poem Service
Posting, listing, deleting and liking poems
"""

from typing import List, Dict
import logging

from app.utils.database import PoetryDatabase, DATABASE_ERRORS, affected_rows
from app.utils.exceptions import StoreError

logger = logging.getLogger(__name__)


class PoemService:
    """Poem and like operations"""

    def __init__(self, db: PoetryDatabase):
        self.db = db

    async def create_poem(self, title: str, content: str, user_id: int) -> int:
        """
        Insert a poem owned by user_id

        The owner is taken as given; a nonexistent user fails on the foreign key.
        """
        try:
            poem_id = await self.db.fetchval(
                "INSERT INTO poems(title, content, user_id) VALUES ($1, $2, $3) RETURNING id",
                title,
                content,
                user_id
            )
        except DATABASE_ERRORS as e:
            logger.error(f"Create poem failed for user {user_id}: {e}")
            raise StoreError() from e

        logger.info(f"Poem {poem_id} created by user {user_id}")
        return poem_id

    async def list_poems(self) -> List[Dict]:
        """All poems with their author's name, newest first"""
        query = """
        SELECT poems.id, poems.title, poems.content, poems.user_id,
               poems.created_at, users.name
        FROM poems
        JOIN users ON poems.user_id = users.id
        ORDER BY poems.created_at DESC
        """
        try:
            return await self.db.fetch(query)
        except DATABASE_ERRORS as e:
            logger.error(f"List poems failed: {e}")
            raise StoreError() from e

    async def list_user_poems(self, user_id: int) -> List[Dict]:
        """Poems owned by one user, newest first"""
        try:
            return await self.db.fetch(
                "SELECT id, title, content FROM poems WHERE user_id = $1 ORDER BY created_at DESC",
                user_id
            )
        except DATABASE_ERRORS as e:
            logger.error(f"List poems for user {user_id} failed: {e}")
            raise StoreError("Poems load failed") from e

    async def delete_poem(self, poem_id: int) -> bool:
        """
        Delete a poem together with its likes and reports

        All three statements share one transaction.

        Returns:
            bool: True if a poem row was removed
        """
        try:
            async with self.db.transaction() as conn:
                await conn.execute("DELETE FROM likes WHERE poem_id = $1", poem_id)
                await conn.execute("DELETE FROM reports WHERE poem_id = $1", poem_id)
                status = await conn.execute("DELETE FROM poems WHERE id = $1", poem_id)
        except DATABASE_ERRORS as e:
            logger.error(f"Delete poem {poem_id} failed: {e}")
            raise StoreError() from e

        deleted = affected_rows(status) > 0
        logger.info(f"Poem {poem_id} delete {'applied' if deleted else 'matched no rows'}")
        return deleted

    async def like_poem(self, poem_id: int, user_id: int) -> bool:
        """
        Record that user_id likes poem_id

        Returns:
            bool: False when the like already existed
        """
        try:
            status = await self.db.execute(
                "INSERT INTO likes(poem_id, user_id) VALUES ($1, $2) ON CONFLICT DO NOTHING",
                poem_id,
                user_id
            )
        except DATABASE_ERRORS as e:
            logger.error(f"Like poem {poem_id} by user {user_id} failed: {e}")
            raise StoreError() from e

        return affected_rows(status) > 0

    async def like_counts(self) -> List[Dict]:
        """Like count per poem; poems without likes are omitted"""
        query = """
        SELECT poem_id, COUNT(*) AS like_count
        FROM likes
        GROUP BY poem_id
        """
        try:
            return await self.db.fetch(query)
        except DATABASE_ERRORS as e:
            logger.error(f"Like counts failed: {e}")
            raise StoreError() from e
