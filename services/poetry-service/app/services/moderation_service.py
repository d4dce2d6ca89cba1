"""
Moderation Service
Reporting poems and handling reports
"""

from typing import List, Dict, Optional
import logging

from app.utils.database import PoetryDatabase, DATABASE_ERRORS, affected_rows
from app.utils.exceptions import StoreError

logger = logging.getLogger(__name__)


class ModerationService:
    """Report operations"""

    def __init__(self, db: PoetryDatabase):
        self.db = db

    async def report_poem(self, poem_id: int, reported_by: int, reason: Optional[str]) -> int:
        """Insert a report; the same user may report a poem any number of times"""
        try:
            report_id = await self.db.fetchval(
                "INSERT INTO reports(poem_id, reported_by, reason) VALUES ($1, $2, $3) RETURNING id",
                poem_id,
                reported_by,
                reason
            )
        except DATABASE_ERRORS as e:
            logger.error(f"Report error for poem {poem_id}: {e}")
            raise StoreError() from e

        logger.info(f"Poem {poem_id} reported by user {reported_by}")
        return report_id

    async def list_reports(self) -> List[Dict]:
        query = """
        SELECT
          reports.id,
          reports.poem_id,
          reports.reason,
          users.name AS reporter,
          poems.title AS poem_title
        FROM reports
        JOIN users ON reports.reported_by = users.id
        JOIN poems ON reports.poem_id = poems.id
        ORDER BY reports.created_at DESC
        """
        try:
            return await self.db.fetch(query)
        except DATABASE_ERRORS as e:
            logger.error(f"List reports failed: {e}")
            raise StoreError() from e

    async def delete_report(self, report_id: int) -> bool:
        try:
            status = await self.db.execute("DELETE FROM reports WHERE id = $1", report_id)
        except DATABASE_ERRORS as e:
            logger.error(f"Delete report {report_id} failed: {e}")
            raise StoreError() from e

        return affected_rows(status) > 0
