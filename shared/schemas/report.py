"""
Moderation schemas for Dead Poets
"""

from typing import Optional
from pydantic import BaseModel


class ReportCreateSchema(BaseModel):
    """Schema for reporting a poem"""
    poem_id: int
    reported_by: int
    reason: Optional[str] = None


class ReportSchema(BaseModel):
    """Report row joined with the reporter's name and the poem's title"""
    id: int
    poem_id: int
    reason: Optional[str] = None
    reporter: str
    poem_title: str
