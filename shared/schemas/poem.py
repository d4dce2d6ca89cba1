"""
Poem and like schemas for Dead Poets
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class PoemCreateSchema(BaseModel):
    """Schema for posting a poem"""
    title: str = Field(..., max_length=255)
    content: str
    user_id: int


class PoemSchema(BaseModel):
    """Poem row joined with its author's name"""
    id: int
    title: str
    content: str
    user_id: int
    created_at: Optional[datetime] = None
    name: str

    class Config:
        from_attributes = True


class UserPoemSchema(BaseModel):
    """Poem row as listed on its owner's page"""
    id: int
    title: str
    content: str


class LikeCreateSchema(BaseModel):
    """Schema for liking a poem"""
    poem_id: int
    user_id: int


class LikeCountSchema(BaseModel):
    """Number of likes for one poem"""
    poem_id: int
    like_count: int
