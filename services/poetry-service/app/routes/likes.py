"""
Like Routes
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from typing import List

from shared.schemas.poem import LikeCreateSchema, LikeCountSchema

from app.utils.dependencies import PoemServiceDep, CurrentUser
from app.utils.exceptions import StoreError

router = APIRouter()


@router.post("/like", response_model=dict)
async def like_poem(like_data: LikeCreateSchema, poem_service: PoemServiceDep, current_user: CurrentUser):
    """Like a poem; liking it again is accepted and changes nothing"""
    try:
        await poem_service.like_poem(like_data.poem_id, like_data.user_id)
        return {"success": True}
    except StoreError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False}
        )


@router.get("/likes", response_model=List[LikeCountSchema])
async def like_counts(poem_service: PoemServiceDep):
    """Like count per poem; poems without likes are absent"""
    return await poem_service.like_counts()
