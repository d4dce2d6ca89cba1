"""
Poem Routes
Posting, listing and deleting poems
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from typing import List
import logging

from shared.schemas.poem import PoemCreateSchema, PoemSchema, UserPoemSchema
from shared.utils.logger import get_audit_logger

from app.utils.dependencies import PoemServiceDep, CurrentUser
from app.utils.exceptions import StoreError

logger = logging.getLogger(__name__)
audit_logger = get_audit_logger()

router = APIRouter()


@router.post("/poems", response_model=dict)
async def create_poem(poem_data: PoemCreateSchema, poem_service: PoemServiceDep, current_user: CurrentUser):
    try:
        await poem_service.create_poem(poem_data.title, poem_data.content, poem_data.user_id)
        return {"success": True}
    except StoreError:
        return {"success": False}


@router.get("/poems", response_model=List[PoemSchema])
async def list_poems(poem_service: PoemServiceDep):
    """All poems with author name, newest first"""
    return await poem_service.list_poems()


@router.delete("/poems/{poem_id}", response_model=dict)
async def delete_poem(poem_id: int, poem_service: PoemServiceDep, current_user: CurrentUser):
    """Delete a poem along with its likes and reports"""
    try:
        await poem_service.delete_poem(poem_id)
    except StoreError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False}
        )

    audit_logger.log_user_action(
        current_user.get('id') if current_user else None, "delete", "poem", poem_id
    )
    return {"success": True}


@router.get("/user-poems/{user_id}", response_model=List[UserPoemSchema])
async def list_user_poems(user_id: int, poem_service: PoemServiceDep):
    try:
        return await poem_service.list_user_poems(user_id)
    except StoreError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": e.message}
        )
