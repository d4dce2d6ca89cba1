"""
User Routes
Admin user management and public profiles
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from typing import List
import logging

from shared.schemas.user import UserResponseSchema, UserProfileSchema
from shared.utils.logger import get_audit_logger

from app.utils.dependencies import AdminServiceDep, AdminUser
from app.utils.exceptions import StoreError, UserNotFoundError

logger = logging.getLogger(__name__)
audit_logger = get_audit_logger()

router = APIRouter()


@router.get("/users", response_model=List[UserResponseSchema])
async def list_users(admin_service: AdminServiceDep, admin_user: AdminUser):
    return await admin_service.list_users()


@router.delete("/users/{user_id}", response_model=dict)
async def delete_user(user_id: int, admin_service: AdminServiceDep, admin_user: AdminUser):
    """Delete a user with their likes, reports and poems"""
    try:
        await admin_service.delete_user(user_id)
    except StoreError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False}
        )

    audit_logger.log_user_action(
        admin_user.get('id') if admin_user else None, "delete", "user", user_id
    )
    return {"success": True}


@router.get("/profile/{user_id}", response_model=UserProfileSchema)
async def get_profile(user_id: int, admin_service: AdminServiceDep):
    """
    Public profile

    Includes the number of poems written and likes received.
    """
    try:
        return await admin_service.get_profile(user_id)
    except UserNotFoundError as e:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": e.message}
        )
    except StoreError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": e.message}
        )
