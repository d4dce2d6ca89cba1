"""
Authentication Routes
User signup and login
"""

from fastapi import APIRouter
import logging

from shared.schemas.user import UserSignupSchema, UserLoginSchema

from app.utils.dependencies import AuthServiceDep
from app.utils.exceptions import PoetryServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", response_model=dict)
async def signup(signup_data: UserSignupSchema, auth_service: AuthServiceDep):
    """
    Register new user

    Failures are reported in the body with HTTP 200; no token is issued here.
    """
    try:
        await auth_service.signup(
            signup_data.name,
            signup_data.email,
            signup_data.password
        )
        return {"success": True}

    except PoetryServiceError as e:
        return {"success": False, "message": e.message}


@router.post("/login", response_model=dict)
async def login(login_data: UserLoginSchema, auth_service: AuthServiceDep):
    """
    User login for members and admins

    Returns a bearer token embedding the user's id and role.
    """
    try:
        result = await auth_service.login(login_data.email, login_data.password)
        return {
            "success": True,
            "token": result['token'],
            "role": result['role'],
            "user_id": result['user_id']
        }

    except PoetryServiceError as e:
        return {"success": False, "message": e.message}
