"""
FastAPI Dependencies
Database, service and authentication dependencies
"""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional, Annotated
import logging

from shared.utils.security import SecurityUtils

from app.config import Settings
from app.models.user import ADMIN_ROLE
from app.utils.database import PoetryDatabase
from app.services.auth_service import AuthService
from app.services.poem_service import PoemService
from app.services.moderation_service import ModerationService
from app.services.admin_service import AdminService

logger = logging.getLogger(__name__)

# Security scheme for JWT tokens; a missing header is handled below
security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> PoetryDatabase:
    """Database pool dependency"""
    return request.app.state.database


def get_security(request: Request) -> SecurityUtils:
    return request.app.state.security


def get_auth_service(
    db: PoetryDatabase = Depends(get_database),
    security_utils: SecurityUtils = Depends(get_security)
) -> AuthService:
    return AuthService(db, security_utils)


def get_poem_service(db: PoetryDatabase = Depends(get_database)) -> PoemService:
    return PoemService(db)


def get_moderation_service(db: PoetryDatabase = Depends(get_database)) -> ModerationService:
    return ModerationService(db)


def get_admin_service(db: PoetryDatabase = Depends(get_database)) -> AdminService:
    return AdminService(db)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> Optional[dict]:
    """
    Claims of the bearer token if one was presented

    Raises:
        HTTPException: If a token was presented but is invalid or expired
    """
    if credentials is None:
        return None

    claims = auth_service.decode_token(credentials.credentials)
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return claims


async def get_current_user(
    current_user: Optional[dict] = Depends(get_optional_user),
    settings: Settings = Depends(get_settings)
) -> Optional[dict]:
    """
    Require a bearer token when REQUIRE_AUTH is enabled

    Ownership of the user ids in request bodies is not checked.
    """
    if settings.require_auth and current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user


async def get_admin_user(
    current_user: Optional[dict] = Depends(get_current_user),
    settings: Settings = Depends(get_settings)
) -> Optional[dict]:
    """Require an admin token when REQUIRE_AUTH is enabled"""
    if settings.require_auth and current_user.get('role') != ADMIN_ROLE:
        logger.warning(f"Admin route refused for user {current_user.get('id')}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required"
        )
    return current_user


# Type aliases for cleaner dependency injection
DatabaseDep = Annotated[PoetryDatabase, Depends(get_database)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
PoemServiceDep = Annotated[PoemService, Depends(get_poem_service)]
ModerationServiceDep = Annotated[ModerationService, Depends(get_moderation_service)]
AdminServiceDep = Annotated[AdminService, Depends(get_admin_service)]
CurrentUser = Annotated[Optional[dict], Depends(get_current_user)]
AdminUser = Annotated[Optional[dict], Depends(get_admin_user)]
