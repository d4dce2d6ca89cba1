"""
Authentication Service
Signup and login business logic
"""

import asyncio
import asyncpg
from typing import Dict, Optional
import logging

from shared.utils.security import SecurityUtils

from app.models.user import User
from app.utils.database import PoetryDatabase, DATABASE_ERRORS
from app.utils.exceptions import (
    DuplicateEmailError, UserNotFoundError, InvalidCredentialsError, StoreError
)

logger = logging.getLogger(__name__)


class AuthService:
    """User authentication service"""

    def __init__(self, db: PoetryDatabase, security: SecurityUtils):
        self.db = db
        self.security = security

    async def hash_password(self, password: str) -> str:
        """Hash password using bcrypt in thread pool to avoid blocking"""
        return await asyncio.to_thread(self.security.hash_password, password)

    async def verify_password(self, password: str, hashed_password: str) -> bool:
        """Verify password against hash in thread pool to avoid blocking"""
        return await asyncio.to_thread(self.security.verify_password, password, hashed_password)

    async def signup(self, name: str, email: str, password: str) -> int:
        """
        Register new user with the default role

        Args:
            name: Display name
            email: Login email, unique across users
            password: Plain text password, stored only as a bcrypt hash

        Returns:
            int: New user ID

        Raises:
            DuplicateEmailError: If the email is already registered
            StoreError: On any other database failure
        """
        password_hash = await self.hash_password(password)

        try:
            user_id = await self.db.fetchval(
                "INSERT INTO users(name, email, password) VALUES ($1, $2, $3) RETURNING id",
                name,
                email,
                password_hash
            )
        except asyncpg.UniqueViolationError:
            logger.info(f"Signup rejected, email already registered: {email}")
            raise DuplicateEmailError()
        except DATABASE_ERRORS as e:
            logger.error(f"Signup failed for {email}: {e}")
            raise StoreError("Server error") from e

        logger.info(f"User created with ID: {user_id}")
        return user_id

    async def get_user_by_email(self, email: str) -> Optional[User]:
        try:
            record = await self.db.fetchrow(
                "SELECT id, name, email, password, role FROM users WHERE email = $1",
                email
            )
        except DATABASE_ERRORS as e:
            logger.error(f"User lookup failed for {email}: {e}")
            raise StoreError() from e

        return User.from_record(record) if record else None

    async def login(self, email: str, password: str) -> Dict:
        """
        Authenticate user and issue a bearer token

        Returns:
            dict: token, role and user_id

        Raises:
            UserNotFoundError: No user has this email
            InvalidCredentialsError: Password does not match
            StoreError: Database failure
        """
        user = await self.get_user_by_email(email)
        if not user:
            raise UserNotFoundError()

        if not await self.verify_password(password, user.password):
            logger.info(f"Login rejected, incorrect password for user {user.id}")
            raise InvalidCredentialsError()

        token = self.security.generate_token(user.token_claims())
        logger.info(f"User {user.id} logged in")

        return {
            'token': token,
            'role': user.role,
            'user_id': user.id
        }

    def decode_token(self, token: str) -> Optional[Dict]:
        """Validate a bearer token and return its claims, or None"""
        claims = self.security.verify_token(token)
        if not claims or 'id' not in claims:
            return None
        return claims
