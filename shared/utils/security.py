"""
Security utilities for Dead Poets

Provides password hashing and JWT bearer tokens.
"""

import logging
from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone
import bcrypt
import jwt

logger = logging.getLogger(__name__)

# bcrypt only considers the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72
MIN_BCRYPT_ROUNDS = 10


class SecurityUtils:
    """Password hashing and token signing bound to one signing key"""

    def __init__(
        self,
        jwt_secret: str,
        jwt_algorithm: str = "HS256",
        token_expire_days: int = 7,
        bcrypt_rounds: int = MIN_BCRYPT_ROUNDS
    ):
        if not jwt_secret:
            raise ValueError("A JWT signing secret is required")
        if bcrypt_rounds < MIN_BCRYPT_ROUNDS:
            raise ValueError(f"bcrypt rounds must be at least {MIN_BCRYPT_ROUNDS}")

        self.jwt_secret = jwt_secret
        self.jwt_algorithm = jwt_algorithm
        self.token_expire_days = token_expire_days
        self.bcrypt_rounds = bcrypt_rounds

    @staticmethod
    def _encode_password(password: str) -> bytes:
        return password.encode('utf-8')[:BCRYPT_MAX_BYTES]

    def hash_password(self, password: str) -> str:
        """
        Hash password using bcrypt

        Args:
            password: Plain text password

        Returns:
            Hashed password
        """
        try:
            salt = bcrypt.gensalt(rounds=self.bcrypt_rounds)
            hashed = bcrypt.hashpw(self._encode_password(password), salt)
            return hashed.decode('utf-8')
        except Exception as e:
            logger.error(f"Failed to hash password: {e}")
            raise

    def verify_password(self, password: str, hashed_password: str) -> bool:
        """
        Verify password against hash

        Args:
            password: Plain text password
            hashed_password: Hashed password

        Returns:
            True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(self._encode_password(password), hashed_password.encode('utf-8'))
        except Exception as e:
            logger.error(f"Failed to verify password: {e}")
            return False

    def generate_token(
        self,
        payload: Dict[str, Any],
        expires_in_days: Optional[int] = None
    ) -> str:
        """
        Generate JWT token

        Args:
            payload: Token claims
            expires_in_days: Lifetime in days, defaults to the configured expiry

        Returns:
            JWT token string
        """
        if expires_in_days is None:
            expires_in_days = self.token_expire_days

        now = datetime.now(timezone.utc)
        claims = payload.copy()
        claims["iat"] = now
        claims["exp"] = now + timedelta(days=expires_in_days)

        return jwt.encode(claims, self.jwt_secret, algorithm=self.jwt_algorithm)

    def verify_token(self, token: str) -> Optional[Dict[str, Any]]:
        """
        Verify and decode JWT token

        Args:
            token: JWT token string

        Returns:
            Decoded claims or None if invalid
        """
        try:
            return jwt.decode(token, self.jwt_secret, algorithms=[self.jwt_algorithm])
        except jwt.ExpiredSignatureError:
            logger.warning("Token has expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid token: {e}")
            return None
