"""
Authentication Tests
"""

import asyncpg
import pytest

from app.services.auth_service import AuthService
from app.utils.exceptions import (
    DuplicateEmailError, UserNotFoundError, InvalidCredentialsError, StoreError
)


@pytest.fixture
def auth_service(db, security):
    return AuthService(db, security)


class TestSignup:
    @pytest.mark.asyncio
    async def test_signup_stores_hash(self, auth_service, mock_db_pool, security):
        _, conn = mock_db_pool
        conn.fetchval.return_value = 1

        user_id = await auth_service.signup("Ann", "ann@x.com", "pw")

        assert user_id == 1
        query, name, email, stored = conn.fetchval.call_args.args
        assert query.startswith("INSERT INTO users(name, email, password)")
        assert (name, email) == ("Ann", "ann@x.com")
        assert stored != "pw"
        assert security.verify_password("pw", stored)

    @pytest.mark.asyncio
    async def test_signup_duplicate_email(self, auth_service, mock_db_pool):
        _, conn = mock_db_pool
        conn.fetchval.side_effect = asyncpg.UniqueViolationError("duplicate key value")

        with pytest.raises(DuplicateEmailError) as exc_info:
            await auth_service.signup("Ann", "ann@x.com", "pw")

        assert exc_info.value.message == "Email already exists"

    @pytest.mark.asyncio
    async def test_signup_store_error(self, auth_service, mock_db_pool):
        _, conn = mock_db_pool
        conn.fetchval.side_effect = asyncpg.PostgresError("relation does not exist")

        with pytest.raises(StoreError) as exc_info:
            await auth_service.signup("Ann", "ann@x.com", "pw")

        assert exc_info.value.message == "Server error"

    @pytest.mark.asyncio
    async def test_signup_connection_lost(self, auth_service, mock_db_pool):
        _, conn = mock_db_pool
        conn.fetchval.side_effect = ConnectionResetError()

        with pytest.raises(StoreError):
            await auth_service.signup("Ann", "ann@x.com", "pw")


class TestLogin:
    @pytest.fixture
    def stored_user(self, security):
        return {
            "id": 5,
            "name": "Ann",
            "email": "ann@x.com",
            "password": security.hash_password("pw"),
            "role": "admin",
        }

    @pytest.mark.asyncio
    async def test_login_issues_token(self, auth_service, mock_db_pool, stored_user, security):
        _, conn = mock_db_pool
        conn.fetchrow.return_value = stored_user

        result = await auth_service.login("ann@x.com", "pw")

        assert result["user_id"] == 5
        assert result["role"] == "admin"
        claims = security.verify_token(result["token"])
        assert claims["id"] == 5
        assert claims["role"] == "admin"
        assert "exp" in claims

    @pytest.mark.asyncio
    async def test_login_unknown_email(self, auth_service, mock_db_pool):
        _, conn = mock_db_pool
        conn.fetchrow.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            await auth_service.login("nobody@x.com", "pw")

        assert exc_info.value.message == "User not found"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, auth_service, mock_db_pool, stored_user):
        _, conn = mock_db_pool
        conn.fetchrow.return_value = stored_user

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await auth_service.login("ann@x.com", "wrong")

        assert exc_info.value.message == "Incorrect password"

    @pytest.mark.asyncio
    async def test_login_store_error(self, auth_service, mock_db_pool):
        _, conn = mock_db_pool
        conn.fetchrow.side_effect = asyncpg.PostgresError("boom")

        with pytest.raises(StoreError) as exc_info:
            await auth_service.login("ann@x.com", "pw")

        assert exc_info.value.message == "Internal server error"

    @pytest.mark.asyncio
    async def test_missing_role_defaults_to_user(self, auth_service, mock_db_pool, stored_user):
        _, conn = mock_db_pool
        stored_user["role"] = None
        conn.fetchrow.return_value = stored_user

        result = await auth_service.login("ann@x.com", "pw")

        assert result["role"] == "user"


class TestTokens:
    def test_decode_token(self, auth_service, security):
        token = security.generate_token({"id": 2, "role": "user"})
        assert auth_service.decode_token(token)["id"] == 2

    def test_decode_token_without_id(self, auth_service, security):
        token = security.generate_token({"role": "user"})
        assert auth_service.decode_token(token) is None

    def test_decode_invalid_token(self, auth_service):
        assert auth_service.decode_token("garbage") is None
