from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

# Used only when JWT_SECRET is not configured; startup logs a warning
INSECURE_DEFAULT_JWT_SECRET = "deadpoets_secret"


class Settings(BaseSettings):
    # App config
    app_name: str = "Dead Poets API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    log_format: Optional[str] = None
    logging_config_path: Optional[str] = None

    # Database
    database_url: Optional[str] = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "deadpoets"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    db_ssl: bool = False
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_command_timeout: float = 60
    auto_create_schema: bool = False

    # JWT
    jwt_secret: str = INSECURE_DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7
    bcrypt_rounds: int = 10

    # HTTP
    api_prefix: str = ""
    require_auth: bool = False
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator('api_prefix')
    @classmethod
    def validate_api_prefix(cls, v):
        v = v.strip().rstrip('/')
        if v and not v.startswith('/'):
            v = '/' + v
        return v

    @field_validator('bcrypt_rounds')
    @classmethod
    def validate_bcrypt_rounds(cls, v):
        if not 10 <= v <= 31:
            raise ValueError('bcrypt rounds must be between 10 and 31')
        return v

    @field_validator('jwt_expire_days')
    @classmethod
    def validate_jwt_expire_days(cls, v):
        if v < 1:
            raise ValueError('JWT expiry must be at least one day')
        return v

    @property
    def dsn(self) -> str:
        """Build PostgreSQL connection string"""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def uses_insecure_secret(self) -> bool:
        return self.jwt_secret == INSECURE_DEFAULT_JWT_SECRET


def get_settings() -> Settings:
    """Load settings from the environment"""
    return Settings()
