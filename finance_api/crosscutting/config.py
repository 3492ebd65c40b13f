"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup (fail fast)
  - Provide defaults for pool sizes, token lifetimes and logging

Collaborators:
  - api/main.py: reads settings for CORS, pool and startup validation
  - container.py: selects repository backend
  - identity/tokens.py: JWT secret and TTLs
  - crosscutting/logger.py: log level and format

Constraints:
  - No business logic — pure configuration

Notes:
  - Singleton via lru_cache
  - DATABASE_URL and JWT_SECRET are required (no defaults)
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_ENVS = {"development", "test", "production"}
_VALID_BACKENDS = {"postgres", "memory"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        database_url: PostgreSQL connection string (postgres:// or postgresql://)
        jwt_secret: Secret for signing JWT tokens
        app_env: development | test | production
        port: HTTP port used by the `finance-api` script (default: 3000)
        allowed_origins: Comma-separated CORS origins
        log_level: Root log level (default: INFO)
        log_json: Emit JSON log lines (default: True)
        jwt_access_ttl_minutes: Access token TTL (default: 15)
        jwt_refresh_ttl_days: Refresh token TTL (default: 7)
        db_pool_min_size / db_pool_max_size: Connection pool bounds
        db_statement_timeout_ms: statement_timeout applied per connection
        repository_backend: postgres | memory
    """

    # Required (no defaults)
    database_url: str
    jwt_secret: str

    # Environment
    app_env: str = "development"
    port: int = 3000

    # CORS configuration
    allowed_origins: str = "http://localhost:3000"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Security - JWT
    jwt_access_ttl_minutes: int = 15
    jwt_refresh_ttl_days: int = 7

    # Database - Connection Pool
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_statement_timeout_ms: int = 30000  # 30 seconds

    # Persistence adapter
    repository_backend: str = "postgres"

    @field_validator("database_url")
    @classmethod
    def database_url_must_be_postgres(cls, v: str) -> str:
        url = (v or "").strip()
        if not url.startswith(("postgres://", "postgresql://")):
            raise ValueError("DATABASE_URL inválido")
        return url

    @field_validator("jwt_secret")
    @classmethod
    def jwt_secret_required(cls, v: str) -> str:
        if not (v or "").strip():
            raise ValueError("JWT_SECRET é obrigatório")
        return v

    @field_validator("app_env")
    @classmethod
    def app_env_valid(cls, v: str) -> str:
        env = (v or "development").strip().lower()
        if env not in _VALID_ENVS:
            raise ValueError("APP_ENV must be development, test, or production")
        return env

    @field_validator("repository_backend")
    @classmethod
    def repository_backend_valid(cls, v: str) -> str:
        backend = (v or "postgres").strip().lower()
        if backend not in _VALID_BACKENDS:
            raise ValueError("REPOSITORY_BACKEND must be postgres or memory")
        return backend

    @field_validator("jwt_access_ttl_minutes", "jwt_refresh_ttl_days", "port")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("value must be greater than 0")
        return v

    @model_validator(mode="after")
    def validate_pool_bounds(self):
        if self.db_pool_min_size < 0 or self.db_pool_max_size < 1:
            raise ValueError("DB pool sizes must be positive")
        if self.db_pool_min_size > self.db_pool_max_size:
            raise ValueError("DB_POOL_MIN_SIZE must be <= DB_POOL_MAX_SIZE")
        return self

    @model_validator(mode="after")
    def validate_security_requirements(self):
        if not self.is_production():
            return self

        if len(self.jwt_secret.strip()) < 32:
            raise ValueError("JWT_SECRET must be at least 32 characters in production")
        return self

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If required env vars are missing or invalid
    """
    return Settings()
