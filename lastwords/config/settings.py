"""
Application Settings

Centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with sensible defaults.

Configuration Categories:
=========================
- Application: Basic app info (name, version, environment, debug mode)
- Database: Connection and pool settings
- Security: JWT signing, email HMAC key and WebAuthn enforcement
- Diagnostics: Whether the debug/diag routes are mounted
- CORS: Cross-origin resource sharing

Environment Variables:
======================
Settings are loaded from environment variables or .env file.
Environment variables take precedence over .env file values.

The environment-echo endpoints (/api/debug-env, /api/diag/*) do NOT go
through this object: they read os.environ at request time.

Usage:
======
    from lastwords.config.settings import settings

    # Access settings
    db_url = settings.DATABASE_URL
    is_dev = settings.is_development
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Signing key used when neither JWT_SECRET nor NEXTAUTH_SECRET is configured
DEVELOPMENT_JWT_SECRET = "fallback-secret-for-development"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # APPLICATION
    # ═══════════════════════════════════════════════════════════════════════════════

    APP_NAME: str = "Last Words"
    APP_VERSION: str = "1.0.0"
    NODE_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    SERVICE_NAME: str = Field(
        default="last-words-web",
        description="Service name reported by the legacy /api/health route",
    )
    API_SERVICE_NAME: str = Field(
        default="last-words-api",
        description="Service name reported by the backend /health route",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # DATABASE
    # ═══════════════════════════════════════════════════════════════════════════════

    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./dev.db",
        description="Async SQLAlchemy URL (postgresql+asyncpg://... in production)",
    )
    DATABASE_POOL_SIZE: int = Field(
        default=10,
        description="Number of persistent connections in the pool",
    )
    DATABASE_MAX_OVERFLOW: int = Field(
        default=20,
        description="Extra connections allowed when pool is exhausted",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # SECURITY
    # ═══════════════════════════════════════════════════════════════════════════════

    JWT_SECRET: str = Field(
        default="",
        description="Secret key for JWT signing (falls back to NEXTAUTH_SECRET)",
    )
    NEXTAUTH_SECRET: str = ""
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60,
        description="Lifetime of tokens issued by /api/auth/token",
    )
    EMAIL_HMAC_KEY: str = Field(
        default="",
        description="Server-side key for deterministic email HMAC lookups",
    )
    ENFORCE_WEBAUTHN: bool = Field(
        default=True,
        description="Reject requires_webauthn routes for users without a verified WebAuthn login",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # DIAGNOSTICS
    # ═══════════════════════════════════════════════════════════════════════════════

    ENABLE_DEBUG_ROUTES: bool = Field(
        default=True,
        description="Mount /api/debug-env and /api/diag/* routes",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # CORS
    # ═══════════════════════════════════════════════════════════════════════════════

    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"],
        description="Allowed CORS origins",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # PROPERTIES
    # ═══════════════════════════════════════════════════════════════════════════════

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.NODE_ENV == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.NODE_ENV == "development"

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite (no connection pool options)."""
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def jwt_secret(self) -> str:
        """Resolve the JWT signing key: JWT_SECRET, then NEXTAUTH_SECRET, then a dev fallback."""
        return self.JWT_SECRET or self.NEXTAUTH_SECRET or DEVELOPMENT_JWT_SECRET

    @property
    def email_hmac_key(self) -> str:
        """Key for deterministic email HMACs: EMAIL_HMAC_KEY, then the JWT signing key."""
        return self.EMAIL_HMAC_KEY or self.jwt_secret


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.

    Returns:
        Settings: Application settings instance
    """
    return Settings()


# Global settings instance for convenient import
settings = get_settings()
