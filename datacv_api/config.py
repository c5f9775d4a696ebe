"""
API Service Configuration Module

Centralized configuration management with Pydantic validation.
All environment variables are validated at startup to catch misconfigurations early.
"""

import logging
from functools import lru_cache
from typing import List, Optional, Set

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from datacv.common.config import Config


class ApiSettings(BaseSettings):
    """
    API service configuration with validation.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False, extra="ignore")

    # === Security ===
    api_secret: Optional[str] = Field(
        default=None,
        min_length=16,
        description="Shared bearer secret (min 16 chars)"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )
    admin_user_ids: str = Field(
        default="",
        description="Comma-separated user ids with admin privileges"
    )

    # === CORS ===
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        allowed = {"development", "staging", "production"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of: {', '.join(sorted(allowed))}")
        return v_lower

    @field_validator("api_secret")
    @classmethod
    def validate_secret_strength(cls, v: Optional[str]) -> Optional[str]:
        """Reject well-known weak secrets."""
        if v is None:
            return None
        weak_secrets = {"secret", "password", "changeme", "1234567890123456"}
        if v.lower() in weak_secrets or len(set(v)) < 4:
            raise ValueError("API secret is too weak - use a secure random string")
        return v

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins into a list."""
        if not self.cors_origins:
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def admin_user_id_set(self) -> Set[str]:
        return {uid.strip() for uid in self.admin_user_ids.split(",") if uid.strip()}

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def auth_required(self) -> bool:
        """Auth is required in production or whenever a secret is configured."""
        return self.is_production or self.api_secret is not None

    def validate_production_config(self) -> List[str]:
        """
        Validate configuration is suitable for production.

        Returns list of warning/error messages.
        """
        issues = []

        if self.is_production:
            if not self.api_secret:
                issues.append("CRITICAL: API_SECRET required in production")
            if not self.cors_origins:
                issues.append("WARNING: CORS_ORIGINS not configured")
            if "localhost" in Config.MONGODB_URI:
                issues.append("WARNING: Using localhost MongoDB in production")
            if not self.admin_user_ids:
                issues.append("WARNING: ADMIN_USER_IDS empty, admin routes unreachable")

        return issues


@lru_cache()
def get_settings() -> ApiSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached.
    """
    return ApiSettings()


def validate_config_on_startup() -> None:
    """
    Validate configuration at application startup.

    Raises ValueError with details if config is invalid.
    Logs warnings for non-critical issues.
    """
    logger = logging.getLogger(__name__)

    try:
        settings = get_settings()
        Config.validate()
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}")

    for issue in settings.validate_production_config():
        if issue.startswith("CRITICAL"):
            raise ValueError(issue)
        logger.warning(issue)

    logger.info(f"Configuration loaded: environment={settings.environment}")
    logger.info(f"  auth_required={settings.auth_required}")
    logger.info(Config.summary())


settings = get_settings()
