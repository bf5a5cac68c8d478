"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Every field has a default so the client works against a local catalog

Usage:
    from src.core.config import settings

    base_url = settings.catalog_base_url
    timeout = settings.request_timeout

    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import CATALOG_TIMEOUT_DEFAULT
from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Catalog Metadata Client",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Catalog API configuration
    catalog_base_url: str = Field(
        default="http://localhost:5000",
        description="Catalog frontend base URL serving the /api routes",
    )
    metadata_api_prefix: str = Field(
        default="/api/metadata/v0",
        description="Route prefix of the metadata API",
    )
    mail_api_prefix: str = Field(
        default="/api/mail/v0",
        description="Route prefix of the mail/notification API",
    )
    preview_api_prefix: str = Field(
        default="/api/preview/v0",
        description="Route prefix of the table preview API",
    )
    request_timeout: float = Field(
        default=CATALOG_TIMEOUT_DEFAULT,
        description="HTTP request timeout in seconds for catalog calls",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("catalog_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("metadata_api_prefix", "mail_api_prefix", "preview_api_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """
        Normalize route prefixes to a leading slash and no trailing slash.

        Args:
            v: Route prefix.

        Returns:
            str: Normalized prefix (e.g., "/api/metadata/v0").
        """
        return "/" + v.strip("/")

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Validate request timeout is positive.

        Raises:
            ValueError: If timeout is zero or negative.
        """
        if v <= 0:
            raise ValueError("request_timeout must be positive")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """Check if running in CI environment."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
