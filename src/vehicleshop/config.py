"""
Configuration management for the Vehicle Shop backend
"""

from pydantic_settings import BaseSettings

DEFAULT_JOKE_API_URL = "https://official-joke-api.appspot.com/random_joke"


class ConfigurationError(RuntimeError):
    """Raised when required configuration is missing at startup."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database (required at startup, see require_database_url)
    database_url: str | None = None
    database_pool_size: int = 10
    database_max_overflow: int = 20

    # Joke API
    joke_api_url: str = DEFAULT_JOKE_API_URL
    joke_api_timeout: float | None = None  # None disables the client timeout

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    sql_echo: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "VEHICLESHOP_"
        case_sensitive = False


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        joke_api_url=settings.joke_api_url,
    )


def require_database_url() -> str:
    """Return the configured database URL or fail startup.

    Raises:
        ConfigurationError: If VEHICLESHOP_DATABASE_URL is not set
    """
    if not settings.database_url:
        raise ConfigurationError(
            "Please provide VEHICLESHOP_DATABASE_URL for database connection."
        )
    return settings.database_url
