"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs and /redoc).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix under which all routers are mounted.
        database_url: SQLAlchemy URL of the store database.
        create_tables: Create the schema on application startup.
        rate_limit_enabled: Toggle the slowapi limiter.
        rate_limit_default: Default rate limit for all endpoints.
        content_security_policy: Value of the Content-Security-Policy header.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Project Store"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = ""

    database_url: str = "sqlite:///./projectstore.db"
    create_tables: bool = True

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    content_security_policy: str = "default-src 'self'"


settings = Settings()
