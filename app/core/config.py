from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration settings.

    This class loads configuration values from environment variables
    and optionally from a `.env` file. It uses Pydantic Settings
    to provide type validation and default values.

    Environment variables take precedence over `.env` values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------
    # Application settings
    # ---------------------------------------------------------------------

    app_name: str = Field(
        default="weather-report",
        alias="APP_NAME",
        description="Application name displayed in logs and API documentation",
    )

    environment: str = Field(
        default="local",
        alias="ENVIRONMENT",
        description="Runtime environment (local, dev, prod)",
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    # ---------------------------------------------------------------------
    # Database settings
    # ---------------------------------------------------------------------

    database_url: str = Field(
        default="sqlite+aiosqlite:///./weather.db",
        alias="DATABASE_URL",
        description=(
            "Database connection URL. SQLite (aiosqlite) by default, "
            "PostgreSQL via postgresql+psycopg://..."
        ),
    )

    db_timeout_s: float = Field(
        default=5.0,
        gt=0,
        alias="DB_TIMEOUT_S",
        description="Upper bound in seconds for a single database operation",
    )

    # ---------------------------------------------------------------------
    # Admin login
    # ---------------------------------------------------------------------

    admin_username: str = Field(
        default="admin",
        alias="ADMIN_USERNAME",
        description="Username accepted by POST /admin/login",
    )

    admin_password: SecretStr = Field(
        default=SecretStr("admin123"),
        alias="ADMIN_PASSWORD",
        description="Password accepted by POST /admin/login",
    )

    admin_token: SecretStr = Field(
        default=SecretStr("hardcoded-jwt-token-that-never-expires"),
        alias="ADMIN_TOKEN",
        description="Token returned on a successful admin login",
    )


# Singleton settings instance
settings = Settings()
