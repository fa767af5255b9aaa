"""
Application configuration.
"""

from typing import Any, Optional

from pydantic import Field, PostgresDsn, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # Core Settings
    PROJECT_NAME: str = "Sales API"
    PROJECT_DESCRIPTION: str = "Sales tracking API with Prometheus & PostgreSQL"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # HTTP Settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS_STR: str = "*"

    # Database Settings
    DB_HOST: str = "postgres"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "salesdb"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DATABASE_URI: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("DATABASE_URI", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> Any:
        if isinstance(v, str):
            return v

        data = info.data
        if not data:
            raise ValueError("Missing data for DATABASE_URI")

        return str(
            PostgresDsn.build(
                scheme="postgresql+asyncpg",
                username=data.get("DB_USER"),
                password=data.get("DB_PASSWORD"),
                host=data.get("DB_HOST"),
                port=int(data.get("DB_PORT", 5432)),
                path=f"{data.get('DB_NAME') or ''}",
            )
        )

    # Startup initialization
    INIT_MAX_ATTEMPTS: int = 10
    INIT_RETRY_DELAY: float = 5.0

    # Sentry Settings
    SENTRY_DSN: Optional[str] = None
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    # Prometheus Metrics
    ENABLE_METRICS: bool = True

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    # Tracing Settings
    ENABLE_TRACING: bool = False
    OTLP_ENDPOINT: Optional[str] = None


settings = Settings()
