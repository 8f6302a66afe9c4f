# config.py
"""
Configuration module for the application.
Handles environment-specific settings using Pydantic v2 and pydantic-settings.
"""
from enum import Enum
from pydantic import Field, field_validator, BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"

class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_enabled: bool = False
    file_path: str = "logs/app.log"
    file_rotation: str = "10 MB"

class APISettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"
    version: str = "1.0.0"
    title: str = "College Staff Management API"
    description: str = "Record management API for college staff and departments"

class DatabaseSettings(BaseModel):
    url: str
    pool_size: int = 20
    max_overflow: int = 30
    pool_recycle: int = 3600
    create_tables_on_startup: bool = True

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

class Settings(BaseSettings):
    """Main settings class with environment-specific configurations."""
    # Environment
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    # API
    api_title: str = "College Staff Management API"
    api_description: str = "Record management API for college staff and departments"
    api_version: str = "1.0.0"
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 8000

    # Database
    database_url: str = "sqlite+aiosqlite:///./college_staff.db"
    pool_size: int = 20
    max_overflow: int = 30
    pool_recycle: int = 3600
    create_tables_on_startup: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = Field(default="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}")
    log_file_enabled: bool = False
    log_file_path: str = "logs/app.log"
    log_file_rotation: str = "10 MB"

    # CORS
    cors_origins_raw: str = Field(
        default="*",
        alias="CORS_ORIGINS",
        exclude=True,
    )

    # Validators
    @field_validator("debug")
    @classmethod
    def debug_not_in_production(cls, v, info):
        env = info.data.get("environment")
        if v and env == Environment.PRODUCTION:
            raise ValueError("Debug mode should not be enabled in production")
        return v

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v):
        if not v.startswith(("postgresql+asyncpg://", "sqlite+aiosqlite://")):
            raise ValueError("Invalid database URL format")
        return v

    @property
    def cors_origins(self) -> list[str]:
        """Comma-separated allowed origins from .env, parsed into a list."""
        return [origin.strip() for origin in self.cors_origins_raw.split(",") if origin.strip()]

    # Sub-settings via properties
    @property
    def api(self) -> APISettings:
        return APISettings(
            host=self.host,
            port=self.port,
            prefix=self.api_prefix,
            title=self.api_title,
            description=self.api_description,
            version=self.api_version,
        )

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings(
            level=self.log_level,
            format=self.log_format,
            file_enabled=self.log_file_enabled,
            file_path=self.log_file_path,
            file_rotation=self.log_file_rotation,
        )

    @property
    def database(self) -> DatabaseSettings:
        return DatabaseSettings(
            url=self.database_url,
            pool_size=self.pool_size,
            max_overflow=self.max_overflow,
            pool_recycle=self.pool_recycle,
            create_tables_on_startup=self.create_tables_on_startup,
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
        populate_by_name=True,
    )

class DevelopmentSettings(Settings):
    debug: bool = True
    log_level: str = "DEBUG"

class ProductionSettings(Settings):
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v):
        if not v.startswith("postgresql+asyncpg://"):
            raise ValueError("PostgreSQL is required in production")
        return v

class TestingSettings(Settings):
    database_url: str = "sqlite+aiosqlite:///:memory:"
    debug: bool = True
    log_level: str = "DEBUG"
    create_tables_on_startup: bool = False

def get_settings() -> Settings:
    """Factory to return environment-specific settings."""
    env = Settings().environment
    if env == Environment.PRODUCTION:
        return ProductionSettings()
    elif env == Environment.TESTING:
        return TestingSettings()
    return DevelopmentSettings()

# Global settings instance
settings = get_settings()
