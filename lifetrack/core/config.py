from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import model_validator
from urllib.parse import quote_plus
from enum import Enum

class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

class Settings(BaseSettings):
    # Environment Configuration
    ENVIRONMENT: Environment = Environment.DEVELOPMENT

    # Project Information
    PROJECT_NAME: str = "LifeTrack"
    VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"

    # Server settings
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 5000

    # Database - PostgreSQL when configured, local SQLite file otherwise
    POSTGRES_SERVER: Optional[str] = None
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    SQLALCHEMY_DATABASE_URI: Optional[str] = None
    SQLITE_FALLBACK_URI: str = "sqlite:///./lifetrack.db"

    # Security
    SECRET_KEY: str
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # JWT Settings
    ALGORITHM: str = "HS256"

    # Timezone used to decide which calendar day "today" is
    DEFAULT_TIMEZONE: str = "UTC"

    # CORS
    CORS_ORIGINS: List[str] = []

    # Logging
    LOG_LEVEL: str = "INFO"
    SLOW_REQUEST_MS: int = 2000

    @model_validator(mode="after")
    def _finalize_database_uri(self) -> "Settings":
        # Derive SQLALCHEMY_DATABASE_URI if not provided
        if not self.SQLALCHEMY_DATABASE_URI:
            if self.POSTGRES_SERVER and self.POSTGRES_USER and self.POSTGRES_DB:
                safe_user = quote_plus(self.POSTGRES_USER)
                if self.POSTGRES_PASSWORD:
                    safe_password = quote_plus(self.POSTGRES_PASSWORD)
                    self.SQLALCHEMY_DATABASE_URI = (
                        f"postgresql://{safe_user}:{safe_password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
                    )
                else:
                    self.SQLALCHEMY_DATABASE_URI = (
                        f"postgresql://{safe_user}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
                    )
            else:
                self.SQLALCHEMY_DATABASE_URI = self.SQLITE_FALLBACK_URI
        return self

    @model_validator(mode="after")
    def validate_environment_config(self):
        """Validate environment-specific configuration requirements"""
        if self.is_production:
            if self.SQLALCHEMY_DATABASE_URI.startswith("sqlite"):
                raise ValueError("Production requires a PostgreSQL database")
            if self.SECRET_KEY in ("change-me", "secret"):
                raise ValueError("Production requires a real SECRET_KEY")
        return self

    # Environment-specific properties
    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION

    @property
    def uses_sqlite(self) -> bool:
        return self.SQLALCHEMY_DATABASE_URI.startswith("sqlite")

    @property
    def allowed_cors_origins(self) -> List[str]:
        if self.CORS_ORIGINS:
            return self.CORS_ORIGINS
        if self.is_production:
            return []
        return ["http://localhost:3000", "http://127.0.0.1:3000"]

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")

settings = Settings()
