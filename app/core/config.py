"""
Configuration management for KSA HRMS Backend
"""
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import Optional, List
from urllib.parse import quote_plus


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Store connection (DATABASE_URL wins when set)
    DB_HOST: str = Field(default="localhost", description="PostgreSQL host")
    DB_USER: str = Field(default="postgres", description="PostgreSQL user")
    DB_PASS: str = Field(default="password", description="PostgreSQL password")
    DB_NAME: str = Field(default="ksa_hrms", description="PostgreSQL database name")
    DB_PORT: int = Field(default=5432, description="PostgreSQL port")
    DATABASE_URL: Optional[str] = Field(default=None, description="Full SQLAlchemy URL override")

    PORT: int = Field(default=3001, description="HTTP listen port")

    # Placeholder tenant until company is derived from the session
    COMPANY_ID: str = Field(default="COMP-001", description="Tenant scoping all requests")

    # Uploads
    UPLOAD_DIR: str = Field(default="uploads", description="Directory served under /uploads")
    MAX_UPLOAD_BYTES: int = Field(default=5 * 1024 * 1024, description="Upload size cap in bytes")

    # Auth
    JWT_SECRET_KEY: str = Field(default="change-me-local-secret", description="JWT secret key for token signing")
    JWT_ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    JWT_EXPIRE_MINUTES: int = Field(default=120, description="JWT token expiration in minutes")

    APP_ENV: str = Field(default="local", description="Application environment: local, staging, prod")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level: DEBUG, INFO, WARNING, ERROR")

    # CORS settings
    ALLOWED_ORIGINS: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins. Use '*' for local only."
    )

    VERSION: Optional[str] = Field(default=None, description="Application version (git SHA or semver)")

    # Initial admin bootstrap settings
    INITIAL_ADMIN_EMP_CODE: str = Field(default="ADM-001", description="Login code for the seeded admin")
    INITIAL_ADMIN_PASSWORD: str = Field(default="Admin@12345", description="Password for the seeded admin")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """Validate APP_ENV"""
        allowed = ["local", "staging", "prod"]
        if v not in allowed:
            raise ValueError(f"APP_ENV must be one of {allowed}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate LOG_LEVEL"""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of {allowed}")
        return v.upper()

    def get_database_url(self) -> str:
        """
        Resolve the SQLAlchemy URL

        DATABASE_URL is used verbatim when present; otherwise the URL is
        assembled from the DB_* parts.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    def validate_production(self) -> None:
        """
        Validate settings for production environment

        Raises:
            ValueError: If production settings are invalid
        """
        if self.APP_ENV == "prod":
            if len(self.JWT_SECRET_KEY) < 32:
                raise ValueError(
                    "JWT_SECRET_KEY must be at least 32 characters in production environment"
                )

            if self.ALLOWED_ORIGINS == "*" or not self.ALLOWED_ORIGINS:
                raise ValueError(
                    "ALLOWED_ORIGINS must be explicitly set (not '*') in production environment"
                )

    def get_allowed_origins_list(self) -> List[str]:
        """
        Get list of allowed CORS origins

        Returns:
            List of allowed origins (or ['*'] for local)
        """
        if self.ALLOWED_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


# Create settings instance
settings = Settings()

# Validate production settings if in prod
if settings.APP_ENV == "prod":
    settings.validate_production()
