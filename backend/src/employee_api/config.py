"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Minimum entropy for secrets (measured by character diversity)
MIN_SECRET_UNIQUE_CHARS = 16

# Key generation command for documentation
KEY_GEN_CMD = 'python -c "import secrets;print(secrets.token_urlsafe(48))"'


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Employee Management API"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 4000

    # MongoDB (required - no default for security)
    # Kept as plain text: SRV URIs must reach the driver without a default port
    mongo_uri: str = Field(
        description="MongoDB connection URL. Must be set via environment variable."
    )
    mongo_db_name: str = Field(
        default="employee_management",
        validation_alias=AliasChoices("db_name", "mongo_db_name"),
    )
    mongo_server_selection_timeout_ms: int = 5000

    # Security - JWT
    jwt_secret: str = Field(min_length=32)
    jwt_algorithm: str = "HS256"
    jwt_expiration_hours: int = 1

    # Security - Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # CORS settings
    cors_origins: str = "http://localhost:3000"  # Comma-separated list

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings for security requirements."""
        if self.environment == "production" and self.debug:
            raise ValueError(
                "DEBUG mode cannot be enabled in production environment. "
                "This would expose GraphiQL and detailed error messages."
            )

        url = self.mongo_uri
        if not url.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(
                "MONGO_URI must be a MongoDB URL starting with 'mongodb://' or 'mongodb+srv://'"
            )

        if self.environment == "production":
            if len(set(self.jwt_secret)) < MIN_SECRET_UNIQUE_CHARS:
                raise ValueError(
                    f"JWT_SECRET must contain at least {MIN_SECRET_UNIQUE_CHARS} unique characters "
                    f"for sufficient entropy. Generate with: {KEY_GEN_CMD}"
                )

        return self

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
