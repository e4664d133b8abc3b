"""Configuration management for the todo store."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Store settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TODO_STORE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Validation
    min_password_length: int = Field(default=6)

    # JSON envelopes
    json_indent: int | None = Field(default=2)

    @model_validator(mode="after")
    def validate_password_policy(self) -> "Settings":
        """Reject a password policy that would accept empty passwords."""
        if self.min_password_length < 1:
            raise ValueError("MIN_PASSWORD_LENGTH must be at least 1")
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
