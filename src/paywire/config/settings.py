"""Application configuration schema and validation."""

from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Configuration loaded from environment variables for host applications."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    stripe_secret_key: SecretStr = Field(
        default=SecretStr(""),
        description="Stripe secret API key (sk_live_... / sk_test_...)",
    )
    github_client_id: str = Field(
        default="",
        description="GitHub OAuth app client ID",
    )
    github_client_secret: SecretStr = Field(
        default=SecretStr(""),
        description="GitHub OAuth app client secret",
    )
    http_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        le=300,
        description="Total timeout per API request in seconds (unset = aiohttp default)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create the singleton AppConfig instance."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config
