"""Configuration management using pydantic-settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from PDF_VERIFY_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="PDF_VERIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Record store credentials
    supabase_url: str = Field(description="Base URL of the Supabase project")
    supabase_key: str = Field(description="Supabase API key (anon or service role)")

    products_table: str = Field(
        default="products",
        description="Table holding the product records",
    )

    # Probe configuration
    probe_timeout: float | None = Field(
        default=None,
        description="Timeout for each PDF probe in seconds. Unset means wait indefinitely.",
        gt=0,
    )

    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
        description="User-Agent header sent with each probe",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level used when no -v flag is given",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value
