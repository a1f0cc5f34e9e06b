"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from emprecord.config import CompanySettings

    # Load from environment variables (COMPANY_*)
    settings = CompanySettings()

    # Or override with explicit values
    settings = CompanySettings(name="Initech")
"""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class CompanySettings(BaseSettings):  # type: ignore[misc]
    """Process-wide company configuration.

    Attributes:
        name: Company name shown by every record and by the company info block.
        log_level: Logging level used by the demo entry point.

    Environment Variables:
        COMPANY_NAME
        COMPANY_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="COMPANY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    name: str = "TechSolutions"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
