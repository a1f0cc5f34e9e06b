"""Configuration module using Pydantic Settings.

Usage:
    from emprecord.config import CompanySettings

    settings = CompanySettings(name="Initech")
"""

from emprecord.config.settings import CompanySettings

__all__ = [
    "CompanySettings",
]
