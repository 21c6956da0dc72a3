"""
Configuration management for the password strength engine.

Uses Pydantic Settings for environment variable validation and type safety.
All variables share the ``PWD_`` prefix, e.g. ``PWD_BLACKLIST_PATH``.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_BLACKLIST_PATH = "./assets/blacklist.txt"


class StrengthSettings(BaseSettings):
    """Password strength engine configuration."""

    blacklist_path: str = Field(
        default=DEFAULT_BLACKLIST_PATH,
        description="Path to the newline-delimited common password list"
    )
    lazy_initialize: bool = Field(
        default=False,
        description="Load the blacklist on first evaluation instead of failing"
    )

    @field_validator("blacklist_path")
    @classmethod
    def validate_blacklist_path(cls, v: str) -> str:
        """Reject blank paths."""
        v = v.strip()
        if not v:
            raise ValueError("Blacklist path must not be empty")
        return v

    class Config:
        env_prefix = "PWD_"
        case_sensitive = False


# Global config instance
_config: Optional[StrengthSettings] = None


def get_config() -> StrengthSettings:
    """
    Get the global configuration instance.

    Lazily loads configuration on first access.

    Returns:
        StrengthSettings: The global configuration instance
    """
    global _config
    if _config is None:
        _config = StrengthSettings()
    return _config


def reload_config() -> StrengthSettings:
    """
    Reload configuration from environment variables.

    Useful for testing or when environment changes.

    Returns:
        StrengthSettings: The reloaded configuration instance
    """
    global _config
    _config = None
    return get_config()
