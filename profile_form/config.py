"""Configuration settings for the profile form."""

import logging
import os
from functools import lru_cache
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings


class FormSettings(BaseSettings):
    """Profile form configuration settings."""
    
    no_file_label: str = os.getenv("PROFILE_FORM_NO_FILE_LABEL", "No file uploaded")
    log_level: str = os.getenv("PROFILE_FORM_LOG_LEVEL", "INFO")
    layout_file: Optional[str] = os.getenv("PROFILE_FORM_LAYOUT_FILE", None)
    
    class Config:
        env_prefix = "PROFILE_FORM_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # .env may carry keys for other tools
    
    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        """Normalize to an upper-case level name known to `logging`."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> FormSettings:
    """
    Get the cached settings instance.
    
    Returns:
        FormSettings: Settings built from the environment
    """
    return FormSettings()
