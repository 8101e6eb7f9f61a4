"""
config.py — Application configuration through environment variables.
Every variable uses the LOGEXP_ prefix.
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from contracts import MAX_NESTING_DEPTH


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Engine limits (0 disables the length check)
    max_expression_length: int = 4096
    max_nesting_depth: int = Field(default=64, ge=1, le=MAX_NESTING_DEPTH)

    # App
    app_title: str = "LogExp"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="LOGEXP_", env_file=".env", extra="ignore")
