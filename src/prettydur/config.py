"""Configuration for the prettydur command-line tool."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Defaults for rendering durations, read from PRETTYDUR_* variables."""

    precision: int = Field(default=2, ge=0, description="Fractional digits in human output")
    spelled: bool = Field(default=False, description="Spell out units, e.g. '5 minutes'")
    log_level: LogLevel = "WARNING"

    model_config = {
        "env_prefix": "PRETTYDUR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
