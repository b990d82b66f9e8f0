"""Settings for the orgchart CLI.

Every setting can be overridden through an ``ORGCHART_``-prefixed
environment variable, e.g. ``ORGCHART_DATA_FILE=staff.json``.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, get_args

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_LEVELS = list(get_args(LogLevel))


class LinkPolicy(str, Enum):
    """What the link pass does with a manager_name that has no record."""

    SKIP = "skip"
    ABORT = "abort"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="ORGCHART_")

    data_file: Path = Field(
        default=Path("employees.json"),
        description="JSON file holding the employee records",
    )
    link_policy: LinkPolicy = Field(
        default=LinkPolicy.SKIP,
        description="Handling of manager names that reference no employee",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Logging level for diagnostics written to stderr",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
