import os
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]

TRUTHY = {"1", "true", "yes"}


class Settings(BaseModel):
    """Runtime settings for the sorted list package."""

    log_level: LogLevel = "WARNING"
    fail_fast: bool = Field(
        default=True,
        description="Raise when a list is modified while one of its cursors is in use",
    )


def fail_fast_enabled() -> bool:
    """Return ``SORTED_LIST_FAIL_FAST`` as a bool, ignoring the other settings."""
    return os.getenv("SORTED_LIST_FAIL_FAST", "1").strip().lower() in TRUTHY


def get_settings() -> Settings:
    """Build settings from the environment.

    Read from the environment on every call.
    """
    return Settings(
        log_level=os.getenv("SORTED_LIST_LOG_LEVEL", "WARNING").strip().upper(),
        fail_fast=fail_fast_enabled(),
    )


__all__ = ["LogLevel", "Settings", "fail_fast_enabled", "get_settings"]
