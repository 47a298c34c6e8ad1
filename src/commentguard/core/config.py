# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Plugin configuration via environment variables."""

import tempfile
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from commentguard.core.constants import (
    DEBUG_LOG_FILENAME,
    FALLBACK_VERSION,
    PENDING_CALL_TTL_SECONDS,
    RELEASE_REPO,
    SWEEP_INTERVAL_SECONDS,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COMMENT_CHECKER_",
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    # Debug logging
    debug: bool = False
    log_file: Path = Path(tempfile.gettempdir()) / DEBUG_LOG_FILENAME
    log_format: str = "text"  # "text" or "json"

    # Binary cache
    cache_home: Path | None = Field(default=None, validation_alias="XDG_CACHE_HOME")
    release_repo: str = RELEASE_REPO
    fallback_version: str = FALLBACK_VERSION

    # Pending-call tracking
    pending_call_ttl: float = PENDING_CALL_TTL_SECONDS
    sweep_interval: float = SWEEP_INTERVAL_SECONDS

    # Warning message template passed to the checker as --prompt
    custom_prompt: str = ""

    @field_validator("log_format", mode="before")
    @classmethod
    def _parse_log_format(cls, v: object) -> str:
        if isinstance(v, str) and v.strip().lower() in ("text", "json"):
            return v.strip().lower()
        return "text"

    @field_validator("pending_call_ttl", "sweep_interval")
    @classmethod
    def _positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v


def get_settings() -> Settings:
    return Settings()
