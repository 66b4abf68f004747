# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="THREATLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Secondary scoring
    secondary_enabled: bool = True
    secondary_timeout: float = 5.0

    # Heuristics
    entropy_threshold: float = 7.0

    # Report
    hash_display_length: int = 16

    # Scanner
    scan_max_content_bytes: int = 10 * 1024 * 1024
    score_seed: int | None = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("secondary_timeout")
    @classmethod
    def _check_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("secondary_timeout must be positive")
        return v

    @field_validator("hash_display_length")
    @classmethod
    def _check_hash_length(cls, v: int) -> int:
        if not 1 <= v <= 64:
            raise ValueError("hash_display_length must be between 1 and 64")
        return v

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


def get_settings() -> Settings:
    return Settings()
