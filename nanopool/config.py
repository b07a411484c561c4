"""Configuration loader for the Nanopool client."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NanopoolConfig(BaseSettings):
    """Pydantic-based configuration model."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    nanopool_api_root: str = "https://api.nanopool.org/v1"
    nanopool_coin: str = "eth"
    # None leaves the transport default in place
    nanopool_timeout: Optional[float] = None

    nanopool_log_level: str = "INFO"

    @field_validator("nanopool_api_root", mode="before")
    @classmethod
    def strip_trailing_slash(cls, value: object) -> str:
        value_str = str(value or "").strip().rstrip("/")
        if not value_str.startswith(("http://", "https://")):
            raise ValueError("NANOPOOL_API_ROOT must be an http(s) URL")
        return value_str

    @field_validator("nanopool_coin", mode="before")
    @classmethod
    def normalize_coin(cls, value: object) -> str:
        value_str = str(value or "").strip().lower()
        if not value_str or "/" in value_str:
            raise ValueError("NANOPOOL_COIN must be a single path segment such as 'eth'")
        return value_str

    @field_validator("nanopool_timeout", mode="before")
    @classmethod
    def blank_timeout_is_none(cls, value: object) -> object:
        """Treat an empty ``NANOPOOL_TIMEOUT`` as unset."""

        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("nanopool_timeout")
    @classmethod
    def positive_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("NANOPOOL_TIMEOUT must be positive")
        return value

    @field_validator("nanopool_log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: object) -> str:
        value_str = str(value or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(value_str), int):
            raise ValueError(f"NANOPOOL_LOG_LEVEL must be a logging level name, got {value!r}")
        return value_str

    @property
    def base_url(self) -> str:
        return f"{self.nanopool_api_root}/{self.nanopool_coin}"


def load_config() -> NanopoolConfig:
    """Load configuration from environment variables."""

    return NanopoolConfig()
