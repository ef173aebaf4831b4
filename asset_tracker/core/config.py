"""Human-friendly configuration loader.

The ``AppSettings`` class centralises every environment variable the tracker
relies on. That means anyone inspecting the project can quickly answer the
questions:

*What:* Which settings exist and what do they control?
*When:* They are read once, the first time ``get_settings`` is called.
*Why:* Centralising configuration prevents magic strings scattered all over the
codebase.
*How:* ``pydantic-settings`` reads the environment (and optional ``.env``
files) and validates each value against the declared type.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EXPORT_PATH = Path("assets.csv")


class AppSettings(BaseSettings):
    """Environment-driven application configuration."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Where the delimited export lands. Relative paths resolve against the
    # current working directory, same as the interactive session.
    EXPORT_PATH: Path = DEFAULT_EXPORT_PATH

    # ---- Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: Literal["json", "plain"] = "json"

    # Terminal colouring of table rows (lifecycle hints).
    COLOR: bool = True

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, value: Any) -> str:
        if value in (None, ""):
            return "WARNING"
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()


__all__ = ["AppSettings", "DEFAULT_EXPORT_PATH", "get_settings"]
