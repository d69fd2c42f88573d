# src/config/settings.py - v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for logging and graph derivation defaults.
Environment variables use the GRAPHDERIVE_ prefix.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GRAPHDERIVE_",
        extra="ignore",
    )

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # === Community distance ===
    community_max_depth: int = 2

    # === Subgraph filtering ===
    # Largest node id served by the bitmap fast path; above it a hashed set is used.
    bitmap_max_id: int = 10_000_000

    # === Matrix materialization ===
    matrix_dtype: Literal["float64", "int64"] = "float64"

    # --- Validators ---

    @field_validator("community_max_depth", "bitmap_max_id")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:  # noqa: N805
        if v < 0:
            raise ValueError("must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.log_file is not None:
            if not re.match(r"^\d+\s*(KB|MB|GB)$", self.log_rotation.strip(), re.IGNORECASE):
                errors.append("LOG_ROTATION must look like '10MB' when LOG_FILE is set")
            if self.log_retention < 0:
                errors.append("LOG_RETENTION must be >= 0 when LOG_FILE is set")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-call config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, loaded once on first use."""
    return load_settings()
