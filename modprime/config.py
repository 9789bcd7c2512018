from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ModPrimeSettings(BaseSettings):
    """Environment-backed configuration for prime testing and generation."""

    model_config = SettingsConfigDict(
        env_prefix="MODPRIME_",
        env_file=".env",
        extra="ignore",
    )

    env: Literal["dev", "prod"] = "dev"

    # Miller-Rabin rounds; error probability is at most 4**-trials
    is_prime_trials: int = Field(default=4, ge=1, description="Rounds used by is_prime")
    generation_trials: int = Field(default=5, ge=1, description="Rounds used by the prime generators")

    # Driver defaults
    default_bits: int = Field(default=2048, ge=16, description="Bit length generated by the CLI")

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True, description="Emit JSON lines instead of plain text")

    # Metrics / observability
    enable_metrics: bool = Field(
        default=True, description="Record Prometheus counters for candidate rejection"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level


settings = ModPrimeSettings()
