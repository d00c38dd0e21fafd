"""Mini README: Centralised configuration for the expense tracker.

Structure:
    * ExpenseTrackerSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor shared by the server, client, and CLI.

Usage:
    Variables use the ``EXPENSE_TRACKER_`` prefix (for example
    ``EXPENSE_TRACKER_INTERFACE_PORT=5001``) and may also live in a local
    ``.env`` file. Settings are validated once per process.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class ExpenseTrackerSettings(BaseSettings):
    """Runtime configuration for the expense tracker service and client."""

    environment: str = Field(
        "development",
        description="Environment label controlling reload behaviour and log verbosity.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface the API server binds to.",
    )
    interface_port: int = Field(
        5000,
        description="Port the API server listens on.",
        ge=1,
        le=65535,
    )
    api_base_url: str = Field(
        "http://localhost:5000",
        description="Origin the client application sends its requests to.",
    )
    cors_allow_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser.",
    )
    log_level: str = Field("INFO", description="Root logging level.")

    class Config:
        env_prefix = "EXPENSE_TRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("api_base_url")
    def _strip_trailing_slash(cls, value: str) -> str:
        """Normalise the base URL so request paths join cleanly."""

        value = value.strip()
        if not value:
            raise ValueError("api_base_url must not be empty")
        return value.rstrip("/")


@lru_cache()
def get_settings() -> ExpenseTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ExpenseTrackerSettings()
