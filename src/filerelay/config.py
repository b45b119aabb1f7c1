"""Application configuration for FileRelay.

All relay state lives in process memory, so the only runtime knobs are the
listening address, the log level and the expiration cadence. The TTL, the
size cap and the content-type allow-list are fixed constants in
:mod:`src.filerelay.relay.relay_policy`.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .storage.expiration import EXPIRATION_SWEEP_INTERVAL_SECONDS


class AppConfig(BaseSettings):
    """Pydantic settings container read from ``FILERELAY_*`` variables."""

    model_config = SettingsConfigDict(env_prefix="FILERELAY_", extra="ignore")

    host: str = Field(default="0.0.0.0", description="Interface uvicorn binds to")
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("FILERELAY_PORT", "PORT"),
        description="HTTP port; plain PORT is honoured for PaaS deployments",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    expiration_interval_seconds: float = Field(
        default=EXPIRATION_SWEEP_INTERVAL_SECONDS,
        gt=0,
        description="Seconds between background eviction passes",
    )


def load_config() -> AppConfig:
    """Load configuration from environment."""
    return AppConfig()


__all__ = ["AppConfig", "load_config"]
