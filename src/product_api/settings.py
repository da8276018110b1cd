"""
product_api.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Carry the logging/telemetry switches consumed by the observability package.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `PRODUCT_API_`).
    Defaults are safe for local dev: console logging on, remote spans kept in-process.
    """

    model_config = SettingsConfigDict(env_prefix="PRODUCT_API_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "product-api"
    # Prefix used in every lifecycle message template ("ProductApi Start Process: ...").
    application_name: str = "ProductApi"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Telemetry sinks
    local_logging_enabled: bool = True
    remote_telemetry_enabled: bool = True
    telemetry_exporter: Literal["none", "console", "otlp"] = "none"
    otlp_endpoint: str = Field(default="http://localhost:4317", repr=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The core never parses configuration itself; it receives these values from the
# composition root (`product_api.api.app.create_app`).
