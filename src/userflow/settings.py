"""
userflow.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the pipeline and its entry point.
- Reject unknown log levels at load time instead of silently falling back.
- Offer a cached settings instance for the composition root.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration with defaults safe for local runs.
    A single instance is handed to `userflow.bootstrap.build_container`.
    """

    model_config = SettingsConfigDict(env_prefix="USERFLOW_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = Field(default="userflow", min_length=1)
    log_level: str = Field(
        default="INFO",
        pattern=r"(?i)^(debug|info|warning|error|critical)$",
    )

    # JSON lines for log shippers; the console renderer is easier to read locally.
    log_json: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Settings are read once by the entry point; inner layers never import this module.
