"""Configuration schema — Pydantic models for config.yaml."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://api.stockfighter.io/ob/api"


class ClientConfig(BaseModel):
    """Connection settings for one API client. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    api_key: str = Field(default="", repr=False)
    timeout_s: float = Field(default=15.0, gt=0)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "console"] = "json"


class AppConfig(BaseModel):
    stockfighter: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
