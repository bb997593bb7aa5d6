"""Config loader — reads YAML, applies STOCKFIGHTER_* env var overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from stockfighter.config.schema import AppConfig

# env var -> (section, key)
_ENV_OVERRIDES = {
    "STOCKFIGHTER_BASE_URL": ("stockfighter", "base_url"),
    "STOCKFIGHTER_API_KEY": ("stockfighter", "api_key"),
    "STOCKFIGHTER_TIMEOUT_S": ("stockfighter", "timeout_s"),
    "STOCKFIGHTER_LOG_LEVEL": ("logging", "level"),
    "STOCKFIGHTER_LOG_FORMAT": ("logging", "format"),
}


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from a YAML file, then apply env var overrides.

    If *path* is None or the file doesn't exist, returns defaults.

    Environment variable overrides:
        STOCKFIGHTER_BASE_URL    -> stockfighter.base_url
        STOCKFIGHTER_API_KEY     -> stockfighter.api_key
        STOCKFIGHTER_TIMEOUT_S   -> stockfighter.timeout_s
        STOCKFIGHTER_LOG_LEVEL   -> logging.level
        STOCKFIGHTER_LOG_FORMAT  -> logging.format
    """
    data: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p) as f:
                data = yaml.safe_load(f) or {}

    for env_var, (section, key) in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            data.setdefault(section, {})[key] = value

    return AppConfig.model_validate(data)
