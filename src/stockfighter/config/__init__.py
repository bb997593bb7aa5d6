"""Configuration system."""

from stockfighter.config.loader import load_config
from stockfighter.config.schema import AppConfig, ClientConfig, LoggingConfig

__all__ = ["AppConfig", "ClientConfig", "LoggingConfig", "load_config"]
