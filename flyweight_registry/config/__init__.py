"""Configuration package."""

from .loader import load_config
from .schemas import AppConfig, LoggingConfig, RegistryConfig

__all__ = ["AppConfig", "LoggingConfig", "RegistryConfig", "load_config"]
