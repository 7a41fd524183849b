"""Configuration package - schemas, loading and environment expansion."""

from .manager import ConfigurationManager
from .schemas import AppConfig, LoggingConfig

__all__ = ["AppConfig", "LoggingConfig", "ConfigurationManager"]
