"""Configuration adapters."""

from coverage_import.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
