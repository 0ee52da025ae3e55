"""Adapters layer - source formats, storage and settings."""

from coverage_import.adapters.config import AppConfig
from coverage_import.adapters.euroscope import EuroscopeSectorFileParser
from coverage_import.adapters.storage import TomlConfigStore
from coverage_import.adapters.vatglasses import VatglassesParser

__all__ = [
    "AppConfig",
    "EuroscopeSectorFileParser",
    "TomlConfigStore",
    "VatglassesParser",
]
