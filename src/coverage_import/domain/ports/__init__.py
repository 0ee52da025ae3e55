"""Ports (interfaces) for the ports-and-adapters architecture."""

from coverage_import.domain.ports.config_store import ConfigStore
from coverage_import.domain.ports.position_source import PositionSource
from coverage_import.domain.ports.station_source import StationSource

__all__ = [
    "ConfigStore",
    "PositionSource",
    "StationSource",
]
