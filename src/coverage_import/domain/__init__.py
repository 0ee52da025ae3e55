"""Domain layer - canonical models and ports."""

from coverage_import.domain.models import (
    FacilityType,
    Position,
    PositionConfigFile,
    Station,
    StationConfigFile,
)
from coverage_import.domain.ports import ConfigStore, PositionSource, StationSource

__all__ = [
    "ConfigStore",
    "FacilityType",
    "Position",
    "PositionConfigFile",
    "PositionSource",
    "Station",
    "StationConfigFile",
    "StationSource",
]
