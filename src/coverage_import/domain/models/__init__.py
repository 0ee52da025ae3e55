"""Canonical domain models for coverage configuration."""

from coverage_import.domain.models.facility_type import FacilityType
from coverage_import.domain.models.position import (
    DEFAULT_FREQUENCY,
    Position,
    PositionConfigFile,
)
from coverage_import.domain.models.station import Station, StationConfigFile

__all__ = [
    "DEFAULT_FREQUENCY",
    "FacilityType",
    "Position",
    "PositionConfigFile",
    "Station",
    "StationConfigFile",
]
