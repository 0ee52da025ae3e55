"""Deterministic ordering of configuration files before they are persisted."""

from coverage_import.domain.models import (
    Position,
    PositionConfigFile,
    Station,
    StationConfigFile,
)


def _position_sort_key(position: Position) -> tuple[int, str]:
    # Higher ranked facility types first, then id ascending
    return (-position.facility_type.rank, position.id)


def _station_sort_key(station: Station) -> str:
    return station.id


def sort_positions(config: PositionConfigFile) -> PositionConfigFile:
    """Return positions ordered by facility type (descending), then id."""
    return PositionConfigFile(positions=sorted(config.positions, key=_position_sort_key))


def sort_stations(config: StationConfigFile) -> StationConfigFile:
    """Return stations ordered by id."""
    return StationConfigFile(stations=sorted(config.stations, key=_station_sort_key))
