"""Station source port."""

from typing import Protocol

from coverage_import.domain.models.station import StationConfigFile


class StationSource(Protocol):
    """Port for sources that produce canonical stations."""

    def parse_stations(self) -> StationConfigFile:
        """Parse the source into stations. Order of the result is unspecified."""
        ...
