"""Position source port."""

from typing import Protocol

from coverage_import.domain.models.position import PositionConfigFile


class PositionSource(Protocol):
    """Port for sources that produce canonical positions."""

    def parse_positions(self) -> PositionConfigFile:
        """Parse the source into positions. Order of the result is unspecified."""
        ...
