"""Configuration store port."""

from pathlib import Path
from typing import Protocol

from coverage_import.domain.models.position import PositionConfigFile
from coverage_import.domain.models.station import StationConfigFile


class ConfigStore(Protocol):
    """Port for reading and writing persisted configuration files."""

    merge: bool

    def check_output_file(self, file_name: str, label: str) -> Path:
        """Resolve an output file, failing if it may not be replaced."""
        ...

    def load_positions(self, path: Path) -> PositionConfigFile | None:
        """Load previously persisted positions, or None if the file does not exist."""
        ...

    def load_stations(self, path: Path) -> StationConfigFile | None:
        """Load previously persisted stations, or None if the file does not exist."""
        ...

    def render_positions(self, config: PositionConfigFile) -> str:
        """Serialize positions to the persisted text format."""
        ...

    def render_stations(self, config: StationConfigFile) -> str:
        """Serialize stations to the persisted text format."""
        ...

    def write(self, path: Path, content: str, label: str) -> None:
        """Write serialized content to path."""
        ...
