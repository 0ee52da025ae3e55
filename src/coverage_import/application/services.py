"""Application services (use cases) for importing coverage data."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from coverage_import.application.merge import merge_positions, merge_stations
from coverage_import.application.ordering import sort_positions, sort_stations

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from coverage_import.domain.ports import ConfigStore, PositionSource, StationSource

POSITIONS_LABEL = "Positions"
STATIONS_LABEL = "Stations"


@dataclass(frozen=True)
class OutputSummary:
    """Outcome of importing one kind of record."""

    path: Path
    records: int  # Records in the written file
    added: int  # Records that were not present before


@dataclass(frozen=True)
class ImportSummary:
    """Outcome of an import run. Kinds that were not requested are None."""

    positions: OutputSummary | None = None
    stations: OutputSummary | None = None


@dataclass(frozen=True)
class _PreparedOutput:
    label: str
    path: Path
    content: str
    records: int
    added: int


class CoverageImportService:
    """Runs parse, merge, sort, serialize and write for positions and stations."""

    def __init__(
        self,
        store: "ConfigStore",
        positions_file_name: str = "positions.toml",
        stations_file_name: str = "stations.toml",
    ) -> None:
        """Initialize with the store that owns the output directory."""
        self._store = store
        self._positions_file_name = positions_file_name
        self._stations_file_name = stations_file_name

    def import_positions(self, source: "PositionSource") -> OutputSummary:
        """Import positions only."""
        path = self._store.check_output_file(self._positions_file_name, POSITIONS_LABEL)
        return self._write(self._prepare_positions(source, path))

    def import_stations(self, source: "StationSource") -> OutputSummary:
        """Import stations only."""
        path = self._store.check_output_file(self._stations_file_name, STATIONS_LABEL)
        return self._write(self._prepare_stations(source, path))

    def run(
        self,
        positions_source: "PositionSource | None" = None,
        stations_source: "StationSource | None" = None,
    ) -> ImportSummary:
        """Import every requested kind.

        All output files are checked before any source is parsed, and every kind is
        fully prepared before the first file is written. A parse, merge or
        serialization error therefore leaves the output directory untouched. Writes
        happen in order stations, positions and stop at the first failure.
        """
        stations_path = (
            self._store.check_output_file(self._stations_file_name, STATIONS_LABEL)
            if stations_source is not None
            else None
        )
        positions_path = (
            self._store.check_output_file(self._positions_file_name, POSITIONS_LABEL)
            if positions_source is not None
            else None
        )

        prepared: list[_PreparedOutput] = []
        if stations_source is not None and stations_path is not None:
            prepared.append(self._prepare_stations(stations_source, stations_path))
        if positions_source is not None and positions_path is not None:
            prepared.append(self._prepare_positions(positions_source, positions_path))

        summaries = {output.label: self._write(output) for output in prepared}

        return ImportSummary(
            positions=summaries.get(POSITIONS_LABEL),
            stations=summaries.get(STATIONS_LABEL),
        )

    def _prepare_positions(self, source: "PositionSource", path: Path) -> _PreparedOutput:
        positions = source.parse_positions()
        logger.info(f"Parsed {len(positions.positions)} positions")

        existing = None
        if self._store.merge and path.exists():
            logger.info(f"Reading existing positions from {path}")
            existing = self._store.load_positions(path)

        result = merge_positions(positions, existing)
        ordered = sort_positions(result.config)
        return _PreparedOutput(
            label=POSITIONS_LABEL,
            path=path,
            content=self._store.render_positions(ordered),
            records=len(ordered.positions),
            added=result.added,
        )

    def _prepare_stations(self, source: "StationSource", path: Path) -> _PreparedOutput:
        stations = source.parse_stations()
        logger.info(f"Parsed {len(stations.stations)} stations")

        existing = None
        if self._store.merge and path.exists():
            logger.info(f"Reading existing stations from {path}")
            existing = self._store.load_stations(path)

        result = merge_stations(stations, existing)
        ordered = sort_stations(result.config)
        return _PreparedOutput(
            label=STATIONS_LABEL,
            path=path,
            content=self._store.render_stations(ordered),
            records=len(ordered.stations),
            added=result.added,
        )

    def _write(self, output: _PreparedOutput) -> OutputSummary:
        self._store.write(output.path, output.content, output.label)
        return OutputSummary(path=output.path, records=output.records, added=output.added)
