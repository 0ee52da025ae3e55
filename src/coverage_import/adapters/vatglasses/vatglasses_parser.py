"""Parser for the VATglasses JSON data export."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from coverage_import.adapters.vatglasses.document import VatglassesData
from coverage_import.domain.errors import DocumentParseError, InputError
from coverage_import.domain.models import (
    DEFAULT_FREQUENCY,
    FacilityType,
    Position,
    PositionConfigFile,
    Station,
    StationConfigFile,
)

logger = logging.getLogger(__name__)


class VatglassesParser:
    """Converts a VATglasses export into positions and stations.

    The document is loaded on first use, so constructing a parser for a file does
    not touch the file system.
    """

    def __init__(
        self,
        path: Path | None = None,
        strict_facility_types: bool = True,
        data: VatglassesData | None = None,
    ) -> None:
        """Initialize with either a path to read or an already validated document."""
        if path is None and data is None:
            raise ValueError("Either path or data must be given")
        self._path = path
        self._data = data
        self._strict_facility_types = strict_facility_types
        self.duplicate_count = 0

    @classmethod
    def from_dict(cls, payload: Any, strict_facility_types: bool = True) -> "VatglassesParser":
        """Create a parser for an already decoded JSON payload."""
        return cls(data=cls._validate(payload), strict_facility_types=strict_facility_types)

    @property
    def data(self) -> VatglassesData:
        """The validated document, read from disk if necessary."""
        if self._data is None:
            self._data = self._load()
        return self._data

    def parse_positions(self) -> PositionConfigFile:
        """Create one position per entry of the positions mapping.

        Raises:
            DocumentParseError: If a position type is unknown and strict facility
                types are enabled.
        """
        positions: list[Position] = []
        for position_id, entry in self.data.positions.items():
            try:
                facility_type = FacilityType.parse(entry.facility_type)
            except ValueError as e:
                if self._strict_facility_types:
                    logger.error(
                        f"Failed to convert position {position_id}: "
                        f"unknown type '{entry.facility_type}'"
                    )
                    raise DocumentParseError(
                        f"Position {position_id} has unknown type '{entry.facility_type}'"
                    ) from e
                logger.warning(
                    f"Skipping position {position_id} of unknown type '{entry.facility_type}'"
                )
                continue

            positions.append(
                Position(
                    id=position_id,
                    facility_type=facility_type,
                    frequency=entry.frequency if entry.frequency is not None else DEFAULT_FREQUENCY,
                    prefixes=frozenset(entry.pre),
                )
            )

        return PositionConfigFile(positions=positions)

    def parse_stations(self) -> StationConfigFile:
        """Create one station per airspace entry.

        Entries repeating an (id, facility type) pair already seen are reported but
        still converted; identity is resolved when merging.
        """
        seen: set[tuple[str, FacilityType]] = set()
        duplicates = 0
        stations: list[Station] = []

        for airspace in self.data.airspace:
            facility_type = FacilityType.from_label(airspace.group)
            key = (airspace.id, facility_type)
            if key in seen:
                logger.warning(f"Duplicate airspace ID `{airspace.id}` ({facility_type.as_str()})")
                duplicates += 1
            seen.add(key)

            stations.append(
                Station(
                    id=airspace.id,
                    controlled_by=frozenset(airspace.owner),
                )
            )

        self.duplicate_count = duplicates
        if duplicates:
            logger.info(f"Found {duplicates} duplicate airspace entries")

        return StationConfigFile(stations=stations)

    def _load(self) -> VatglassesData:
        path = self._path
        try:
            with open(path, encoding="utf-8") as f:  # type: ignore[arg-type]
                payload = json.load(f)
        except OSError as e:
            logger.error(f"Failed to open input file {path}: {e}")
            raise InputError(f"Failed to open input file {path}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Failed to parse input file {path}: {e}")
            raise DocumentParseError(f"Failed to parse input file {path}: {e}") from e

        data = self._validate(payload)
        logger.info(f"Parsed VATglasses data: {data!r}")
        return data

    @staticmethod
    def _validate(payload: Any) -> VatglassesData:
        try:
            return VatglassesData.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Invalid VATglasses document: {e}")
            raise DocumentParseError(f"Invalid VATglasses document: {e}") from e
