"""Parser for EuroScope sector files (ESE format)."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from coverage_import.domain.errors import InputError
from coverage_import.domain.models import FacilityType, Position, PositionConfigFile

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "cp1252"
POSITIONS_SECTION = "[POSITIONS]"

# NAME:RADIO_NAME:FREQUENCY:IDENTIFIER:MIDDLE_LETTER:PREFIX:SUFFIX[:...]
MIN_FIELDS = 7
ID_FIELD = 0
FREQUENCY_FIELD = 2
PREFIX_FIELD = 5
FACILITY_TYPE_FIELD = 6


def _is_section_marker(line: str) -> bool:
    return line.startswith("[") and line.endswith("]")


class EuroscopeSectorFileParser:
    """Extracts positions from the positions section of a EuroScope sector file."""

    def __init__(
        self,
        path: Path,
        prefixes: Sequence[str] = (),
        encoding: str = DEFAULT_ENCODING,
        section: str = POSITIONS_SECTION,
    ) -> None:
        """Initialize the parser.

        Args:
            path: Sector file to read.
            prefixes: Only lines starting with one of these are considered. Empty accepts all.
            encoding: Single-byte encoding the file is written in.
            section: Marker line that opens the positions section.
        """
        self._path = path
        self._prefixes = tuple(prefixes)
        self._encoding = encoding
        self._section = section
        self.dropped_count = 0

    def parse_positions(self) -> PositionConfigFile:
        """Read the sector file and parse its positions."""
        try:
            raw = self._path.read_bytes()
        except OSError as e:
            logger.error(f"Failed to open input file {self._path}: {e}")
            raise InputError(f"Failed to open input file {self._path}") from e

        text = raw.decode(self._encoding, errors="replace")
        # Only newlines end a line; trimming removes a trailing carriage return
        positions = self.parse_lines(text.split("\n"))
        logger.info(
            f"Parsed {len(positions)} positions from {self._path} ({self.dropped_count} dropped)"
        )
        return PositionConfigFile(positions=positions)

    def parse_lines(self, lines: Iterable[str]) -> list[Position]:
        """Parse positions from already decoded lines.

        Malformed lines and lines of unknown facility type are dropped. Parsing
        stops at the first section marker following the positions section.
        """
        positions: list[Position] = []
        in_positions_section = False
        self.dropped_count = 0

        for line in lines:
            trimmed = line.strip()

            # Empty line or comment
            if not trimmed or trimmed.startswith(";"):
                continue

            if trimmed == self._section:
                in_positions_section = True
                continue

            if not in_positions_section:
                continue

            if _is_section_marker(trimmed):
                break

            if self._prefixes and not trimmed.startswith(self._prefixes):
                continue

            try:
                position = self.parse_line(trimmed)
            except ValueError as e:
                logger.debug(f"Skipping line {trimmed!r}: {e}")
                self.dropped_count += 1
                continue

            if position.facility_type == FacilityType.UNKNOWN:
                logger.debug(f"Skipping position {position.id} of unknown facility type")
                self.dropped_count += 1
                continue

            positions.append(position)

        return positions

    @staticmethod
    def parse_line(line: str) -> Position:
        """Parse a single colon separated position line.

        Raises:
            ValueError: If the line has too few fields or an unknown facility type.
        """
        parts = line.split(":")
        if len(parts) < MIN_FIELDS:
            raise ValueError(f"Invalid format: expected at least {MIN_FIELDS} fields")

        facility_type = FacilityType.parse(parts[FACILITY_TYPE_FIELD])

        return Position(
            id=parts[ID_FIELD],
            facility_type=facility_type,
            frequency=parts[FREQUENCY_FIELD],
            prefixes=frozenset([parts[PREFIX_FIELD]]),
        )
