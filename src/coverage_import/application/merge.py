"""Additive merge of freshly parsed records into a persisted configuration."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from coverage_import.domain.models import PositionConfigFile, StationConfigFile

logger = logging.getLogger(__name__)


class _Identified(Protocol):
    @property
    def id(self) -> str: ...


RecordT = TypeVar("RecordT", bound=_Identified)
ConfigT = TypeVar("ConfigT")


@dataclass(frozen=True)
class MergeResult(Generic[ConfigT]):
    """Combined configuration and the number of records it gained."""

    config: ConfigT
    added: int


def _merge_records(
    fresh: Iterable[RecordT], existing: Iterable[RecordT]
) -> tuple[list[RecordT], int]:
    """Append fresh records whose id is not yet present. Existing records are never replaced."""
    merged = list(existing)
    seen_ids = {record.id for record in merged}

    added = 0
    for record in fresh:
        if record.id in seen_ids:
            continue
        merged.append(record)
        seen_ids.add(record.id)
        added += 1

    return merged, added


def merge_positions(
    fresh: PositionConfigFile, existing: PositionConfigFile | None
) -> MergeResult[PositionConfigFile]:
    """Merge fresh positions into an existing configuration, keyed by position id."""
    if existing is None:
        return MergeResult(config=fresh, added=len(fresh.positions))

    positions, added = _merge_records(fresh.positions, existing.positions)
    logger.info(f"Merged {added} new positions")
    return MergeResult(config=PositionConfigFile(positions=positions), added=added)


def merge_stations(
    fresh: StationConfigFile, existing: StationConfigFile | None
) -> MergeResult[StationConfigFile]:
    """Merge fresh stations into an existing configuration, keyed by station id."""
    if existing is None:
        return MergeResult(config=fresh, added=len(fresh.stations))

    stations, added = _merge_records(fresh.stations, existing.stations)
    logger.info(f"Merged {added} new stations")
    return MergeResult(config=StationConfigFile(stations=stations), added=added)
