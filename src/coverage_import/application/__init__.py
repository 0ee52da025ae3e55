"""Application layer - merge, ordering and import use cases."""

from coverage_import.application.merge import MergeResult, merge_positions, merge_stations
from coverage_import.application.ordering import sort_positions, sort_stations
from coverage_import.application.services import (
    CoverageImportService,
    ImportSummary,
    OutputSummary,
)

__all__ = [
    "CoverageImportService",
    "ImportSummary",
    "MergeResult",
    "OutputSummary",
    "merge_positions",
    "merge_stations",
    "sort_positions",
    "sort_stations",
]
