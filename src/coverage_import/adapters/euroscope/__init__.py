"""EuroScope sector file adapter."""

from coverage_import.adapters.euroscope.sector_file_parser import EuroscopeSectorFileParser

__all__ = ["EuroscopeSectorFileParser"]
