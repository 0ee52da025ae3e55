"""Command line entry point for importing coverage data."""

import logging
import sys
from pathlib import Path
from typing import Any

from coverage_import.adapters.config import AppConfig
from coverage_import.adapters.euroscope import EuroscopeSectorFileParser
from coverage_import.adapters.storage import TomlConfigStore, check_input_exists
from coverage_import.adapters.vatglasses import VatglassesParser
from coverage_import.application.services import CoverageImportService, ImportSummary
from coverage_import.domain.errors import CoverageImportError

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _setup_argparse() -> Any:
    """Set up and configure argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Convert coverage source data into positions and stations configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Import positions from a EuroScope sector file, restricted to German positions
  coverage-import euroscope EDMM.ese dataset/ --prefix ED

  # Import stations and positions from VATglasses data, merging into existing files
  coverage-import vatglasses de.json dataset/ --merge
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Source format to import")

    euroscope_parser = subparsers.add_parser(
        "euroscope", help="Import positions from a EuroScope sector file"
    )
    euroscope_parser.add_argument("input", type=Path, help="Path to the .ese sector file")
    euroscope_parser.add_argument("output", type=Path, help="Output directory")
    euroscope_parser.add_argument(
        "-p",
        "--prefix",
        dest="prefixes",
        action="append",
        default=[],
        help="Only import positions starting with this prefix (repeatable)",
    )
    _add_output_arguments(euroscope_parser)

    vatglasses_parser = subparsers.add_parser(
        "vatglasses", help="Import stations and positions from VATglasses data"
    )
    vatglasses_parser.add_argument("input", type=Path, help="Path to the VATglasses JSON file")
    vatglasses_parser.add_argument("output", type=Path, help="Output directory")
    _add_output_arguments(vatglasses_parser)

    return parser


def _add_output_arguments(parser: Any) -> None:
    parser.add_argument(
        "--overwrite", action="store_true", help="Overwrite existing output files"
    )
    parser.add_argument(
        "--merge",
        action="store_true",
        help="Add new records to existing output files instead of replacing them",
    )


def _prepare_store(args: Any) -> TomlConfigStore:
    """Validate input and output paths and return the store for the output directory."""
    check_input_exists(args.input)
    store = TomlConfigStore(args.output, overwrite=args.overwrite, merge=args.merge)
    store.ensure_output_directory()
    return store


def _handle_euroscope_command(args: Any, config: AppConfig) -> ImportSummary:
    """Import positions from a EuroScope sector file."""
    logger.info(f"Parsing EuroScope sectorfile data from {args.input} to {args.output}")
    store = _prepare_store(args)
    source = EuroscopeSectorFileParser(
        args.input,
        prefixes=args.prefixes,
        encoding=config.sector_file_encoding,
        section=config.positions_section,
    )
    service = CoverageImportService(
        store,
        positions_file_name=config.positions_file_name,
        stations_file_name=config.stations_file_name,
    )
    return service.run(positions_source=source)


def _handle_vatglasses_command(args: Any, config: AppConfig) -> ImportSummary:
    """Import stations and positions from a VATglasses export."""
    logger.info(f"Parsing VATglasses data from {args.input} to {args.output}")
    store = _prepare_store(args)
    source = VatglassesParser(args.input, strict_facility_types=config.strict_facility_types)
    service = CoverageImportService(
        store,
        positions_file_name=config.positions_file_name,
        stations_file_name=config.stations_file_name,
    )
    return service.run(positions_source=source, stations_source=source)


def _log_summary(summary: ImportSummary) -> None:
    for label, output in (("stations", summary.stations), ("positions", summary.positions)):
        if output is None:
            continue
        logger.info(f"Wrote {output.records} {label} ({output.added} new) to {output.path}")


def _execute_command(args: Any, config: AppConfig) -> ImportSummary:
    """Execute the appropriate command based on args."""
    if args.command == "euroscope":
        return _handle_euroscope_command(args, config)
    if args.command == "vatglasses":
        return _handle_vatglasses_command(args, config)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig()
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1
    _configure_logging("DEBUG" if args.verbose else config.log_level)

    try:
        summary = _execute_command(args, config)
    except CoverageImportError as e:
        logger.error(f"Import failed: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error(f"Error: {e}")
        return 1

    _log_summary(summary)
    logger.info(f"Wrote output files to {args.output}")
    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
