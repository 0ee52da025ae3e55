"""TOML file storage for positions and stations configuration."""

import logging
from pathlib import Path
from typing import Any, TypeVar

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Fallback for older Python

import tomli_w
from pydantic import BaseModel, ValidationError

from coverage_import.domain.errors import InputError, MergeSourceError, SerializationError
from coverage_import.domain.models import PositionConfigFile, StationConfigFile

logger = logging.getLogger(__name__)

ConfigT = TypeVar("ConfigT", bound=BaseModel)


def check_input_exists(path: Path) -> None:
    """Fail unless path is an existing file."""
    if not path.exists():
        logger.error(f"Input file {path} does not exist")
        raise InputError(f"Input file {path} does not exist")
    if not path.is_file():
        logger.error(f"Input {path} is not a file")
        raise InputError(f"Input {path} is not a file")


class TomlConfigStore:
    """Reads and writes configuration files inside one output directory."""

    def __init__(self, output_dir: Path, overwrite: bool = False, merge: bool = False) -> None:
        """Initialize the store.

        Args:
            output_dir: Directory the configuration files live in.
            overwrite: Allow replacing existing output files.
            merge: Merge into existing output files instead of replacing them.
        """
        self.output_dir = output_dir
        self.overwrite = overwrite
        self.merge = merge

    def ensure_output_directory(self) -> None:
        """Create the output directory if needed."""
        output = self.output_dir
        if output.exists():
            if not output.is_dir():
                logger.error(f"Output {output} is not a directory")
                raise InputError(f"Output {output} is not a directory")
            return

        try:
            output.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create output directory {output}: {e}")
            raise InputError(f"Failed to create output directory {output}") from e

    def check_output_file(self, file_name: str, label: str) -> Path:
        """Resolve an output file and check it may be written.

        An existing file is accepted when overwriting or merging.

        Raises:
            InputError: If the file exists and neither overwrite nor merge is set,
                or if the path is not a regular file.
        """
        path = self.output_dir / file_name
        if not path.exists():
            return path

        if not path.is_file():
            logger.error(f"{label} output {path} is not a file")
            raise InputError(f"{label} output {path} is not a file")

        if self.merge:
            logger.info(f"Merging into existing {label.lower()} output file: {path}")
        elif self.overwrite:
            logger.warning(f"Overwriting existing {label.lower()} output file: {path}")
        else:
            logger.error(f"{label} output file {path} already exists")
            raise InputError(f"{label} output file {path} already exists")

        return path

    def load_positions(self, path: Path) -> PositionConfigFile | None:
        """Load persisted positions, or None if there is no file."""
        return self._load(path, PositionConfigFile)

    def load_stations(self, path: Path) -> StationConfigFile | None:
        """Load persisted stations, or None if there is no file."""
        return self._load(path, StationConfigFile)

    def render_positions(self, config: PositionConfigFile) -> str:
        """Serialize positions to TOML."""
        return self._render(config, "positions")

    def render_stations(self, config: StationConfigFile) -> str:
        """Serialize stations to TOML."""
        return self._render(config, "stations")

    def write(self, path: Path, content: str, label: str) -> None:
        """Write serialized content, replacing any existing file."""
        try:
            encoded = content.encode("utf-8")
            path.write_bytes(encoded)
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to write {label.lower()} output file {path}: {e}")
            raise SerializationError(f"Failed to write {label.lower()} output file {path}") from e
        logger.info(f"Wrote {label.lower()} to {path}")

    def _load(self, path: Path, model: type[ConfigT]) -> ConfigT | None:
        if not path.exists():
            return None

        try:
            with open(path, "rb") as f:
                data: dict[str, Any] = tomllib.load(f)
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            logger.error(f"Failed to read existing file {path}: {e}")
            raise MergeSourceError(f"Failed to read existing file {path}") from e

        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid existing file {path}: {e}")
            raise MergeSourceError(f"Invalid existing file {path}: {e}") from e

    @staticmethod
    def _render(config: BaseModel, kind: str) -> str:
        try:
            data = config.model_dump(mode="json", exclude_none=True)
            content = tomli_w.dumps(data)
            # Output is written as UTF-8, so text that cannot be encoded fails here
            content.encode("utf-8")
            return content
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize {kind}: {e}")
            raise SerializationError(f"Failed to serialize {kind}") from e
