"""12-factor configuration adapter using environment variables."""

import codecs
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level name (DEBUG, INFO, ...)")

    # EuroScope sector file configuration
    sector_file_encoding: str = Field(
        default="cp1252",
        description="Single-byte encoding of EuroScope sector files",
    )
    positions_section: str = Field(
        default="[POSITIONS]",
        description="Section marker that starts position records in a sector file",
    )

    # VATglasses configuration
    strict_facility_types: bool = Field(
        default=True,
        description="Fail the run on unknown position types instead of skipping them",
    )

    # Output configuration
    positions_file_name: str = Field(
        default="positions.toml", description="File name of the positions output"
    )
    stations_file_name: str = Field(
        default="stations.toml", description="File name of the stations output"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("sector_file_encoding")
    @classmethod
    def validate_sector_file_encoding(cls, v: str) -> str:
        """Validate the encoding is known to Python."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"sector_file_encoding '{v}' is not a known encoding") from e
        return v

    @field_validator("positions_section")
    @classmethod
    def validate_positions_section(cls, v: str) -> str:
        """Validate the section marker is bracketed."""
        v = v.strip()
        if not (v.startswith("[") and v.endswith("]")):
            raise ValueError("positions_section must be a bracketed marker such as '[POSITIONS]'")
        return v
