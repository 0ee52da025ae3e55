"""Position domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from coverage_import.domain.models.facility_type import FacilityType

# Frequency assigned to positions whose source does not provide one.
DEFAULT_FREQUENCY = "199.998"


class Position(BaseModel):
    """A controllable radio position."""

    model_config = ConfigDict(frozen=True)

    id: str
    facility_type: FacilityType
    frequency: str = DEFAULT_FREQUENCY
    prefixes: frozenset[str] = frozenset()
    profile_id: str | None = None

    @field_validator("facility_type", mode="before")
    @classmethod
    def parse_facility_type(cls, v: Any) -> Any:
        """Accept any spelling understood by FacilityType.parse."""
        if isinstance(v, str) and not isinstance(v, FacilityType):
            return FacilityType.parse(v)
        return v

    @field_serializer("prefixes")
    def serialize_prefixes(self, prefixes: frozenset[str]) -> list[str]:
        """Render prefixes in lexicographic order."""
        return sorted(prefixes)


class PositionConfigFile(BaseModel):
    """Full positions configuration document."""

    positions: list[Position] = []
