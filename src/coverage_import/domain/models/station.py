"""Station domain model."""

from pydantic import BaseModel, ConfigDict, field_serializer


class Station(BaseModel):
    """An airspace or sector that can be controlled by one or more positions."""

    model_config = ConfigDict(frozen=True)

    id: str
    parent_id: str | None = None
    controlled_by: frozenset[str] = frozenset()  # Position ids

    @field_serializer("controlled_by")
    def serialize_controlled_by(self, controlled_by: frozenset[str]) -> list[str]:
        """Render owning position ids in lexicographic order."""
        return sorted(controlled_by)


class StationConfigFile(BaseModel):
    """Full stations configuration document."""

    stations: list[Station] = []
