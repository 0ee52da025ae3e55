"""Schema of the VATglasses data export."""

from pydantic import BaseModel, ConfigDict, Field


class VatglassesAirspace(BaseModel):
    """An airspace entry of the export."""

    model_config = ConfigDict(extra="ignore")

    id: str
    group: str
    owner: list[str]


class VatglassesPosition(BaseModel):
    """A position entry of the export, keyed by position id in the document."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    pre: list[str]
    facility_type: str = Field(alias="type")
    frequency: str | None = None


class VatglassesData(BaseModel):
    """Top level of the export. Both collections are required."""

    model_config = ConfigDict(extra="ignore")

    airspace: list[VatglassesAirspace]
    positions: dict[str, VatglassesPosition]

    def __repr__(self) -> str:
        return (
            f"VatglassesData(airspace={len(self.airspace)}, positions={len(self.positions)})"
        )
