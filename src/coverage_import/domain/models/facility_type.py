"""Facility type domain model."""

from enum import Enum


class FacilityType(str, Enum):
    """Ordered classification of a position or airspace within the ATC hierarchy.

    The value is the short code used as callsign suffix (e.g. ``EDDM_TWR``) and as
    the persisted representation. Ordering follows ``rank``, not the code.
    """

    UNKNOWN = "UNKNOWN"
    RAMP = "RMP"
    DELIVERY = "DEL"
    GROUND = "GND"
    TOWER = "TWR"
    DEPARTURE = "DEP"
    APPROACH = "APP"
    CENTER = "CTR"
    FLIGHT_SERVICE_STATION = "FSS"

    @property
    def rank(self) -> int:
        """Position in the hierarchy, higher means more senior."""
        return _RANKS[self]

    def as_str(self) -> str:
        """Return the short code."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> "FacilityType":
        """Parse a code or long name, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If the text names no known facility type.
        """
        key = text.strip().upper()
        facility_type = _ALIASES.get(key)
        if facility_type is None:
            raise ValueError(f"Unknown facility type: {text!r}")
        return facility_type

    @classmethod
    def from_label(cls, label: str) -> "FacilityType":
        """Derive a facility type from a free-form label, falling back to UNKNOWN.

        Accepts plain codes as well as callsign-style labels where the type is the
        suffix after the last underscore.
        """
        try:
            return cls.parse(label)
        except ValueError:
            pass

        _, sep, suffix = label.rpartition("_")
        if sep:
            try:
                return cls.parse(suffix)
            except ValueError:
                pass

        return cls.UNKNOWN


_RANKS = {
    FacilityType.UNKNOWN: 0,
    FacilityType.RAMP: 1,
    FacilityType.DELIVERY: 2,
    FacilityType.GROUND: 3,
    FacilityType.TOWER: 4,
    FacilityType.DEPARTURE: 5,
    FacilityType.APPROACH: 6,
    FacilityType.CENTER: 7,
    FacilityType.FLIGHT_SERVICE_STATION: 8,
}

_ALIASES = {
    **{facility_type.value: facility_type for facility_type in FacilityType},
    "RAMP": FacilityType.RAMP,
    "APRON": FacilityType.RAMP,
    "DELIVERY": FacilityType.DELIVERY,
    "GROUND": FacilityType.GROUND,
    "TOWER": FacilityType.TOWER,
    "DEPARTURE": FacilityType.DEPARTURE,
    "APPROACH": FacilityType.APPROACH,
    "CENTER": FacilityType.CENTER,
    "CENTRE": FacilityType.CENTER,
    "FLIGHTSERVICESTATION": FacilityType.FLIGHT_SERVICE_STATION,
}
