"""VATglasses data export adapter."""

from coverage_import.adapters.vatglasses.document import VatglassesData
from coverage_import.adapters.vatglasses.vatglasses_parser import VatglassesParser

__all__ = ["VatglassesData", "VatglassesParser"]
