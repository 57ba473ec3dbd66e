"""
Pydantic models and enums shared by the codecs.
"""

from barcode1d.models.options import BarcodeOptions
from barcode1d.models.symbology import BarcodeSymbology

__all__ = [
    "BarcodeOptions",
    "BarcodeSymbology",
]
