"""
Symbology identifiers.
"""

from enum import Enum


class BarcodeSymbology(str, Enum):
    """Supported barcode symbologies."""

    EAN_13 = "EAN-13"
    EAN_8 = "EAN-8"
    UPC_A = "UPC-A"
    INTERLEAVED_2_OF_5 = "I2/5"
    MATRIX_2_OF_5 = "Matrix 2/5"
