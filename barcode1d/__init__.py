"""
barcode1d: encode and decode 1D barcode patterns.

Values are turned into bar/space patterns rendered as bars ("10100011..."),
run lengths ("1113211...") or wide/narrow strings ("wnnnnn..."), and patterns
are decoded back into validated values.

Example:
    >>> from barcode1d import UPCA
    >>> code = UPCA("012676510226", checksum_included=True)
    >>> code.rle()[:11]
    '11132112221'
    >>> UPCA.decode(code.bars()).value
    '01267651022'
"""

from barcode1d.barcode import (
    BARCODE_CLASSES,
    EAN8,
    EAN13,
    UPCA,
    Barcode1D,
    Interleaved2of5,
    Matrix2of5,
    PrefixedBarcode,
    get_barcode_class,
)
from barcode1d.config import Settings, configure_logging, get_settings
from barcode1d.errors import (
    Barcode1DError,
    BarcodeNotFoundError,
    ChecksumError,
    NotImplementedError,
    UndecodableCharactersError,
    UnencodableCharactersError,
    UnencodableError,
)
from barcode1d.models import BarcodeOptions, BarcodeSymbology

__all__ = [
    # Symbologies
    "BARCODE_CLASSES",
    "Barcode1D",
    "EAN13",
    "EAN8",
    "Interleaved2of5",
    "Matrix2of5",
    "PrefixedBarcode",
    "UPCA",
    "get_barcode_class",
    # Models
    "BarcodeOptions",
    "BarcodeSymbology",
    # Errors
    "Barcode1DError",
    "BarcodeNotFoundError",
    "ChecksumError",
    "NotImplementedError",
    "UndecodableCharactersError",
    "UnencodableCharactersError",
    "UnencodableError",
    # Configuration
    "Settings",
    "configure_logging",
    "get_settings",
]
