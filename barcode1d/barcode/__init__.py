"""
Barcode symbology codecs.
"""

from barcode1d.barcode.base import Barcode1D
from barcode1d.barcode.ean8 import EAN8
from barcode1d.barcode.ean13 import EAN13
from barcode1d.barcode.family import PrefixedBarcode
from barcode1d.barcode.two_of_five import Interleaved2of5, Matrix2of5
from barcode1d.barcode.upc_a import UPCA
from barcode1d.errors import BarcodeNotFoundError
from barcode1d.models.symbology import BarcodeSymbology

# Map symbologies to their classes
BARCODE_CLASSES: dict[BarcodeSymbology, type[Barcode1D]] = {
    BarcodeSymbology.EAN_13: EAN13,
    BarcodeSymbology.EAN_8: EAN8,
    BarcodeSymbology.UPC_A: UPCA,
    BarcodeSymbology.INTERLEAVED_2_OF_5: Interleaved2of5,
    BarcodeSymbology.MATRIX_2_OF_5: Matrix2of5,
}


def get_barcode_class(symbology: BarcodeSymbology | str) -> type[Barcode1D]:
    """
    Look up the barcode class for a symbology.

    Args:
        symbology: Symbology enum member or its string value, e.g. "EAN-13"

    Raises:
        BarcodeNotFoundError: The symbology is not supported
    """
    try:
        return BARCODE_CLASSES[BarcodeSymbology(symbology)]
    except ValueError as e:
        raise BarcodeNotFoundError(f"Unsupported symbology: {symbology}") from e


__all__ = [
    "BARCODE_CLASSES",
    "Barcode1D",
    "EAN13",
    "EAN8",
    "Interleaved2of5",
    "Matrix2of5",
    "PrefixedBarcode",
    "UPCA",
    "get_barcode_class",
]
