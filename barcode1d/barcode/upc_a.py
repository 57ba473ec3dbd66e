"""
UPC-A barcodes.
"""

from barcode1d.barcode.ean13 import EAN13
from barcode1d.barcode.family import PrefixedBarcode
from barcode1d.models.symbology import BarcodeSymbology


class UPCA(PrefixedBarcode):
    """
    UPC-A: an EAN-13 whose first digit is "0".

    The value is an 11-digit payload: a one-digit number system, a five-digit
    manufacturer code and a five-digit product code, followed by the check
    digit. Pass ``checksum_included=True`` when the value already carries it.

    Number systems:
        0, 1, 6, 7, 8 - standard UPC codes
        2 - random weight items, priced in store
        3 - pharmaceuticals
        4 - in-store use, loyalty cards
        5, 9 - coupons

    Example:
        >>> code = UPCA("82899900682")
        >>> code.check_digit
        3
        >>> code.width
        95
    """

    symbology = BarcodeSymbology.UPC_A
    parent = EAN13
    prefix = "0"

    number_system: str
    manufacturers_code: str
    product_code: str

    def _derive_fields(self) -> None:
        self.number_system = self.value[:1]
        self.manufacturers_code = self.value[1:6]
        self.product_code = self.value[6:11]

    def to_ean13(self) -> EAN13:
        """The equivalent EAN-13 object."""
        ean = self.to_parent()
        if not isinstance(ean, EAN13):
            raise TypeError(f"Unexpected parent type: {type(ean).__name__}")
        return ean
