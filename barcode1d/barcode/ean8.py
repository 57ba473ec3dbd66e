"""
EAN-8 barcodes.
"""

from barcode1d.barcode.ean13 import FixedWidthBarcode
from barcode1d.barcode.tables import EAN8_TABLE
from barcode1d.models.symbology import BarcodeSymbology


class EAN8(FixedWidthBarcode):
    """EAN-8: a 7-digit payload plus a check digit, all left-hand digits odd parity."""

    symbology = BarcodeSymbology.EAN_8
    table = EAN8_TABLE

    number_system: str
    product_code: str

    def _derive_fields(self) -> None:
        self.number_system = self.value[:2]
        self.product_code = self.value[2:7]
