"""
EAN-13 barcodes.
"""

from typing import Any, ClassVar

from barcode1d.barcode.base import Barcode1D
from barcode1d.barcode.checksum import is_digits
from barcode1d.barcode.patterns import Pattern, decode_fixed_width, decode_with_mirror_reads, encode_fixed_width
from barcode1d.barcode.tables import EAN13_TABLE, EAN_CHECKSUM, FixedWidthTable
from barcode1d.models.options import BarcodeOptions
from barcode1d.models.symbology import BarcodeSymbology


class FixedWidthBarcode(Barcode1D):
    """Fixed-length EAN/UPC style code with a mandatory check digit."""

    table: ClassVar[FixedWidthTable]
    checksum_rule = EAN_CHECKSUM
    decode_defaults: ClassVar[dict[str, Any]] = {"checksum_included": True}

    @classmethod
    def _accepts(cls, value: str, checksum_included: bool, skip_checksum: bool) -> bool:
        length = cls.table.digit_count if checksum_included else cls.table.digit_count - 1
        return len(value) == length and is_digits(value)

    @classmethod
    def _encode(cls, encoded_string: str, options: BarcodeOptions) -> Pattern:
        return encode_fixed_width(encoded_string, cls.table)

    @classmethod
    def _decode_runs(cls, runs: Pattern) -> str:
        return decode_with_mirror_reads(
            lambda r: decode_fixed_width(r, cls.table), runs, cls.table.mirror_reads
        )


class EAN13(FixedWidthBarcode):
    """
    EAN-13: a 12-digit payload plus a check digit.

    The first digit is not drawn as bars; it selects the odd/even parity of
    the six left-hand digits. The payload splits into a two-digit number
    system, a five-digit manufacturer code and a five-digit product code.
    There is no wide/narrow form since bars and spaces are 1 to 4 modules.

    Example:
        >>> code = EAN13("001267651022")
        >>> code.encoded_string
        '0012676510226'
        >>> code.rle()[:7]
        '1113211'
    """

    symbology = BarcodeSymbology.EAN_13
    table = EAN13_TABLE

    number_system: str
    manufacturers_code: str
    product_code: str

    def _derive_fields(self) -> None:
        self.number_system = self.value[:2]
        self.manufacturers_code = self.value[2:7]
        self.product_code = self.value[7:12]
