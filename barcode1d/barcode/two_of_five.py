"""
2 of 5 family barcodes: Interleaved 2 of 5 and Matrix 2 of 5.

Every digit is five elements, two of them wide. The check digit is optional
(``skip_checksum=True``). A decoded pattern carries no marker telling whether
its last digit is a check digit, so ``decode`` returns every digit as the
value unless ``checksum_included=True`` is passed.
"""

from typing import Any, ClassVar

from barcode1d.barcode.base import Barcode1D
from barcode1d.barcode.checksum import is_digits
from barcode1d.barcode.patterns import Pattern, decode_two_width, decode_with_mirror_reads, encode_two_width
from barcode1d.barcode.tables import (
    INTERLEAVED_2_OF_5_TABLE,
    MATRIX_2_OF_5_TABLE,
    TWO_OF_FIVE_CHECKSUM,
    TwoWidthTable,
)
from barcode1d.models.options import BarcodeOptions
from barcode1d.models.symbology import BarcodeSymbology


class TwoOfFiveBarcode(Barcode1D):
    """Variable-length numeric code drawn with wide and narrow elements."""

    table: ClassVar[TwoWidthTable]
    checksum_rule = TWO_OF_FIVE_CHECKSUM
    checksum_optional = True
    wn_supported = True
    decode_defaults: ClassVar[dict[str, Any]] = {"skip_checksum": True}

    @classmethod
    def _accepts(cls, value: str, checksum_included: bool, skip_checksum: bool) -> bool:
        if not is_digits(value):
            return False
        encoded_length = len(value) if checksum_included or skip_checksum else len(value) + 1
        min_length = 2 if checksum_included else 1
        return len(value) >= min_length and encoded_length % cls.table.digits_per_chunk == 0

    @classmethod
    def _has_check_digit_shape(cls, value: str) -> bool:
        # Pairing digits is a constraint on encoding, not on the checksum
        return is_digits(value) and len(value) >= 2

    @classmethod
    def _encode(cls, encoded_string: str, options: BarcodeOptions) -> Pattern:
        return encode_two_width(encoded_string, cls.table, options.wn_ratio)

    @classmethod
    def _decode_runs(cls, runs: Pattern) -> str:
        return decode_with_mirror_reads(
            lambda r: decode_two_width(r, cls.table), runs, cls.table.mirror_reads
        )


class Interleaved2of5(TwoOfFiveBarcode):
    """
    Interleaved 2 of 5: digits are encoded in pairs.

    The first digit of each pair is drawn in the five bars, the second in the
    five spaces between them, so the encoded string (check digit included)
    must have an even number of digits.

    Example:
        >>> Interleaved2of5("12", skip_checksum=True).wn()
        'nnnnwnnwnnnnwwwnn'
    """

    symbology = BarcodeSymbology.INTERLEAVED_2_OF_5
    table = INTERLEAVED_2_OF_5_TABLE


class Matrix2of5(TwoOfFiveBarcode):
    """
    Matrix 2 of 5: each digit is three bars and two spaces, followed by a
    narrow space.

    Example:
        >>> Matrix2of5("1234", skip_checksum=True).wn()
        'wnnnnnwnnnwnnwnnwnwwnnnnnnwnwnwnnnn'
    """

    symbology = BarcodeSymbology.MATRIX_2_OF_5
    table = MATRIX_2_OF_5_TABLE
