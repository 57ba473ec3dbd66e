"""
Symbologies defined as another symbology with a fixed leading digit.
"""

from typing import Any, ClassVar

from barcode1d import errors
from barcode1d.barcode.base import Barcode1D, OptionsArg
from barcode1d.barcode.patterns import Pattern
from barcode1d.models.options import BarcodeOptions


class PrefixedBarcode(Barcode1D):
    """
    A symbology that is its parent with ``prefix`` in front of every value.

    Checksums, patterns and decoding are delegated to the parent on the
    prefixed digit string; only the field layout of the shorter value is the
    subclass's own. Adding a family member is a matter of setting ``parent``
    and ``prefix``.
    """

    parent: ClassVar[type[Barcode1D]]
    prefix: ClassVar[str]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        parent = cls.__dict__.get("parent")
        if parent is not None:
            cls.checksum_rule = parent.checksum_rule
            cls.checksum_optional = parent.checksum_optional
            cls.wn_supported = parent.wn_supported
            cls.decode_defaults = parent.decode_defaults

    def __init__(self, value: str | int, options: OptionsArg = None, **overrides: Any) -> None:
        options = BarcodeOptions.build(options, **overrides)
        super().__init__(self._strip_prefix(str(value), options.checksum_included), options)

    @classmethod
    def _strip_prefix(cls, value: str, checksum_included: bool) -> str:
        """Drop an already-present prefix from a value of prefixed length."""
        if value.startswith(cls.prefix) and cls._accepts(
            value[len(cls.prefix) :], checksum_included, False
        ):
            return value[len(cls.prefix) :]
        return value

    @classmethod
    def _accepts(cls, value: str, checksum_included: bool, skip_checksum: bool) -> bool:
        return cls.parent._accepts(cls.prefix + value, checksum_included, skip_checksum)

    @classmethod
    def can_encode(cls, value: str | int, options: Any = None) -> bool:
        """Whether value can be encoded; the prefix may already be present."""
        value = str(value)
        if super().can_encode(value, options):
            return True
        if value.startswith(cls.prefix):
            return super().can_encode(value[len(cls.prefix) :], options)
        return False

    @classmethod
    def generate_check_digit_for(cls, value: str) -> int:
        value = cls._strip_prefix(str(value), False)
        return cls.parent.generate_check_digit_for(cls.prefix + value)

    @classmethod
    def validate_check_digit_for(cls, value: str) -> bool:
        value = cls._strip_prefix(str(value), True)
        return cls.parent.validate_check_digit_for(cls.prefix + value)

    @classmethod
    def _encode(cls, encoded_string: str, options: BarcodeOptions) -> Pattern:
        return cls.parent._encode(cls.prefix + encoded_string, options)

    @classmethod
    def _decode_runs(cls, runs: Pattern) -> str:
        digits = cls.parent._decode_runs(runs)
        if not digits.startswith(cls.prefix):
            raise errors.UnencodableCharactersError(
                f"{cls.symbology.value} must start with {cls.prefix!r}, decoded {digits}"
            )
        return digits[len(cls.prefix) :]

    def to_parent(self) -> Barcode1D:
        """The same code as an object of the parent symbology."""
        options = BarcodeOptions.build(self.options, checksum_included=True)
        return self.parent(self.prefix + self.encoded_string, options)
