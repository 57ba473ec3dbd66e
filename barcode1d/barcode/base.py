"""
Base class for barcode value objects.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

import structlog

from barcode1d import errors
from barcode1d.barcode.checksum import generate_check_digit, validate_check_digit
from barcode1d.barcode.patterns import Pattern, RenderTarget, parse_pattern, render, rle_runs, to_bars
from barcode1d.barcode.tables import ChecksumRule
from barcode1d.models.options import BarcodeOptions
from barcode1d.models.symbology import BarcodeSymbology

logger = structlog.get_logger(__name__)

OptionsArg = BarcodeOptions | Mapping[str, Any] | None


class Barcode1D(ABC):
    """
    Immutable barcode value.

    Construction validates the value against the symbology, then generates,
    validates or omits the check digit depending on the options:

    - ``checksum_included``: the last digit is the check digit and must match
    - ``skip_checksum``: no check digit, for symbologies where it is optional
    - otherwise the check digit is generated and appended

    Attributes:
        value: Payload digits without the check digit
        check_digit: Check digit, or None when skipped
        encoded_string: Every digit that is encoded, check digit included
        options: Options the object was built with
        pattern: Run lengths of the full bar/space pattern
    """

    symbology: ClassVar[BarcodeSymbology]
    checksum_rule: ClassVar[ChecksumRule]
    checksum_optional: ClassVar[bool] = False
    wn_supported: ClassVar[bool] = False
    # Options applied by decode() unless the caller sets them
    decode_defaults: ClassVar[dict[str, Any]] = {}

    value: str
    check_digit: int | None
    encoded_string: str
    options: BarcodeOptions
    pattern: Pattern

    def __init__(self, value: str | int, options: OptionsArg = None, **overrides: Any) -> None:
        options = BarcodeOptions.build(options, **overrides)
        value = str(value)

        if not self._accepts(value, options.checksum_included, self._skips_checksum(options)):
            raise errors.UnencodableCharactersError(
                f"{self.symbology.value} cannot encode {value!r}"
            )

        if options.checksum_included:
            if not self.validate_check_digit_for(value):
                logger.debug(
                    "Check digit mismatch",
                    symbology=self.symbology.value,
                    code=value,
                )
                raise errors.ChecksumError(f"Invalid {self.symbology.value} check digit: {value}")
            payload, check_digit, encoded = value[:-1], int(value[-1]), value
        elif self._skips_checksum(options):
            payload, check_digit, encoded = value, None, value
        else:
            check_digit = self.generate_check_digit_for(value)
            payload, encoded = value, f"{value}{check_digit}"

        self.value = payload
        self.check_digit = check_digit
        self.encoded_string = encoded
        self.options = options
        self.pattern = self._encode(encoded, options)
        self._renders: dict[RenderTarget, str] = {}
        self._derive_fields()
        self._frozen = True

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.encoded_string == other.encoded_string  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.encoded_string))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.encoded_string!r})"

    # -- hooks for subclasses ---------------------------------------------

    @classmethod
    @abstractmethod
    def _accepts(cls, value: str, checksum_included: bool, skip_checksum: bool) -> bool:
        """Whether value has the right characters and length for these options."""

    @classmethod
    @abstractmethod
    def _encode(cls, encoded_string: str, options: BarcodeOptions) -> Pattern:
        """Run lengths for a complete digit string."""

    @classmethod
    @abstractmethod
    def _decode_runs(cls, runs: Pattern) -> str:
        """Digit string for decoded runs."""

    def _derive_fields(self) -> None:
        """Set symbology-specific fields computed from value."""

    @classmethod
    def _has_check_digit_shape(cls, value: str) -> bool:
        """Whether value has the characters and length of a payload plus check digit."""
        return cls._accepts(value, True, False)

    @classmethod
    def _skips_checksum(cls, options: BarcodeOptions) -> bool:
        return cls.checksum_optional and options.skip_checksum and not options.checksum_included

    # -- class-level API ----------------------------------------------------

    @classmethod
    def generate_check_digit_for(cls, value: str) -> int:
        """Check digit for a payload without one."""
        return generate_check_digit(str(value), cls.checksum_rule)

    @classmethod
    def validate_check_digit_for(cls, value: str) -> bool:
        """Whether the last digit of value is its correct check digit."""
        value = str(value)
        if not cls._has_check_digit_shape(value):
            return False
        return validate_check_digit(value, cls.checksum_rule)

    @classmethod
    def can_encode(cls, value: str | int, options: OptionsArg = None) -> bool:
        """
        Whether value can be encoded.

        Without options any accepted shape counts (with or without check digit).
        """
        value = str(value)
        if options is None:
            shapes = [(False, False), (True, False)]
            if cls.checksum_optional:
                shapes.append((False, True))
            return any(cls._accepts(value, included, skip) for included, skip in shapes)
        options = BarcodeOptions.build(options)
        return cls._accepts(value, options.checksum_included, cls._skips_checksum(options))

    @classmethod
    def decode(cls, pattern: str, options: OptionsArg = None, **overrides: Any) -> "Barcode1D":
        """
        Decode a bars, rle or wn string into a barcode object.

        Raises:
            UnencodableCharactersError: The pattern cannot be this symbology
            UndecodableCharactersError: Framing matches but a chunk has no table match
            ChecksumError: The decoded check digit is wrong
        """
        options = cls._decode_options(options, **overrides)
        runs = parse_pattern(pattern, options)
        return cls(cls._decode_runs(runs), options)

    @classmethod
    def _decode_options(cls, options: OptionsArg = None, **overrides: Any) -> BarcodeOptions:
        options = BarcodeOptions.build(options, **overrides)
        missing = {k: v for k, v in cls.decode_defaults.items() if k not in options.model_fields_set}
        if missing:
            options = BarcodeOptions.build(options, **missing)
        return options

    @classmethod
    def rle_to_bars(cls, rle: str, options: OptionsArg = None) -> str:
        """Expand an rle string into a bars string."""
        options = BarcodeOptions.build(options)
        return to_bars(rle_runs(rle), options.line_character, options.space_character)

    # -- rendering ----------------------------------------------------------

    @property
    def width(self) -> int:
        """Total width of the pattern in modules."""
        return sum(self.pattern)

    def bars(self, **overrides: Any) -> str:
        """Bars and spaces as line/space characters, one per module."""
        return self._render(RenderTarget.BARS, overrides)

    def rle(self) -> str:
        """Run-length string; the first digit is always a bar."""
        return self._render(RenderTarget.RLE, {})

    def wn(self, **overrides: Any) -> str:
        """
        Wide/narrow string.

        Raises:
            NotImplementedError: The symbology has no wide/narrow representation
        """
        if not self.wn_supported:
            raise errors.NotImplementedError(
                f"{self.symbology.value} has no wide/narrow representation"
            )
        return self._render(RenderTarget.WN, overrides)

    def _render(self, target: RenderTarget, overrides: dict[str, Any]) -> str:
        if overrides:
            options = BarcodeOptions.build(self.options, **overrides)
            return render(self._encode(self.encoded_string, options), target, options)
        if target not in self._renders:
            self._renders[target] = render(self.pattern, target, self.options)
        return self._renders[target]
