"""
Constant symbology tables.

Tables are pydantic models validated when this module is imported, so a
malformed table fails at startup instead of on the first encode/decode call.
Digit patterns are indexed by digit value.
"""

from functools import cached_property
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _is_rle(pattern: str) -> bool:
    return bool(pattern) and all(c in "1234" for c in pattern)


def _is_wn(pattern: str) -> bool:
    return bool(pattern) and set(pattern) <= {"w", "n"}


class ChecksumRule(BaseModel):
    """Weighted mod-10 checksum parameters."""

    model_config = ConfigDict(frozen=True)

    weights: tuple[int, ...] = Field(..., min_length=1)
    # End of the digit string the weight cycle starts from
    direction: Literal["left", "right"]
    modulus: int = 10


class FixedWidthTable(BaseModel):
    """EAN/UPC style table: 7-module digits, guard bars, parity-encoded first digit."""

    model_config = ConfigDict(frozen=True)

    name: str
    left_digits: int = Field(..., gt=0)
    right_digits: int = Field(..., gt=0)
    # Left-hand odd (L) and even (G) parity patterns; start with a space
    left_odd: tuple[str, ...]
    left_even: tuple[str, ...] | None = None
    # Right-hand (R) patterns; start with a bar
    right: tuple[str, ...]
    # First digit -> parity sequence of the left half, e.g. "LGGLGL"
    parities: tuple[str, ...] | None = None
    start_guard: str = "111"
    middle_guard: str = "11111"
    end_guard: str = "111"
    mirror_reads: bool = False

    @field_validator("left_odd", "left_even", "right")
    @classmethod
    def validate_digit_patterns(cls, v: tuple[str, ...] | None) -> tuple[str, ...] | None:
        if v is None:
            return v
        if len(v) != 10:
            raise ValueError("Digit table must have exactly 10 patterns")
        for pattern in v:
            if len(pattern) != 4 or not _is_rle(pattern):
                raise ValueError(f"Invalid digit pattern: {pattern!r}")
            if sum(int(c) for c in pattern) != 7:
                raise ValueError(f"Digit pattern {pattern!r} is not 7 modules wide")
        if len(set(v)) != 10:
            raise ValueError("Digit patterns must be unique")
        return v

    @field_validator("start_guard", "middle_guard", "end_guard")
    @classmethod
    def validate_guard(cls, v: str) -> str:
        # Guards begin and end on the same polarity so digits never merge into them
        if not _is_rle(v) or len(v) % 2 == 0:
            raise ValueError(f"Invalid guard pattern: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_parities(self) -> "FixedWidthTable":
        if self.parities is None:
            return self
        if self.left_even is None:
            raise ValueError("Parity-encoded tables need even-parity patterns")
        if set(self.left_odd) & set(self.left_even):
            raise ValueError("Odd and even parity patterns overlap")
        if len(self.parities) != 10 or len(set(self.parities)) != 10:
            raise ValueError("Parity table must have 10 unique sequences")
        for parity in self.parities:
            if len(parity) != self.left_digits or not set(parity) <= {"L", "G"}:
                raise ValueError(f"Invalid parity sequence: {parity!r}")
        return self

    @property
    def digit_count(self) -> int:
        """Total digits encoded, check digit included."""
        implied = 1 if self.parities else 0
        return implied + self.left_digits + self.right_digits

    @property
    def run_count(self) -> int:
        guards = len(self.start_guard) + len(self.middle_guard) + len(self.end_guard)
        return guards + 4 * (self.left_digits + self.right_digits)

    @property
    def module_count(self) -> int:
        guards = self.start_guard + self.middle_guard + self.end_guard
        return sum(int(c) for c in guards) + 7 * (self.left_digits + self.right_digits)

    @cached_property
    def left_lookup(self) -> dict[str, tuple[str, str]]:
        """Left-hand pattern -> (digit, parity)."""
        lookup = {pattern: (str(digit), "L") for digit, pattern in enumerate(self.left_odd)}
        if self.left_even:
            lookup.update(
                {pattern: (str(digit), "G") for digit, pattern in enumerate(self.left_even)}
            )
        return lookup

    @cached_property
    def right_lookup(self) -> dict[str, str]:
        return {pattern: str(digit) for digit, pattern in enumerate(self.right)}

    @cached_property
    def parity_lookup(self) -> dict[str, str]:
        return {parity: str(digit) for digit, parity in enumerate(self.parities or ())}


class TwoWidthTable(BaseModel):
    """2 of 5 style table: every element is either wide or narrow."""

    model_config = ConfigDict(frozen=True)

    name: str
    digits: tuple[str, ...]
    start: str
    stop: str
    # Appended after every digit (non-interleaved only)
    separator: str = ""
    # Digit pairs share one chunk: first digit in the bars, second in the spaces
    interleaved: bool = False
    mirror_reads: bool = True

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) != 10:
            raise ValueError("Digit table must have exactly 10 patterns")
        for pattern in v:
            if len(pattern) != 5 or not _is_wn(pattern) or pattern.count("w") != 2:
                raise ValueError(f"Invalid 2 of 5 pattern: {pattern!r}")
        if len(set(v)) != 10:
            raise ValueError("Digit patterns must be unique")
        return v

    @model_validator(mode="after")
    def validate_framing(self) -> "TwoWidthTable":
        if not _is_wn(self.start) or len(self.start) % 2:
            raise ValueError(f"Start pattern must be w/n and end on a space: {self.start!r}")
        if not _is_wn(self.stop) or len(self.stop) % 2 == 0:
            raise ValueError(f"Stop pattern must be w/n and end on a bar: {self.stop!r}")
        if self.separator and not _is_wn(self.separator):
            raise ValueError(f"Invalid separator: {self.separator!r}")
        if self.interleaved and self.separator:
            raise ValueError("Interleaved tables cannot use a digit separator")
        if self.chunk_size % 2:
            raise ValueError("Digit chunks must end on a space")
        return self

    @property
    def chunk_size(self) -> int:
        """Elements per decoded chunk (one digit, or a digit pair if interleaved)."""
        if self.interleaved:
            return 10
        return 5 + len(self.separator)

    @property
    def digits_per_chunk(self) -> int:
        return 2 if self.interleaved else 1

    @cached_property
    def digit_lookup(self) -> dict[str, str]:
        return {pattern: str(digit) for digit, pattern in enumerate(self.digits)}


# EAN/UPC digit patterns as run lengths
EAN_LEFT_ODD = ("3211", "2221", "2122", "1411", "1132", "1231", "1114", "1312", "1213", "3112")
EAN_LEFT_EVEN = ("1123", "1222", "2212", "1141", "2311", "1321", "4111", "2131", "3121", "2113")
EAN_RIGHT = EAN_LEFT_ODD

EAN13_TABLE = FixedWidthTable(
    name="EAN-13",
    left_digits=6,
    right_digits=6,
    left_odd=EAN_LEFT_ODD,
    left_even=EAN_LEFT_EVEN,
    right=EAN_RIGHT,
    parities=(
        "LLLLLL",
        "LLGLGG",
        "LLGGLG",
        "LLGGGL",
        "LGLLGG",
        "LGGLLG",
        "LGGGLL",
        "LGLGLG",
        "LGLGGL",
        "LGGLGL",
    ),
)

EAN8_TABLE = FixedWidthTable(
    name="EAN-8",
    left_digits=4,
    right_digits=4,
    left_odd=EAN_LEFT_ODD,
    right=EAN_RIGHT,
)

# Weight 3 on the digit next to the check digit
EAN_CHECKSUM = ChecksumRule(weights=(3, 1), direction="right")

TWO_OF_FIVE_DIGITS = (
    "nnwwn",
    "wnnnw",
    "nwnnw",
    "wwnnn",
    "nnwnw",
    "wnwnn",
    "nwwnn",
    "nnnww",
    "wnnwn",
    "nwnwn",
)

INTERLEAVED_2_OF_5_TABLE = TwoWidthTable(
    name="Interleaved 2 of 5",
    digits=TWO_OF_FIVE_DIGITS,
    start="nnnn",
    stop="wnn",
    interleaved=True,
)

MATRIX_2_OF_5_TABLE = TwoWidthTable(
    name="Matrix 2 of 5",
    digits=TWO_OF_FIVE_DIGITS,
    start="wnnnnn",
    stop="wnnnn",
    separator="n",
)

TWO_OF_FIVE_CHECKSUM = ChecksumRule(weights=(3, 1), direction="left")
