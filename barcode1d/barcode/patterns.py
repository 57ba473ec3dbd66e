"""
Pattern codec: digits <-> run lengths <-> textual representations.

A pattern is a tuple of positive run lengths in modules, alternating bar and
space and always starting with a bar. It renders to three targets:

- bars: every module written as the line or space character
- rle: run lengths concatenated as digits
- wn: every run written as wide or narrow (two-width symbologies only)
"""

from collections.abc import Callable, Sequence
from enum import Enum
from itertools import groupby

import structlog

from barcode1d import errors
from barcode1d.barcode.tables import FixedWidthTable, TwoWidthTable
from barcode1d.models.options import BarcodeOptions

logger = structlog.get_logger(__name__)

Pattern = tuple[int, ...]

RLE_CHARACTERS = frozenset("123456789")


class RenderTarget(str, Enum):
    """Textual representations a pattern can be rendered to."""

    BARS = "bars"
    RLE = "rle"
    WN = "wn"


def rle_runs(rle: str) -> Pattern:
    """Run lengths of an rle string, one digit per run."""
    return tuple(int(c) for c in rle)


def wn_runs(wn: str, wn_ratio: int = 2, w_character: str = "w") -> Pattern:
    """Run lengths of a wn string: wide elements are wn_ratio modules, narrow ones 1."""
    return tuple(wn_ratio if c == w_character else 1 for c in wn)


def join_runs(*segments: tuple[bool, Sequence[int]]) -> Pattern:
    """
    Concatenate run segments into one alternating pattern.

    Each segment is ``(starts_with_bar, runs)``. Where a segment starts with
    the same polarity the previous one ended with, the two touching runs are
    merged into one.
    """
    runs: list[int] = []
    next_is_bar = True
    for starts_with_bar, segment in segments:
        for index, width in enumerate(segment):
            is_bar = starts_with_bar == (index % 2 == 0)
            if not runs and not is_bar:
                raise ValueError("Pattern must start with a bar")
            if runs and is_bar != next_is_bar:
                runs[-1] += width
            else:
                runs.append(width)
            next_is_bar = not is_bar
    return tuple(runs)


def encode_fixed_width(encoded_string: str, table: FixedWidthTable) -> Pattern:
    """Build the EAN/UPC style pattern for a complete digit string."""
    if table.parities:
        parity = table.parities[int(encoded_string[0])]
        digits = encoded_string[1:]
    else:
        parity = "L" * table.left_digits
        digits = encoded_string

    left, right = digits[: table.left_digits], digits[table.left_digits :]
    segments: list[tuple[bool, Sequence[int]]] = [(True, rle_runs(table.start_guard))]
    for digit, side in zip(left, parity):
        patterns = table.left_odd if side == "L" else table.left_even
        if patterns is None:
            raise ValueError(f"{table.name} has no even-parity patterns")
        segments.append((False, rle_runs(patterns[int(digit)])))
    segments.append((False, rle_runs(table.middle_guard)))
    segments.extend((True, rle_runs(table.right[int(digit)])) for digit in right)
    segments.append((True, rle_runs(table.end_guard)))
    return join_runs(*segments)


def two_width_wn(encoded_string: str, table: TwoWidthTable) -> str:
    """Build the canonical w/n string for a 2 of 5 style digit string."""
    parts = [table.start]
    if table.interleaved:
        for bar_digit, space_digit in zip(encoded_string[0::2], encoded_string[1::2]):
            bars = table.digits[int(bar_digit)]
            spaces = table.digits[int(space_digit)]
            parts.append("".join(b + s for b, s in zip(bars, spaces)))
    else:
        parts.extend(table.digits[int(digit)] + table.separator for digit in encoded_string)
    parts.append(table.stop)
    return "".join(parts)


def encode_two_width(encoded_string: str, table: TwoWidthTable, wn_ratio: int = 2) -> Pattern:
    return wn_runs(two_width_wn(encoded_string, table), wn_ratio)


def to_bars(pattern: Pattern, line_character: str = "1", space_character: str = "0") -> str:
    """Expand runs into one character per module, bars first."""
    return "".join(
        (line_character if index % 2 == 0 else space_character) * width
        for index, width in enumerate(pattern)
    )


def to_rle(pattern: Pattern) -> str:
    """Concatenate run lengths as digits."""
    return "".join(str(width) for width in pattern)


def _narrow_and_wide(pattern: Sequence[int]) -> tuple[int, int] | None:
    widths = sorted(set(pattern))
    if not widths or len(widths) > 2:
        return None
    return widths[0], widths[-1]


def to_wn(pattern: Pattern, w_character: str = "w", n_character: str = "n") -> str:
    """
    Render a pattern as wide/narrow elements.

    Raises:
        NotImplementedError: The runs take more than two distinct widths
    """
    widths = _narrow_and_wide(pattern)
    if widths is None:
        raise errors.NotImplementedError("Pattern does not use a two-width alphabet")
    narrow, _ = widths
    return "".join(n_character if width == narrow else w_character for width in pattern)


def render(pattern: Pattern, target: RenderTarget, options: BarcodeOptions) -> str:
    """Render a pattern to the requested target using the characters in options."""
    if target is RenderTarget.BARS:
        return to_bars(pattern, options.line_character, options.space_character)
    if target is RenderTarget.RLE:
        return to_rle(pattern)
    return to_wn(pattern, options.w_character, options.n_character)


def _bars_runs(raw: str, line_character: str) -> Pattern:
    runs: list[int] = []
    for char, group in groupby(raw):
        if not runs and char != line_character:
            raise errors.UnencodableCharactersError("Bar pattern must start with a bar")
        runs.append(len(list(group)))
    return tuple(runs)


def parse_pattern(raw: str, options: BarcodeOptions) -> Pattern:
    """
    Parse a bars, rle or wn string into run lengths.

    The format is told apart by character set: only the w/n characters is a
    wn string, only the digits 1-9 is an rle string, only the line/space
    characters is a bars string.

    Raises:
        UnencodableCharactersError: Empty input or a character set matching no format
    """
    if not isinstance(raw, str) or not raw:
        raise errors.UnencodableCharactersError("Pattern must be a non-empty string")

    chars = set(raw)
    w_character, n_character = options.w_character, options.n_character
    if len(w_character) == 1 and len(n_character) == 1 and chars <= {w_character, n_character}:
        return wn_runs(raw, options.wn_ratio, w_character)
    if chars <= RLE_CHARACTERS:
        return rle_runs(raw)

    line_character, space_character = options.line_character, options.space_character
    if len(line_character) == 1 and len(space_character) == 1:
        if chars <= {line_character, space_character}:
            return _bars_runs(raw, line_character)
    raise errors.UnencodableCharactersError(
        "Pattern must be a bars, rle or wn string",
    )


def decode_with_mirror_reads(
    decode_runs: Callable[[Pattern], str],
    runs: Pattern,
    mirror_reads: bool,
) -> str:
    """
    Decode runs, retrying with the runs reversed when the first attempt fails.

    Codes that are not orientation-marked may be scanned from either end. If
    both orientations fail, the error from the given orientation is raised.
    """
    try:
        return decode_runs(runs)
    except errors.UnencodableError as exc:
        if not mirror_reads:
            raise
        try:
            decoded = decode_runs(runs[::-1])
        except errors.UnencodableError:
            raise exc from None
        logger.debug("Decoded reversed pattern", runs=len(runs), digits=decoded)
        return decoded


def decode_fixed_width(runs: Pattern, table: FixedWidthTable) -> str:
    """
    Decode EAN/UPC style runs into the full digit string.

    Raises:
        UnencodableCharactersError: Wrong run count, width or guard bars
        UndecodableCharactersError: A digit or parity sequence has no table match
    """
    if len(runs) != table.run_count or sum(runs) != table.module_count or max(runs) > 4:
        raise errors.UnencodableCharactersError(
            f"{table.name} pattern needs {table.run_count} runs over {table.module_count} modules"
        )

    rle = to_rle(runs)
    start_end = len(table.start_guard)
    left_end = start_end + 4 * table.left_digits
    middle_end = left_end + len(table.middle_guard)
    right_end = middle_end + 4 * table.right_digits
    if (
        rle[:start_end] != table.start_guard
        or rle[left_end:middle_end] != table.middle_guard
        or rle[right_end:] != table.end_guard
    ):
        raise errors.UnencodableCharactersError(f"{table.name} guard bars not detected")

    digits: list[str] = []
    parity = ""
    for offset in range(start_end, left_end, 4):
        chunk = rle[offset : offset + 4]
        if chunk not in table.left_lookup:
            raise errors.UndecodableCharactersError(f"Invalid left-hand sequence: {chunk}")
        digit, side = table.left_lookup[chunk]
        digits.append(digit)
        parity += side
    for offset in range(middle_end, right_end, 4):
        chunk = rle[offset : offset + 4]
        if chunk not in table.right_lookup:
            raise errors.UndecodableCharactersError(f"Invalid right-hand sequence: {chunk}")
        digits.append(table.right_lookup[chunk])

    if table.parities:
        if parity not in table.parity_lookup:
            raise errors.UndecodableCharactersError(f"Invalid parity sequence: {parity}")
        digits.insert(0, table.parity_lookup[parity])
    return "".join(digits)


def decode_two_width(runs: Pattern, table: TwoWidthTable) -> str:
    """
    Decode 2 of 5 style runs into a digit string.

    Raises:
        UnencodableCharactersError: More than two widths, or start/stop/length mismatch
        UndecodableCharactersError: A digit chunk has no table match
    """
    widths = _narrow_and_wide(runs)
    if widths is None:
        raise errors.UnencodableCharactersError(f"{table.name} uses exactly two element widths")
    wn = to_wn(runs)

    framing = len(table.start) + len(table.stop)
    if len(wn) <= framing or not (wn.startswith(table.start) and wn.endswith(table.stop)):
        raise errors.UnencodableCharactersError(f"{table.name} start/stop pattern not detected")
    body = wn[len(table.start) : len(wn) - len(table.stop)]
    if len(body) % table.chunk_size:
        raise errors.UnencodableCharactersError(f"Wrong number of elements for {table.name}")

    digits: list[str] = []
    for offset in range(0, len(body), table.chunk_size):
        chunk = body[offset : offset + table.chunk_size]
        if table.interleaved:
            patterns = [chunk[0::2], chunk[1::2]]
        elif chunk.endswith(table.separator):
            patterns = [chunk[:5]]
        else:
            raise errors.UndecodableCharactersError(f"Invalid digit separator: {chunk}")
        for pattern in patterns:
            if pattern not in table.digit_lookup:
                raise errors.UndecodableCharactersError(f"Invalid sequence: {pattern}")
            digits.append(table.digit_lookup[pattern])
    return "".join(digits)
