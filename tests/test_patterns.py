"""
Tests for the pattern codec.
"""

import pytest

from barcode1d import BarcodeOptions, NotImplementedError as WnNotImplementedError
from barcode1d.barcode.patterns import (
    RenderTarget,
    decode_fixed_width,
    decode_two_width,
    decode_with_mirror_reads,
    encode_fixed_width,
    encode_two_width,
    join_runs,
    parse_pattern,
    render,
    to_bars,
    to_rle,
    to_wn,
    two_width_wn,
)
from barcode1d.barcode.tables import EAN13_TABLE, INTERLEAVED_2_OF_5_TABLE, MATRIX_2_OF_5_TABLE
from barcode1d.errors import UndecodableCharactersError, UnencodableCharactersError


UPC_RLE = "11132112221212211141312111411111123122213211212221221114111"


@pytest.fixture
def options() -> BarcodeOptions:
    return BarcodeOptions(
        line_character="1",
        space_character="0",
        w_character="w",
        n_character="n",
        wn_ratio=2,
    )


class TestJoinRuns:
    """Tests for concatenating run segments."""

    def test_alternating_segments_concatenate(self):
        """Test that segments of alternating polarity are appended."""
        assert join_runs((True, (1, 1, 1)), (False, (3, 2))) == (1, 1, 1, 3, 2)

    def test_same_polarity_runs_merge(self):
        """Test that touching runs of the same polarity merge at the join."""
        assert join_runs((True, (1, 1, 1)), (True, (2, 1))) == (1, 1, 3, 1)

    def test_must_start_with_bar(self):
        """Test that a pattern cannot open with a space."""
        with pytest.raises(ValueError):
            join_runs((False, (1, 2)))


class TestRendering:
    """Tests for the render targets."""

    def test_to_bars(self):
        """Test module expansion."""
        assert to_bars((1, 1, 3, 2, 1)) == "10111001"

    def test_to_bars_custom_characters(self):
        """Test custom line and space characters."""
        assert to_bars((2, 1, 1), "x", " ") == "xx x"

    def test_to_rle(self):
        """Test run-length output."""
        assert to_rle((1, 1, 1, 3, 2, 1, 1)) == "1113211"

    def test_to_wn(self):
        """Test two-width output."""
        assert to_wn((2, 1, 1, 2, 1)) == "wnnwn"
        assert to_wn((3, 1, 3), "W", "N") == "WNW"

    def test_to_wn_single_width_is_narrow(self):
        """Test that a pattern of one width renders all narrow."""
        assert to_wn((1, 1, 1)) == "nnn"

    def test_to_wn_rejects_more_than_two_widths(self):
        """Test the variable-width limitation."""
        with pytest.raises(WnNotImplementedError):
            to_wn((1, 2, 3))

    def test_render_dispatch(self, options):
        """Test that render picks the requested target."""
        pattern = (2, 1, 1)
        assert render(pattern, RenderTarget.BARS, options) == "1101"
        assert render(pattern, RenderTarget.RLE, options) == "211"
        assert render(pattern, RenderTarget.WN, options) == "wnn"


class TestEncoding:
    """Tests for digit strings to runs."""

    def test_encode_fixed_width(self):
        """Test an EAN-13 pattern against its known rle."""
        pattern = encode_fixed_width("0012676510226", EAN13_TABLE)
        assert to_rle(pattern) == UPC_RLE
        assert sum(pattern) == 95

    def test_encode_fixed_width_missing_even_patterns(self):
        """Test that a parity needing even patterns the table lacks is an error."""
        table = EAN13_TABLE.model_copy(update={"left_even": None})
        with pytest.raises(ValueError):
            encode_fixed_width("9780201379624", table)

    def test_two_width_wn_matrix(self):
        """Test Matrix 2 of 5 element string."""
        assert two_width_wn("1234", MATRIX_2_OF_5_TABLE) == "wnnnnnwnnnwnnwnnwnwwnnnnnnwnwnwnnnn"

    def test_two_width_wn_interleaved(self):
        """Test that digit pairs interleave bars and spaces."""
        assert two_width_wn("12", INTERLEAVED_2_OF_5_TABLE) == "nnnnwnnwnnnnwwwnn"

    def test_encode_two_width_ratio(self):
        """Test the wide element width."""
        assert encode_two_width("12", INTERLEAVED_2_OF_5_TABLE, 3)[:5] == (1, 1, 1, 1, 3)


class TestParsePattern:
    """Tests for recognising the input format."""

    def test_wn(self, options):
        """Test wn input."""
        assert parse_pattern("wnnw", options) == (2, 1, 1, 2)

    def test_rle(self, options):
        """Test rle input."""
        assert parse_pattern("2113", options) == (2, 1, 1, 3)

    def test_bars(self, options):
        """Test bars input."""
        assert parse_pattern("1101000", options) == (2, 1, 1, 3)

    def test_bars_custom_characters(self):
        """Test bars input with the option characters."""
        options = BarcodeOptions(line_character="#", space_character=".")
        assert parse_pattern("##.#...", options) == (2, 1, 1, 3)

    def test_bars_starting_with_space(self, options):
        """Test that bars input must open with a bar."""
        with pytest.raises(UnencodableCharactersError):
            parse_pattern("0110", options)

    @pytest.mark.parametrize("raw", ["", "x", "x" * 60, "12a", "w1n"])
    def test_unrecognised(self, options, raw):
        """Test input matching no format."""
        with pytest.raises(UnencodableCharactersError):
            parse_pattern(raw, options)


class TestDecoding:
    """Tests for runs to digit strings."""

    def test_decode_fixed_width(self, options):
        """Test decoding an EAN-13 rle."""
        runs = parse_pattern(UPC_RLE, options)
        assert decode_fixed_width(runs, EAN13_TABLE) == "0012676510226"

    def test_decode_fixed_width_wrong_length(self, options):
        """Test that a truncated pattern is not this symbology."""
        runs = parse_pattern(UPC_RLE[:-1], options)
        with pytest.raises(UnencodableCharactersError):
            decode_fixed_width(runs, EAN13_TABLE)

    def test_decode_fixed_width_bad_guard(self, options):
        """Test that a moved middle guard is not this symbology."""
        runs = parse_pattern(UPC_RLE[:23] + UPC_RLE[27:32] + UPC_RLE[23:27] + UPC_RLE[32:], options)
        with pytest.raises(UnencodableCharactersError):
            decode_fixed_width(runs, EAN13_TABLE)

    def test_decode_fixed_width_bad_right_digit(self, options):
        """Test that an even-parity pattern in the right half is undecodable."""
        runs = parse_pattern(UPC_RLE[:32] + "1321" + UPC_RLE[36:], options)
        with pytest.raises(UndecodableCharactersError):
            decode_fixed_width(runs, EAN13_TABLE)

    def test_decode_fixed_width_bad_parity(self, options):
        """Test that a left half opening with even parity is undecodable."""
        runs = parse_pattern(UPC_RLE[:3] + "1123" + UPC_RLE[7:], options)
        with pytest.raises(UndecodableCharactersError):
            decode_fixed_width(runs, EAN13_TABLE)

    def test_decode_two_width(self, options):
        """Test decoding Matrix 2 of 5."""
        runs = parse_pattern("wnnnnnwnnnwnnwnnwnwwnnnnnnwnwnwnnnn", options)
        assert decode_two_width(runs, MATRIX_2_OF_5_TABLE) == "1234"

    def test_decode_two_width_interleaved(self, options):
        """Test decoding Interleaved 2 of 5."""
        runs = parse_pattern("nnnnwnnwnnnnwwwnn", options)
        assert decode_two_width(runs, INTERLEAVED_2_OF_5_TABLE) == "12"

    def test_decode_two_width_three_widths(self, options):
        """Test that three element widths are not this symbology."""
        with pytest.raises(UnencodableCharactersError):
            decode_two_width((1, 2, 3, 1, 1), MATRIX_2_OF_5_TABLE)

    def test_decode_two_width_bad_chunk(self, options):
        """Test a framed pattern with an unknown digit."""
        runs = parse_pattern("wnnnnnnnnnnnwnnnn", options)
        with pytest.raises(UndecodableCharactersError):
            decode_two_width(runs, MATRIX_2_OF_5_TABLE)

    def test_decode_two_width_bad_count(self, options):
        """Test that a partial interleaved chunk is not this symbology."""
        runs = parse_pattern("nnnnwnnwnnnnwwwnnwnn", options)
        with pytest.raises(UnencodableCharactersError):
            decode_two_width(runs, INTERLEAVED_2_OF_5_TABLE)


class TestMirrorReads:
    """Tests for retrying reversed patterns."""

    def test_reversed_pattern_decodes(self, options):
        """Test that a reversed pattern decodes when mirror reads are allowed."""
        runs = parse_pattern("wnnnnnwnnnwnnwnnwnwwnnnnnnwnwnwnnnn"[::-1], options)
        decoded = decode_with_mirror_reads(
            lambda r: decode_two_width(r, MATRIX_2_OF_5_TABLE), runs, True
        )
        assert decoded == "1234"

    def test_reversed_pattern_rejected_without_mirror_reads(self, options):
        """Test that no retry happens when mirror reads are off."""
        runs = parse_pattern("wnnnnnwnnnwnnwnnwnwwnnnnnnwnwnwnnnn"[::-1], options)
        with pytest.raises(UnencodableCharactersError):
            decode_with_mirror_reads(
                lambda r: decode_two_width(r, MATRIX_2_OF_5_TABLE), runs, False
            )

    def test_original_error_kept(self, options):
        """Test that the error from the given orientation is raised."""
        runs = parse_pattern("wnnnnnnnnnnnwnnnn", options)
        with pytest.raises(UndecodableCharactersError):
            decode_with_mirror_reads(
                lambda r: decode_two_width(r, MATRIX_2_OF_5_TABLE), runs, True
            )
