"""
Unit tests for the spreadsheet model.

Tests cover:
- Column index <-> letter conversion
- A1 span parsing, including open-ended ranges
- GridRange / DimensionRange invariants and API dictionaries
- Sheet-qualified references
- Hex color conversion
"""

import pytest

from sheetrender.exceptions import InvalidRangeError
from sheetrender.spreadsheet.color import hex_to_rgb_color
from sheetrender.spreadsheet.model import (
    DimensionRange,
    GridRange,
    a1_reference,
    column_index_to_letter,
    column_letter_to_index,
    parse_a1_span,
)


class TestColumnLetters:
    """Test Suite for column index/letter conversion."""

    @pytest.mark.parametrize("index, letters", [
        (1, "A"),
        (26, "Z"),
        (27, "AA"),
        (52, "AZ"),
        (702, "ZZ"),
        (703, "AAA"),
    ])
    def test_index_to_letter(self, index, letters):
        assert column_index_to_letter(index) == letters

    @pytest.mark.parametrize("letters, index", [
        ("A", 1),
        ("z", 26),
        ("AA", 27),
        ("ZZ", 702),
    ])
    def test_letter_to_index(self, letters, index):
        assert column_letter_to_index(letters) == index

    def test_non_positive_index_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            column_index_to_letter(0)

    def test_invalid_letters_rejected(self):
        with pytest.raises(ValueError):
            column_letter_to_index("A1")
        with pytest.raises(ValueError):
            column_letter_to_index("")


class TestParseA1Span:
    """Test Suite for parse_a1_span (1-based spans)."""

    def test_single_cell(self):
        assert parse_a1_span("B3", 1000, 26) == (3, 2, 1, 1)

    def test_cell_range(self):
        assert parse_a1_span("A1:D1", 1000, 26) == (1, 1, 1, 4)
        assert parse_a1_span("B2:C10", 1000, 26) == (2, 2, 9, 2)

    def test_lowercase_and_absolute_markers(self):
        assert parse_a1_span("$a$1:$b$2", 1000, 26) == (1, 1, 2, 2)

    def test_reversed_corners_are_normalized(self):
        assert parse_a1_span("C3:A1", 1000, 26) == (1, 1, 3, 3)

    def test_whole_columns_use_row_count(self):
        assert parse_a1_span("A:C", 200, 26) == (1, 1, 200, 3)

    def test_whole_rows_use_column_count(self):
        assert parse_a1_span("2:4", 200, 12) == (2, 1, 3, 12)

    def test_open_ended_rows(self):
        assert parse_a1_span("A2:C", 100, 26) == (2, 1, 99, 3)

    @pytest.mark.parametrize("notation", [
        "",
        "   ",
        "A",
        "3",
        "A0",
        "A1:B2:C3",
        "A1:3",
        "2:C4",
        "A:C4",
        "1A",
        "Demo!A1",
    ])
    def test_invalid_notation(self, notation):
        with pytest.raises(InvalidRangeError):
            parse_a1_span(notation, 1000, 26)


class TestGridRange:
    """Test Suite for GridRange and DimensionRange."""

    def test_to_dict(self):
        grid_range = GridRange(sheet_id=7, start_row_index=0, end_row_index=1,
                               start_column_index=0, end_column_index=4)
        assert grid_range.to_dict() == {
            "sheetId": 7,
            "startRowIndex": 0,
            "endRowIndex": 1,
            "startColumnIndex": 0,
            "endColumnIndex": 4,
        }
        assert grid_range.num_rows == 1
        assert grid_range.num_columns == 4

    def test_end_before_start_rejected(self):
        with pytest.raises(ValueError, match=">= start"):
            GridRange(sheet_id=0, start_row_index=3, end_row_index=2,
                      start_column_index=0, end_column_index=1)

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            GridRange(sheet_id=0, start_row_index=-1, end_row_index=2,
                      start_column_index=0, end_column_index=1)

    def test_grid_range_is_immutable(self):
        grid_range = GridRange(0, 0, 1, 0, 1)
        with pytest.raises(AttributeError):
            grid_range.sheet_id = 5  # type: ignore

    def test_columns_of_drops_row_span(self):
        grid_range = GridRange(sheet_id=3, start_row_index=4, end_row_index=20,
                               start_column_index=1, end_column_index=5)
        dims = DimensionRange.columns_of(grid_range)
        assert dims.to_dict() == {
            "sheetId": 3,
            "dimension": "COLUMNS",
            "startIndex": 1,
            "endIndex": 5,
        }


class TestA1Reference:
    """Test Suite for sheet-qualified references."""

    def test_quotes_sheet_name(self):
        assert a1_reference("Demo", "A1:B2") == "'Demo'!A1:B2"

    def test_sheet_name_with_spaces(self):
        assert a1_reference("Q1 Report", "A1") == "'Q1 Report'!A1"

    def test_sheet_name_with_quote_is_escaped(self):
        assert a1_reference("Lidia's", "A1") == "'Lidia''s'!A1"


class TestHexToRgbColor:
    """Test Suite for hex color conversion."""

    def test_white(self):
        assert hex_to_rgb_color("#ffffff") == {"red": 1.0, "green": 1.0, "blue": 1.0}

    def test_black_shorthand(self):
        assert hex_to_rgb_color("#000") == {"red": 0.0, "green": 0.0, "blue": 0.0}

    def test_slate(self):
        color = hex_to_rgb_color("#0f172a")
        assert color["red"] == pytest.approx(15 / 255)
        assert color["green"] == pytest.approx(23 / 255)
        assert color["blue"] == pytest.approx(42 / 255)

    def test_without_hash_and_uppercase(self):
        assert hex_to_rgb_color("FF0000") == {"red": 1.0, "green": 0.0, "blue": 0.0}

    def test_shorthand_doubles_each_digit(self):
        assert hex_to_rgb_color("#abc") == hex_to_rgb_color("#aabbcc")

    def test_malformed_channel_is_best_effort(self, caplog):
        color = hex_to_rgb_color("#zz8000")
        assert color["red"] == 0.0
        assert color["green"] == pytest.approx(128 / 255)
        assert color["blue"] == 0.0
        assert "Unparseable channel" in caplog.text

    def test_only_one_leading_hash_is_removed(self, caplog):
        color = hex_to_rgb_color("##ff0000")
        assert color["red"] == 0.0
        assert color["green"] == pytest.approx(0xF0 / 255)
        assert color["blue"] == 0.0
        assert "Unparseable channel" in caplog.text
