"""
Spreadsheet addressing model.

This module provides the coordinate types and A1 helpers used while rendering:
- GridRange: A zero-based, half-open rectangle on one sheet (Sheets API GridRange)
- DimensionRange: A span of whole rows or columns on one sheet
- column_index_to_letter / column_letter_to_index: A1 column conversion
- parse_a1_span: A1 expression to a 1-based (row, column, num_rows, num_columns) span
- a1_reference: Sheet-qualified A1 reference for value writes
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from gspread.utils import absolute_range_name

from sheetrender.exceptions import InvalidRangeError


_CORNER_PATTERN = re.compile(r"^([A-Z]*)(\d*)$")


@dataclass(frozen=True)
class GridRange:
    """A rectangular cell region in zero-based, half-open grid coordinates.

    GridRanges are produced by the RangeTranslator from a sheet name and an A1
    expression. Component code never builds them directly.

    Attributes:
        sheet_id: Numeric id of the sheet (not its name)
        start_row_index: First row (0-indexed, inclusive)
        end_row_index: Last row (0-indexed, exclusive)
        start_column_index: First column (0-indexed, inclusive)
        end_column_index: Last column (0-indexed, exclusive)
    """
    sheet_id: int
    start_row_index: int
    end_row_index: int
    start_column_index: int
    end_column_index: int

    def __post_init__(self) -> None:
        if self.start_row_index < 0 or self.start_column_index < 0:
            raise ValueError("GridRange start indices must be non-negative")
        if self.end_row_index < self.start_row_index or self.end_column_index < self.start_column_index:
            raise ValueError("GridRange end indices must be >= start indices")

    @property
    def num_rows(self) -> int:
        return self.end_row_index - self.start_row_index

    @property
    def num_columns(self) -> int:
        return self.end_column_index - self.start_column_index

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the Sheets API GridRange representation."""
        return {
            "sheetId": self.sheet_id,
            "startRowIndex": self.start_row_index,
            "endRowIndex": self.end_row_index,
            "startColumnIndex": self.start_column_index,
            "endColumnIndex": self.end_column_index,
        }


@dataclass(frozen=True)
class DimensionRange:
    """A span of whole rows or columns (0-indexed, half-open).

    Attributes:
        sheet_id: Numeric id of the sheet
        dimension: "ROWS" or "COLUMNS"
        start_index: First row/column (inclusive)
        end_index: Last row/column (exclusive)
    """
    sheet_id: int
    dimension: str
    start_index: int
    end_index: int

    @classmethod
    def columns_of(cls, grid_range: GridRange) -> "DimensionRange":
        """Column span of a grid range; its row span is dropped."""
        return cls(
            sheet_id=grid_range.sheet_id,
            dimension="COLUMNS",
            start_index=grid_range.start_column_index,
            end_index=grid_range.end_column_index,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the Sheets API DimensionRange representation."""
        return {
            "sheetId": self.sheet_id,
            "dimension": self.dimension,
            "startIndex": self.start_index,
            "endIndex": self.end_index,
        }


def column_index_to_letter(index: int) -> str:
    """Convert a 1-based column index to its A1 letters (1 -> "A", 27 -> "AA").

    Raises:
        ValueError: If index is not positive
    """
    if index < 1:
        raise ValueError(f"Column index must be positive, got {index}")
    letters = ""
    while index > 0:
        index -= 1
        letters = chr(65 + (index % 26)) + letters
        index //= 26
    return letters


def column_letter_to_index(letters: str) -> int:
    """Convert A1 column letters to a 1-based column index ("A" -> 1, "ZZ" -> 702).

    Raises:
        ValueError: If letters is empty or contains non A-Z characters
    """
    normalized = letters.strip().upper()
    if not normalized or not normalized.isalpha() or not normalized.isascii():
        raise ValueError(f"Invalid column letters: {letters!r}")
    index = 0
    for char in normalized:
        index = index * 26 + (ord(char) - 64)
    return index


def _split_corner(corner: str, notation: str) -> Tuple[int, int]:
    """Split one corner of an A1 expression into (column, row), 0 meaning absent."""
    match = _CORNER_PATTERN.match(corner.replace("$", "").strip().upper())
    if not match or not any(match.groups()):
        raise InvalidRangeError(f"Invalid range notation: {notation!r}")

    col_letters, row_digits = match.groups()
    col = column_letter_to_index(col_letters) if col_letters else 0
    row = int(row_digits) if row_digits else 0
    if row_digits and row == 0:
        raise InvalidRangeError(f"Row numbers start at 1: {notation!r}")
    return col, row


def parse_a1_span(notation: str, row_count: int, col_count: int) -> Tuple[int, int, int, int]:
    """Resolve an in-sheet A1 expression to a 1-based span.

    Supports:
    - Single cell: B3
    - Cell range: A1:D4 (corners may be given in either order)
    - Whole columns: A:C (rows 1..row_count)
    - Whole rows: 2:4 (columns 1..col_count)
    - Open-ended rows: A2:C (rows 2..row_count)

    Args:
        notation: A1 expression without a sheet prefix
        row_count: Number of rows in the sheet, used for open-ended ranges
        col_count: Number of columns in the sheet, used for open-ended ranges

    Returns:
        Tuple of (row, column, num_rows, num_columns), row/column 1-indexed

    Raises:
        InvalidRangeError: If notation is empty or malformed
    """
    if not notation or not notation.strip():
        raise InvalidRangeError("Empty range notation")
    if "!" in notation:
        raise InvalidRangeError(f"Range must not include a sheet name: {notation!r}")

    parts = notation.split(":")
    if len(parts) > 2:
        raise InvalidRangeError(f"Invalid range notation: {notation!r}")

    if len(parts) == 1:
        col, row = _split_corner(parts[0], notation)
        if not col or not row:
            raise InvalidRangeError(f"Invalid cell notation: {notation!r}")
        return row, col, 1, 1

    start_col, start_row = _split_corner(parts[0], notation)
    end_col, end_row = _split_corner(parts[1], notation)

    if bool(start_col) != bool(end_col):
        raise InvalidRangeError(f"Invalid range notation: {notation!r}")
    if not start_col:
        start_col, end_col = 1, col_count

    if not start_row and end_row:
        raise InvalidRangeError(f"Invalid range notation: {notation!r}")
    if not start_row:
        start_row, end_row = 1, row_count
    elif not end_row:
        end_row = row_count

    row, row_end = min(start_row, end_row), max(start_row, end_row)
    col, col_end = min(start_col, end_col), max(start_col, end_col)
    return row, col, row_end - row + 1, col_end - col + 1


def a1_reference(sheet_name: str, a1_range: str) -> str:
    """Build a sheet-qualified reference such as ``'My Sheet'!A1:B2``."""
    return absolute_range_name(sheet_name, a1_range)
