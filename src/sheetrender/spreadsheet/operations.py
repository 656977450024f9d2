"""
Queued spreadsheet operation classes.

This module defines the operations a SheetContext accumulates during a render
pass:
- ValueWrite: Cell values for one sheet-qualified A1 range (values batch)
- SetBackground, SetNumberFormat, SetTextFormat, SetAlignment, SetWrapStrategy:
  repeatCell format updates (structural batch)
- SetBorders: Uniform borders on every edge and inner grid line
- MergeCells / UnmergeCells: Merge state changes
- AutoResizeColumns: Fit column widths to their content
- SetDataValidationList: Dropdown validation from a list of values
- RawRequest: A Sheets API request queued verbatim

Every formatting operation renders its Sheets API request with to_request().
Operations are pure data; nothing here talks to the backend.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from sheetrender.spreadsheet.model import DimensionRange, GridRange


NUMBER_FORMAT_TYPE = "NUMBER"
DEFAULT_BORDER_WIDTH = 1


class HorizontalAlignment(str, Enum):
    LEFT = "LEFT"
    CENTER = "CENTER"
    RIGHT = "RIGHT"


class VerticalAlignment(str, Enum):
    TOP = "TOP"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"


class WrapStrategy(str, Enum):
    OVERFLOW_CELL = "OVERFLOW_CELL"
    LEGACY_WRAP = "LEGACY_WRAP"
    CLIP = "CLIP"
    WRAP = "WRAP"


class BorderStyle(str, Enum):
    DOTTED = "DOTTED"
    DASHED = "DASHED"
    SOLID = "SOLID"
    SOLID_MEDIUM = "SOLID_MEDIUM"
    SOLID_THICK = "SOLID_THICK"
    DOUBLE = "DOUBLE"
    NONE = "NONE"


class MergeType(str, Enum):
    MERGE_ALL = "MERGE_ALL"
    MERGE_COLUMNS = "MERGE_COLUMNS"
    MERGE_ROWS = "MERGE_ROWS"


DEFAULT_BORDER_STYLE = BorderStyle.SOLID
DEFAULT_MERGE_TYPE = MergeType.MERGE_ALL


def enum_value(value: Union[str, Enum]) -> str:
    return value.value if isinstance(value, Enum) else value


def _repeat_cell(grid_range: GridRange, cell_format: Dict[str, Any], fields: str) -> Dict[str, Any]:
    return {
        "repeatCell": {
            "range": grid_range.to_dict(),
            "cell": {"userEnteredFormat": cell_format},
            "fields": fields,
        }
    }


@dataclass
class ValueWrite:
    """Write a rectangular block of values to a range.

    Attributes:
        range: Sheet-qualified A1 notation, e.g. "'Demo'!A1:C3"
        values: 2D list of cell values (rows x columns)
    """
    range: str
    values: List[List[Any]]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a Sheets API ValueRange."""
        return {"range": self.range, "values": self.values}


@dataclass
class SetBackground:
    """Set the background color of a range.

    Attributes:
        range: Target grid range
        color: Sheets Color dict (fractional red/green/blue)
    """
    range: GridRange
    color: Dict[str, float]

    def to_request(self) -> Dict[str, Any]:
        return _repeat_cell(
            self.range,
            {"backgroundColor": self.color},
            "userEnteredFormat.backgroundColor",
        )


@dataclass
class SetNumberFormat:
    """Apply a number format pattern (type NUMBER) to a range."""
    range: GridRange
    pattern: str

    def to_request(self) -> Dict[str, Any]:
        return _repeat_cell(
            self.range,
            {"numberFormat": {"type": NUMBER_FORMAT_TYPE, "pattern": self.pattern}},
            "userEnteredFormat.numberFormat",
        )


@dataclass
class SetTextFormat:
    """Update text formatting on a range.

    Only the keys present in text_format are written; the update mask names
    exactly those keys so untouched text properties keep their current value.

    Attributes:
        range: Target grid range
        text_format: Sheets TextFormat dict (bold, italic, underline,
            fontSize, foregroundColor)
    """
    range: GridRange
    text_format: Dict[str, Any]

    @property
    def fields(self) -> str:
        return ",".join(f"userEnteredFormat.textFormat.{key}" for key in self.text_format)

    def to_request(self) -> Dict[str, Any]:
        return _repeat_cell(self.range, {"textFormat": self.text_format}, self.fields)


@dataclass
class SetAlignment:
    """Set horizontal and/or vertical alignment on a range."""
    range: GridRange
    horizontal: Optional[str] = None
    vertical: Optional[str] = None

    def to_request(self) -> Dict[str, Any]:
        cell_format: Dict[str, Any] = {}
        fields = []
        if self.horizontal:
            cell_format["horizontalAlignment"] = self.horizontal
            fields.append("userEnteredFormat.horizontalAlignment")
        if self.vertical:
            cell_format["verticalAlignment"] = self.vertical
            fields.append("userEnteredFormat.verticalAlignment")
        return _repeat_cell(self.range, cell_format, ",".join(fields))


@dataclass
class SetWrapStrategy:
    """Set the wrap strategy of a range."""
    range: GridRange
    wrap_strategy: str

    def to_request(self) -> Dict[str, Any]:
        return _repeat_cell(
            self.range,
            {"wrapStrategy": self.wrap_strategy},
            "userEnteredFormat.wrapStrategy",
        )


@dataclass
class SetBorders:
    """Apply the same border to all four edges and both inner grid lines.

    Attributes:
        range: Target grid range
        style: Border style name
        width: Border width in pixels
        color: Sheets Color dict, or None to leave the color out of the payload
    """
    range: GridRange
    style: str = DEFAULT_BORDER_STYLE.value
    width: int = DEFAULT_BORDER_WIDTH
    color: Optional[Dict[str, float]] = None

    def border(self) -> Dict[str, Any]:
        border: Dict[str, Any] = {"style": self.style, "width": self.width}
        if self.color is not None:
            border["color"] = self.color
        return border

    def to_request(self) -> Dict[str, Any]:
        border = self.border()
        return {
            "updateBorders": {
                "range": self.range.to_dict(),
                "top": border,
                "bottom": border,
                "left": border,
                "right": border,
                "innerHorizontal": border,
                "innerVertical": border,
            }
        }


@dataclass
class MergeCells:
    """Merge the cells of a range."""
    range: GridRange
    merge_type: str = DEFAULT_MERGE_TYPE.value

    def to_request(self) -> Dict[str, Any]:
        return {"mergeCells": {"range": self.range.to_dict(), "mergeType": self.merge_type}}


@dataclass
class UnmergeCells:
    """Unmerge every merged region inside a range."""
    range: GridRange

    def to_request(self) -> Dict[str, Any]:
        return {"unmergeCells": {"range": self.range.to_dict()}}


@dataclass
class AutoResizeColumns:
    """Fit the width of a span of columns to their content."""
    dimensions: DimensionRange

    def to_request(self) -> Dict[str, Any]:
        return {"autoResizeDimensions": {"dimensions": self.dimensions.to_dict()}}


@dataclass
class SetDataValidationList:
    """Restrict a range to a dropdown of allowed values (ONE_OF_LIST)."""
    range: GridRange
    values: List[str]
    show_custom_ui: bool = True

    def to_request(self) -> Dict[str, Any]:
        return {
            "setDataValidation": {
                "range": self.range.to_dict(),
                "rule": {
                    "condition": {
                        "type": "ONE_OF_LIST",
                        "values": [{"userEnteredValue": value} for value in self.values],
                    },
                    "showCustomUi": self.show_custom_ui,
                },
            }
        }


@dataclass
class RawRequest:
    """A Sheets API batchUpdate request passed through unchanged."""
    payload: Dict[str, Any] = field(default_factory=dict)

    def to_request(self) -> Dict[str, Any]:
        return self.payload


# Type alias for all formatting/structural operation types
FormattingOp = Union[
    SetBackground,
    SetNumberFormat,
    SetTextFormat,
    SetAlignment,
    SetWrapStrategy,
    SetBorders,
    MergeCells,
    UnmergeCells,
    AutoResizeColumns,
    SetDataValidationList,
    RawRequest,
]
