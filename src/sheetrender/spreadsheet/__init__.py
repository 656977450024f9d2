"""
Spreadsheet model module.

This module provides the addressing types, color conversion and queued
operation classes that a render pass accumulates.
"""

from sheetrender.spreadsheet.color import hex_to_rgb_color
from sheetrender.spreadsheet.model import (
    DimensionRange,
    GridRange,
    a1_reference,
    column_index_to_letter,
    column_letter_to_index,
    parse_a1_span,
)
from sheetrender.spreadsheet.operations import (
    AutoResizeColumns,
    BorderStyle,
    FormattingOp,
    HorizontalAlignment,
    MergeCells,
    MergeType,
    RawRequest,
    SetAlignment,
    SetBackground,
    SetBorders,
    SetDataValidationList,
    SetNumberFormat,
    SetTextFormat,
    SetWrapStrategy,
    UnmergeCells,
    ValueWrite,
    VerticalAlignment,
    WrapStrategy,
)

__all__ = [
    "GridRange",
    "DimensionRange",
    "a1_reference",
    "column_index_to_letter",
    "column_letter_to_index",
    "parse_a1_span",
    "hex_to_rgb_color",
    "ValueWrite",
    "SetBackground",
    "SetNumberFormat",
    "SetTextFormat",
    "SetAlignment",
    "SetWrapStrategy",
    "SetBorders",
    "MergeCells",
    "UnmergeCells",
    "AutoResizeColumns",
    "SetDataValidationList",
    "RawRequest",
    "FormattingOp",
    "HorizontalAlignment",
    "VerticalAlignment",
    "WrapStrategy",
    "BorderStyle",
    "MergeType",
]
