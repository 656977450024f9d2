"""
Render context that accumulates formatting requests and value writes.

A SheetContext is created for one render pass. Components call its methods to
queue work; nothing reaches the spreadsheet until commit(), which flushes the
formatting queue as one ``batchUpdate`` and then the value queue as one
``values.batchUpdate``. Formatting always goes first so that merges and other
structural changes cannot clear values that were just written.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from sheetrender.backend.base import SheetsBackend
from sheetrender.spreadsheet.color import hex_to_rgb_color
from sheetrender.spreadsheet.model import DimensionRange
from sheetrender.spreadsheet.operations import (
    DEFAULT_BORDER_STYLE,
    DEFAULT_BORDER_WIDTH,
    DEFAULT_MERGE_TYPE,
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
    enum_value,
)
from sheetrender.translator import RangeTranslator

logger = logging.getLogger(__name__)

DEFAULT_VALUE_INPUT_OPTION = "USER_ENTERED"


class SheetContext:
    """Central context that accumulates value updates and batchUpdate requests.

    A context belongs to exactly one render pass and must not be shared
    between passes or threads.

    Attributes:
        document_id: Target spreadsheet id
        backend: Backend used for range resolution and the commit batches
        value_input_option: How written values are interpreted by Sheets
        translator: RangeTranslator bound to document_id
    """

    def __init__(
        self,
        document_id: str,
        backend: SheetsBackend,
        value_input_option: str = DEFAULT_VALUE_INPUT_OPTION,
    ) -> None:
        self.document_id = document_id
        self.backend = backend
        self.value_input_option = value_input_option
        self.translator = RangeTranslator(backend, document_id)
        self._operations: List[FormattingOp] = []
        self._value_writes: List[ValueWrite] = []

    @property
    def operations(self) -> List[FormattingOp]:
        """Queued formatting/structural operations, in application order."""
        return list(self._operations)

    @property
    def value_writes(self) -> List[ValueWrite]:
        """Queued value writes, in call order."""
        return list(self._value_writes)

    def _queue(self, op: FormattingOp) -> None:
        logger.debug("Queued %s", type(op).__name__)
        self._operations.append(op)

    def write_range(self, range_a1: str, values: Sequence[Sequence[Any]]) -> None:
        """Queue a values batch entry for a sheet-qualified A1 range.

        Args:
            range_a1: Full A1 reference, e.g. "'Demo'!A1:C3"
            values: Rectangular 2D sequence of values
        """
        self._value_writes.append(ValueWrite(range=range_a1, values=[list(row) for row in values]))
        logger.debug("Queued value write for %s", range_a1)

    def set_background(self, sheet_name: str, a1_range: str, color: str) -> None:
        """Queue a background color change, e.g. color="#0f172a"."""
        grid_range = self.translator.to_grid_range(sheet_name, a1_range)
        self._queue(SetBackground(range=grid_range, color=hex_to_rgb_color(color)))

    def set_number_format(self, sheet_name: str, a1_range: str, pattern: str) -> None:
        """Queue a NUMBER format, e.g. pattern="#,##0.00"."""
        grid_range = self.translator.to_grid_range(sheet_name, a1_range)
        self._queue(SetNumberFormat(range=grid_range, pattern=pattern))

    def set_text_format(
        self,
        sheet_name: str,
        a1_range: str,
        bold: Optional[bool] = None,
        italic: Optional[bool] = None,
        underline: Optional[bool] = None,
        font_size: Optional[int] = None,
        color: Optional[str] = None,
    ) -> None:
        """Queue a text formatting update.

        Only the arguments that are given end up in the request and its update
        mask.

        Nothing is queued when no argument is given, since the update mask
        would be empty. The range is still resolved, so a missing sheet raises.

        Args:
            sheet_name: Target sheet name
            a1_range: A1 range
            bold: Bold on/off
            italic: Italic on/off
            underline: Underline on/off
            font_size: Font size in points
            color: Hex text color
        """
        grid_range = self.translator.to_grid_range(sheet_name, a1_range)

        text_format: Dict[str, Any] = {}
        if bold is not None:
            text_format["bold"] = bold
        if italic is not None:
            text_format["italic"] = italic
        if underline is not None:
            text_format["underline"] = underline
        if font_size is not None:
            text_format["fontSize"] = font_size
        if color:
            text_format["foregroundColor"] = hex_to_rgb_color(color)

        if not text_format:
            return
        self._queue(SetTextFormat(range=grid_range, text_format=text_format))

    def set_alignment(
        self,
        sheet_name: str,
        a1_range: str,
        horizontal: Optional[Union[HorizontalAlignment, str]] = None,
        vertical: Optional[Union[VerticalAlignment, str]] = None,
    ) -> None:
        """Queue a horizontal and/or vertical alignment update.

        Nothing is queued when neither alignment is given.
        """
        grid_range = self.translator.to_grid_range(sheet_name, a1_range)
        if not horizontal and not vertical:
            return
        self._queue(SetAlignment(
            range=grid_range,
            horizontal=enum_value(horizontal) if horizontal else None,
            vertical=enum_value(vertical) if vertical else None,
        ))

    def set_wrap_strategy(
        self,
        sheet_name: str,
        a1_range: str,
        wrap_strategy: Union[WrapStrategy, str],
    ) -> None:
        grid_range = self.translator.to_grid_range(sheet_name, a1_range)
        self._queue(SetWrapStrategy(range=grid_range, wrap_strategy=enum_value(wrap_strategy)))

    def set_borders(
        self,
        sheet_name: str,
        a1_range: str,
        style: Union[BorderStyle, str] = DEFAULT_BORDER_STYLE,
        width: Optional[int] = DEFAULT_BORDER_WIDTH,
        color: Optional[str] = None,
    ) -> None:
        """Queue uniform borders on every edge and inner line of a range.

        Without a color the border payload carries no color key and Sheets
        uses its default. A width of 0 (or None) falls back to
        DEFAULT_BORDER_WIDTH.
        """
        grid_range = self.translator.to_grid_range(sheet_name, a1_range)
        self._queue(SetBorders(
            range=grid_range,
            style=enum_value(style),
            width=width or DEFAULT_BORDER_WIDTH,
            color=hex_to_rgb_color(color) if color else None,
        ))

    def merge_range(
        self,
        sheet_name: str,
        a1_range: str,
        merge_type: Union[MergeType, str] = DEFAULT_MERGE_TYPE,
    ) -> None:
        grid_range = self.translator.to_grid_range(sheet_name, a1_range)
        self._queue(MergeCells(range=grid_range, merge_type=enum_value(merge_type)))

    def unmerge_range(self, sheet_name: str, a1_range: str) -> None:
        grid_range = self.translator.to_grid_range(sheet_name, a1_range)
        self._queue(UnmergeCells(range=grid_range))

    def auto_resize_columns(self, sheet_name: str, a1_range: str) -> None:
        """Queue an auto-resize of every column the range touches.

        Only the column span of the range matters; its rows are ignored.
        """
        grid_range = self.translator.to_grid_range(sheet_name, a1_range)
        self._queue(AutoResizeColumns(dimensions=DimensionRange.columns_of(grid_range)))

    def set_data_validation_list(self, sheet_name: str, a1_range: str, values: Sequence[str]) -> None:
        """Queue a dropdown validation. Nothing is queued for an empty list."""
        grid_range = self.translator.to_grid_range(sheet_name, a1_range)
        if not values:
            return
        self._queue(SetDataValidationList(range=grid_range, values=list(values)))

    def add_request(self, request: Dict[str, Any]) -> None:
        """Queue a raw Sheets batchUpdate request as-is."""
        self._queue(RawRequest(payload=request))

    def build_requests(self) -> List[Dict[str, Any]]:
        """Return the formatting batch exactly as commit() would submit it."""
        return [op.to_request() for op in self._operations]

    def build_value_data(self) -> List[Dict[str, Any]]:
        """Return the values batch data exactly as commit() would submit it."""
        return [write.to_dict() for write in self._value_writes]

    def commit(self) -> None:
        """Flush all queued formatting requests, then all queued values.

        Raises:
            BackendSubmissionError: If either batch fails. A failed formatting
                batch stops the values batch from being sent; a failed values
                batch leaves the formatting already applied.
        """
        if self._operations:
            logger.info(
                "Committing %d formatting request(s) to %s",
                len(self._operations), self.document_id,
            )
            self.backend.batch_update(self.document_id, self.build_requests())

        if self._value_writes:
            logger.info(
                "Committing %d value range(s) to %s",
                len(self._value_writes), self.document_id,
            )
            self.backend.values_batch_update(
                self.document_id,
                self.build_value_data(),
                self.value_input_option,
            )
