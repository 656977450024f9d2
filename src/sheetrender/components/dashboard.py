"""
Dashboard components.

Building blocks for a simple report sheet:
- TitleComponent: Merged, styled title (and optional subtitle) at the top
- HeaderRowComponent: Styled header row
- DataTableComponent: Bordered, wrapped data block
- SummaryRowComponent: Label plus a SUM formula over one data column
- DemoDashboardComponent: Root composing all of the above
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import pandas as pd

from sheetrender.components.base import Component
from sheetrender.spreadsheet.model import a1_reference, column_index_to_letter
from sheetrender.spreadsheet.operations import (
    BorderStyle,
    HorizontalAlignment,
    MergeType,
    VerticalAlignment,
    WrapStrategy,
)
from sheetrender.utils.frames import frame_to_rows


TITLE_BACKGROUND = "#0f172a"
TITLE_TEXT = "#ffffff"
SUBTITLE_TEXT = "#475569"
HEADER_BACKGROUND = "#1e293b"
HEADER_TEXT = "#ffffff"
TABLE_BORDER = "#cbd5e1"
SUMMARY_BACKGROUND = "#e2e8f0"
AMOUNT_FORMAT = "#,##0.00"


@dataclass(frozen=True)
class TitleProps:
    sheet_name: str
    title: str
    subtitle: Optional[str] = None


class TitleComponent(Component[TitleProps]):
    """Writes a big title and an optional subtitle across A:D."""

    def render(self) -> None:
        ctx = self.context
        sheet_name = self.props.sheet_name

        ctx.write_range(a1_reference(sheet_name, "A1"), [[self.props.title]])
        ctx.merge_range(sheet_name, "A1:D1", MergeType.MERGE_ALL)
        ctx.set_background(sheet_name, "A1:D1", TITLE_BACKGROUND)
        ctx.set_text_format(sheet_name, "A1:D1", bold=True, font_size=16, color=TITLE_TEXT)
        ctx.set_alignment(
            sheet_name, "A1:D1",
            horizontal=HorizontalAlignment.CENTER, vertical=VerticalAlignment.MIDDLE,
        )

        if self.props.subtitle:
            ctx.write_range(a1_reference(sheet_name, "A2"), [[self.props.subtitle]])
            ctx.merge_range(sheet_name, "A2:D2", MergeType.MERGE_ALL)
            ctx.set_text_format(sheet_name, "A2:D2", italic=True, color=SUBTITLE_TEXT)
            ctx.set_alignment(
                sheet_name, "A2:D2",
                horizontal=HorizontalAlignment.CENTER, vertical=VerticalAlignment.MIDDLE,
            )


@dataclass(frozen=True)
class HeaderRowProps:
    sheet_name: str
    headers: Sequence[str]
    row_index: int


class HeaderRowComponent(Component[HeaderRowProps]):
    """Writes a header row starting in column A with header styling."""

    def render(self) -> None:
        ctx = self.context
        sheet_name = self.props.sheet_name
        row = self.props.row_index

        last_col = column_index_to_letter(len(self.props.headers))
        row_range = f"A{row}:{last_col}{row}"

        ctx.write_range(a1_reference(sheet_name, row_range), [list(self.props.headers)])
        ctx.set_background(sheet_name, row_range, HEADER_BACKGROUND)
        ctx.set_text_format(sheet_name, row_range, bold=True, color=HEADER_TEXT)
        ctx.set_alignment(
            sheet_name, row_range,
            horizontal=HorizontalAlignment.CENTER, vertical=VerticalAlignment.MIDDLE,
        )


@dataclass(frozen=True)
class DataTableProps:
    sheet_name: str
    rows: Sequence[Sequence[Any]]
    start_row: int


class DataTableComponent(Component[DataTableProps]):
    """Writes a 2D data block starting at column A of start_row.

    The column count is taken from the first row. Renders nothing for an
    empty table.
    """

    def render(self) -> None:
        rows = self.props.rows
        if not rows:
            return

        ctx = self.context
        sheet_name = self.props.sheet_name
        start_row = self.props.start_row
        end_row = start_row + len(rows) - 1
        last_col = column_index_to_letter(len(rows[0]))
        table_range = f"A{start_row}:{last_col}{end_row}"

        ctx.write_range(a1_reference(sheet_name, table_range), rows)
        ctx.set_borders(sheet_name, table_range, style=BorderStyle.SOLID, width=1, color=TABLE_BORDER)
        ctx.set_alignment(sheet_name, table_range, vertical=VerticalAlignment.MIDDLE)
        ctx.set_wrap_strategy(sheet_name, table_range, WrapStrategy.WRAP)


@dataclass(frozen=True)
class SummaryRowProps:
    """Props for SummaryRowComponent.

    Attributes:
        sheet_name: Target sheet
        label: Text shown in column A
        row_index: 1-based row of the summary
        num_cols: Width of the summary row; the total goes in the last column
        amount_column_index: 1-based column that is summed
        data_start_row: First summed row (1-based)
        data_end_row: Last summed row (1-based)
    """
    sheet_name: str
    label: str
    row_index: int
    num_cols: int
    amount_column_index: int
    data_start_row: int
    data_end_row: int


class SummaryRowComponent(Component[SummaryRowProps]):
    """Writes a label and a SUM total in a highlighted row."""

    def render(self) -> None:
        ctx = self.context
        props = self.props
        sheet_name = props.sheet_name
        row = props.row_index

        last_col = column_index_to_letter(props.num_cols)
        amount_cell = f"{last_col}{row}"
        full_row = f"A{row}:{last_col}{row}"

        # Label goes into a single cell; the merge only widens it visually
        ctx.write_range(a1_reference(sheet_name, f"A{row}"), [[props.label]])
        if props.num_cols > 1:
            ctx.merge_range(
                sheet_name,
                f"A{row}:{column_index_to_letter(props.num_cols - 1)}{row}",
                MergeType.MERGE_ALL,
            )

        ctx.set_alignment(
            sheet_name, full_row,
            horizontal=HorizontalAlignment.RIGHT, vertical=VerticalAlignment.MIDDLE,
        )
        ctx.set_background(sheet_name, full_row, SUMMARY_BACKGROUND)
        ctx.set_text_format(sheet_name, full_row, bold=True)

        amount_col = column_index_to_letter(props.amount_column_index)
        sum_formula = f"=SUM({amount_col}{props.data_start_row}:{amount_col}{props.data_end_row})"
        ctx.write_range(a1_reference(sheet_name, amount_cell), [[sum_formula]])
        ctx.set_number_format(sheet_name, amount_cell, AMOUNT_FORMAT)


@dataclass(frozen=True)
class DemoDashboardProps:
    sheet_name: str
    headers: Sequence[str]
    rows: Sequence[Sequence[Any]]
    title: str = "Sheet Component Demo"
    subtitle: Optional[str] = "Rendered with a single batchUpdate + values.batchUpdate"

    @classmethod
    def from_frame(cls, sheet_name: str, frame: pd.DataFrame, **kwargs: Any) -> "DemoDashboardProps":
        """Build props from a DataFrame: column names become the headers."""
        return cls(
            sheet_name=sheet_name,
            headers=[str(column) for column in frame.columns],
            rows=frame_to_rows(frame),
            **kwargs,
        )


HEADER_ROW_INDEX = 4


class DemoDashboardComponent(Component[DemoDashboardProps]):
    """Root dashboard: title, header row, data table and a total row.

    The last column is treated as the amount column and summed.
    """

    def render(self) -> None:
        props = self.props
        sheet_name = props.sheet_name
        num_cols = len(props.headers)

        self.render_child(TitleComponent, TitleProps(
            sheet_name=sheet_name,
            title=props.title,
            subtitle=props.subtitle,
        ))

        self.render_child(HeaderRowComponent, HeaderRowProps(
            sheet_name=sheet_name,
            headers=props.headers,
            row_index=HEADER_ROW_INDEX,
        ))

        data_start_row = HEADER_ROW_INDEX + 1
        self.render_child(DataTableComponent, DataTableProps(
            sheet_name=sheet_name,
            rows=props.rows,
            start_row=data_start_row,
        ))

        data_end_row = data_start_row + len(props.rows) - 1
        summary_row = data_end_row + 2

        self.render_child(SummaryRowComponent, SummaryRowProps(
            sheet_name=sheet_name,
            label="Total amount",
            row_index=summary_row,
            num_cols=num_cols,
            amount_column_index=num_cols,
            data_start_row=data_start_row,
            data_end_row=data_end_row,
        ))

        last_col = column_index_to_letter(num_cols)
        self.context.auto_resize_columns(sheet_name, f"A1:{last_col}{summary_row}")
