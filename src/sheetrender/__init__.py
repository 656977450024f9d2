"""
sheetrender - Render component trees into Google Sheets with two batch calls.

Components queue formatting requests and value writes on a shared context
during a single synchronous render pass. On commit, the context sends every
formatting request in one ``spreadsheets.batchUpdate`` and then every value
write in one ``spreadsheets.values.batchUpdate``.

Usage:
    >>> import gspread
    >>> from sheetrender import DemoDashboardComponent, DemoDashboardProps, render_to_google_sheets
    >>> props = DemoDashboardProps(
    ...     sheet_name="Demo",
    ...     headers=["Project", "Owner", "Hours", "Amount"],
    ...     rows=[["Invoice Generator", "Lidia", 4, 520]],
    ... )
    >>> render_to_google_sheets(spreadsheet_id, DemoDashboardComponent, props, gspread.service_account())

Key components:
- SheetContext: Accumulates operations and flushes them on commit
- RangeTranslator: Resolves A1 ranges to GridRanges through a backend
- Component: Base class for render logic
- Backends: GspreadBackend (Google Sheets API) and InMemoryBackend (offline)
"""

from .backend import GspreadBackend, InMemoryBackend, SheetsBackend
from .components import (
    Component,
    DataTableComponent,
    DataTableProps,
    DemoDashboardComponent,
    DemoDashboardProps,
    HeaderRowComponent,
    HeaderRowProps,
    SummaryRowComponent,
    SummaryRowProps,
    TitleComponent,
    TitleProps,
)
from .context import SheetContext
from .exceptions import *
from .renderer import render_locally, render_sheet, render_to_google_sheets
from .spreadsheet import GridRange, column_index_to_letter, hex_to_rgb_color
from .translator import RangeTranslator

# Version
__version__ = "0.1.0"

__all__ = [
    "SheetContext",
    "RangeTranslator",
    "GridRange",
    "column_index_to_letter",
    "hex_to_rgb_color",
    "Component",
    "TitleComponent",
    "TitleProps",
    "HeaderRowComponent",
    "HeaderRowProps",
    "DataTableComponent",
    "DataTableProps",
    "SummaryRowComponent",
    "SummaryRowProps",
    "DemoDashboardComponent",
    "DemoDashboardProps",
    "SheetsBackend",
    "GspreadBackend",
    "InMemoryBackend",
    "render_sheet",
    "render_to_google_sheets",
    "render_locally",
    "SheetRenderError",
    "SheetNotFoundError",
    "InvalidRangeError",
    "SheetsAPIError",
    "BackendSubmissionError",
]
