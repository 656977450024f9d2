"""
Exception classes for sheetrender.

These exceptions are raised while resolving ranges during a render pass and
while flushing the queued batches to the spreadsheet backend.
"""


class SheetRenderError(Exception):
    """Base class for all sheetrender errors."""
    pass


class SheetNotFoundError(SheetRenderError):
    """Raised when a range refers to a sheet that does not exist.

    Range resolution happens synchronously while components render, so this
    error aborts the render pass before ``commit()`` is reached. Operations
    queued before the failure stay in memory and are never submitted.
    """

    def __init__(self, sheet_name: str) -> None:
        super().__init__(f"Sheet not found: {sheet_name}")
        self.sheet_name = sheet_name


class InvalidRangeError(SheetRenderError):
    """Raised when an A1 range expression cannot be parsed.

    Examples:
        - Empty expressions
        - Mixed forms such as ``A1:3``
        - End before start (``C3:A1``)
    """
    pass


class SheetsAPIError(SheetRenderError):
    """Raised when a Google Sheets API call fails outside of a batch submission.

    This error wraps exceptions from gspread raised while opening the document
    or reading sheet metadata during range resolution. Common causes include:
        - Authentication failures
        - Missing permissions or an invalid document id
        - Rate limiting (HTTP 429)
    """
    pass


class BackendSubmissionError(SheetsAPIError):
    """Raised when a batch submission to the spreadsheet backend fails.

    This error wraps exceptions from the Google Sheets API (via gspread). If it
    is raised for the formatting batch, the values batch is never sent. If it
    is raised for the values batch, the formatting batch has already been
    applied and is not rolled back.
    """
    pass
