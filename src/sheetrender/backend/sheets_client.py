"""
Google Sheets backend via gspread.

This module provides GspreadBackend, the production SheetsBackend. It resolves
sheet metadata through gspread and submits the two commit batches with
``Spreadsheet.batch_update`` and ``Spreadsheet.values_batch_update``, wrapping
gspread errors in sheetrender exceptions.
"""

import logging
from typing import Any, Dict, List, Tuple

import gspread
from gspread.exceptions import APIError, SpreadsheetNotFound, WorksheetNotFound

from sheetrender.exceptions import BackendSubmissionError, SheetNotFoundError, SheetsAPIError
from sheetrender.spreadsheet.model import parse_a1_span

logger = logging.getLogger(__name__)


class GspreadBackend:
    """
    A SheetsBackend backed by an authenticated gspread client.

    Spreadsheet handles are opened once per document id. Sheet metadata is
    looked up again on every call, so renames or new sheets made while a
    render is in progress are seen.

    Attributes:
        gc: The authenticated gspread client instance
    """

    def __init__(self, gc: gspread.Client) -> None:
        """
        Initialize the backend with an authenticated gspread client.

        Args:
            gc: An authenticated gspread client, e.g. from ``gspread.service_account()``
                or ``gspread.oauth()``.
        """
        self.gc = gc
        self._spreadsheets: Dict[str, gspread.Spreadsheet] = {}

    def open(self, document_id: str) -> gspread.Spreadsheet:
        """
        Open a spreadsheet by its key, reusing an already opened handle.

        Raises:
            SheetsAPIError: If the spreadsheet cannot be opened
        """
        spreadsheet = self._spreadsheets.get(document_id)
        if spreadsheet is not None:
            return spreadsheet

        try:
            spreadsheet = self.gc.open_by_key(document_id)
        except SpreadsheetNotFound as e:
            raise SheetsAPIError(f"Spreadsheet not found: {document_id}") from e
        except APIError as e:
            raise SheetsAPIError(f"Failed to open spreadsheet '{document_id}': {e}") from e

        self._spreadsheets[document_id] = spreadsheet
        return spreadsheet

    def worksheet(self, document_id: str, sheet_name: str) -> gspread.Worksheet:
        """
        Look up a worksheet by name.

        Raises:
            SheetNotFoundError: If the document has no sheet with that name
            SheetsAPIError: If the metadata request fails
        """
        spreadsheet = self.open(document_id)
        try:
            return spreadsheet.worksheet(sheet_name)
        except WorksheetNotFound as e:
            raise SheetNotFoundError(sheet_name) from e
        except APIError as e:
            raise SheetsAPIError(f"Failed to read sheet '{sheet_name}': {e}") from e

    def sheet_id(self, document_id: str, sheet_name: str) -> int:
        return self.worksheet(document_id, sheet_name).id

    def range_span(self, document_id: str, sheet_name: str, a1_range: str) -> Tuple[int, int, int, int]:
        worksheet = self.worksheet(document_id, sheet_name)
        return parse_a1_span(a1_range, worksheet.row_count, worksheet.col_count)

    def resolve(self, document_id: str, sheet_name: str, a1_range: str) -> Tuple[int, int, int, int, int]:
        """
        Sheet id and 1-based span of a range from a single worksheet lookup.

        ``Spreadsheet.worksheet`` fetches the spreadsheet metadata over the
        network, so this is one read per resolved range.
        """
        worksheet = self.worksheet(document_id, sheet_name)
        row, col, num_rows, num_cols = parse_a1_span(a1_range, worksheet.row_count, worksheet.col_count)
        return worksheet.id, row, col, num_rows, num_cols

    def batch_update(self, document_id: str, requests: List[Dict[str, Any]]) -> Any:
        """
        Submit structural/formatting requests in one ``spreadsheets.batchUpdate``.

        Args:
            document_id: Spreadsheet key
            requests: Sheets API request dictionaries, applied in order

        Raises:
            BackendSubmissionError: If the API call fails
        """
        spreadsheet = self.open(document_id)
        logger.info("Submitting %d formatting request(s) to %s", len(requests), document_id)
        try:
            return spreadsheet.batch_update({"requests": requests})
        except APIError as e:
            raise BackendSubmissionError(
                f"Failed to apply {len(requests)} formatting request(s): {e}"
            ) from e

    def values_batch_update(
        self,
        document_id: str,
        data: List[Dict[str, Any]],
        value_input_option: str,
    ) -> Any:
        """
        Write value ranges in one ``spreadsheets.values.batchUpdate``.

        Args:
            document_id: Spreadsheet key
            data: List of dictionaries with 'range' and 'values' keys where:
                - range: Sheet-qualified A1 range (e.g., "'Demo'!A1:C10")
                - values: 2D list of values to write
            value_input_option: "USER_ENTERED" (parsed like typed input) or "RAW"

        Raises:
            BackendSubmissionError: If the API call fails
        """
        spreadsheet = self.open(document_id)
        logger.info("Submitting %d value range(s) to %s", len(data), document_id)
        try:
            return spreadsheet.values_batch_update(
                {"valueInputOption": value_input_option, "data": data}
            )
        except APIError as e:
            raise BackendSubmissionError(
                f"Failed to write {len(data)} value range(s): {e}"
            ) from e
