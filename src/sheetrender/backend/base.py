"""
Abstract backend interface for spreadsheet rendering.

The SheetsBackend protocol defines the contract a render pass relies on: sheet
metadata lookups for range resolution, and the two batch submissions used by
commit. Concrete implementations are GspreadBackend (Google Sheets API) and
InMemoryBackend (offline recorder).
"""

from typing import Any, Dict, List, Protocol, Tuple


class SheetsBackend(Protocol):
    """Protocol for spreadsheet backends.

    Every method is addressed by document id. Metadata lookups must not
    change the document; only the two batch methods do.
    """

    def sheet_id(self, document_id: str, sheet_name: str) -> int:
        """Return the numeric id of a sheet.

        Raises:
            SheetNotFoundError: If the document has no sheet with that name
        """
        ...

    def range_span(self, document_id: str, sheet_name: str, a1_range: str) -> Tuple[int, int, int, int]:
        """Resolve an A1 expression on a sheet.

        Returns:
            Tuple of (row, column, num_rows, num_columns); row and column
            are 1-indexed

        Raises:
            SheetNotFoundError: If the document has no sheet with that name
            InvalidRangeError: If the expression cannot be parsed
        """
        ...

    def resolve(self, document_id: str, sheet_name: str, a1_range: str) -> Tuple[int, int, int, int, int]:
        """Look up a sheet once and resolve an A1 expression on it.

        Returns:
            Tuple of (sheet_id, row, column, num_rows, num_columns); row and
            column are 1-indexed

        Raises:
            SheetNotFoundError: If the document has no sheet with that name
            InvalidRangeError: If the expression cannot be parsed
        """
        ...

    def batch_update(self, document_id: str, requests: List[Dict[str, Any]]) -> Any:
        """Apply structural/formatting requests as one atomic batch.

        Raises:
            BackendSubmissionError: If the submission fails
        """
        ...

    def values_batch_update(
        self,
        document_id: str,
        data: List[Dict[str, Any]],
        value_input_option: str,
    ) -> Any:
        """Write value ranges as one atomic batch.

        Raises:
            BackendSubmissionError: If the submission fails
        """
        ...
