"""
A1 range to GridRange translation.
"""

import logging

from sheetrender.backend.base import SheetsBackend
from sheetrender.spreadsheet.model import GridRange

logger = logging.getLogger(__name__)


class RangeTranslator:
    """Resolves sheet-local A1 ranges to GridRanges through a backend.

    Nothing is cached: each call asks the backend to resolve the sheet and
    the range again, with one backend lookup per call.

    Attributes:
        backend: Backend used for sheet metadata
        document_id: Document the ranges belong to
    """

    def __init__(self, backend: SheetsBackend, document_id: str) -> None:
        self.backend = backend
        self.document_id = document_id

    def to_grid_range(self, sheet_name: str, a1_range: str) -> GridRange:
        """Convert an A1 range within a sheet into a GridRange.

        Args:
            sheet_name: Target sheet name
            a1_range: A1 range without sheet prefix, e.g. "A1:C3"

        Returns:
            Zero-based, half-open GridRange

        Raises:
            SheetNotFoundError: If the sheet does not exist
            InvalidRangeError: If a1_range cannot be parsed
        """
        sheet_id, row, col, num_rows, num_cols = self.backend.resolve(
            self.document_id, sheet_name, a1_range
        )

        start_row = row - 1
        start_col = col - 1
        grid_range = GridRange(
            sheet_id=sheet_id,
            start_row_index=start_row,
            end_row_index=start_row + num_rows,
            start_column_index=start_col,
            end_column_index=start_col + num_cols,
        )
        logger.debug("Resolved %s!%s to %s", sheet_name, a1_range, grid_range)
        return grid_range
