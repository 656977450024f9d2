"""
In-memory backend for offline rendering.

Knows the sheets of a single local document (name, id, size) and records every
batch submission instead of applying it. No cell grid is kept and formulas are
never evaluated; this is a call-level recorder for tests and dry runs.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional, Tuple

from sheetrender.exceptions import SheetNotFoundError
from sheetrender.spreadsheet.model import parse_a1_span

logger = logging.getLogger(__name__)

DEFAULT_SHEET_ROWS = 1000
DEFAULT_SHEET_COLS = 26

BATCH_UPDATE = "batch_update"
VALUES_BATCH_UPDATE = "values_batch_update"


class InMemoryBackend:
    """SheetsBackend that records submissions without a network.

    Sheet ids are assigned in declaration order starting at 0, which matches
    the id Google Sheets gives the first tab of a new spreadsheet.

    Usage::

        backend = InMemoryBackend({"Demo": (100, 10)})
        render_sheet("local", DemoDashboardComponent, props, backend)

        assert [kind for kind, _, _ in backend.calls] == [
            "batch_update", "values_batch_update",
        ]
    """

    def __init__(self, sheets: Optional[Dict[str, Tuple[int, int]]] = None) -> None:
        """
        Args:
            sheets: Mapping of sheet name to (rows, cols). Defaults to a single
                "Sheet1" of 1000 x 26.
        """
        if sheets is None:
            sheets = {"Sheet1": (DEFAULT_SHEET_ROWS, DEFAULT_SHEET_COLS)}

        self._sheets: Dict[str, Dict[str, int]] = {}
        for sheet_id, (name, (rows, cols)) in enumerate(sheets.items()):
            if rows <= 0 or cols <= 0:
                raise ValueError(f"Sheet dimensions must be positive integers: {name!r}")
            self._sheets[name] = {"id": sheet_id, "rows": rows, "cols": cols}

        self.calls: List[Tuple[str, str, Any]] = []

    @property
    def sheet_names(self) -> List[str]:
        return list(self._sheets)

    def _sheet(self, sheet_name: str) -> Dict[str, int]:
        info = self._sheets.get(sheet_name)
        if info is None:
            raise SheetNotFoundError(sheet_name)
        return info

    def sheet_id(self, document_id: str, sheet_name: str) -> int:
        return self._sheet(sheet_name)["id"]

    def range_span(self, document_id: str, sheet_name: str, a1_range: str) -> Tuple[int, int, int, int]:
        info = self._sheet(sheet_name)
        return parse_a1_span(a1_range, info["rows"], info["cols"])

    def resolve(self, document_id: str, sheet_name: str, a1_range: str) -> Tuple[int, int, int, int, int]:
        info = self._sheet(sheet_name)
        return (info["id"],) + parse_a1_span(a1_range, info["rows"], info["cols"])

    def batch_update(self, document_id: str, requests: List[Dict[str, Any]]) -> Dict[str, Any]:
        logger.info("Recording %d formatting request(s) for %s", len(requests), document_id)
        self.calls.append((BATCH_UPDATE, document_id, copy.deepcopy(requests)))
        return {"spreadsheetId": document_id, "replies": [{} for _ in requests]}

    def values_batch_update(
        self,
        document_id: str,
        data: List[Dict[str, Any]],
        value_input_option: str,
    ) -> Dict[str, Any]:
        logger.info("Recording %d value range(s) for %s", len(data), document_id)
        self.calls.append((
            VALUES_BATCH_UPDATE,
            document_id,
            {"valueInputOption": value_input_option, "data": copy.deepcopy(data)},
        ))
        return {"spreadsheetId": document_id, "totalUpdatedRanges": len(data)}

    def formatting_batches(self) -> List[List[Dict[str, Any]]]:
        """Return the request lists of every recorded batch_update, in order."""
        return [payload for kind, _, payload in self.calls if kind == BATCH_UPDATE]

    def value_batches(self) -> List[Dict[str, Any]]:
        """Return the bodies of every recorded values_batch_update, in order."""
        return [payload for kind, _, payload in self.calls if kind == VALUES_BATCH_UPDATE]
