"""
Render entry points.

Each function runs one render pass (build a context, render the root component,
commit) against a specific backend. Commit is the only step with
network-visible effects.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, Type

from sheetrender.backend.base import SheetsBackend
from sheetrender.components.base import Component
from sheetrender.context import DEFAULT_VALUE_INPUT_OPTION, SheetContext

logger = logging.getLogger(__name__)

LOCAL_DOCUMENT_ID = "local"


def render_sheet(
    document_id: str,
    root_component: Type[Component[Any]],
    props: Any,
    backend: SheetsBackend,
    value_input_option: str = DEFAULT_VALUE_INPUT_OPTION,
) -> SheetContext:
    """Render a root component tree into a spreadsheet.

    Args:
        document_id: Target spreadsheet id
        root_component: Root component class
        props: Props for the root component
        backend: Backend used for range resolution and the two batches
        value_input_option: How written values are interpreted by Sheets

    Returns:
        The committed context, for inspection

    Raises:
        SheetNotFoundError: If a component targets a missing sheet; nothing
            is submitted
        BackendSubmissionError: If a commit batch fails
    """
    context = SheetContext(document_id, backend, value_input_option=value_input_option)
    root = root_component(context, props)
    logger.debug("Rendering %s into %s", root_component.__name__, document_id)
    root.render()
    context.commit()
    return context


def render_to_google_sheets(
    document_id: str,
    root_component: Type[Component[Any]],
    props: Any,
    gc: Any,
) -> SheetContext:
    """Render a component tree into an existing Google Sheet.

    Args:
        document_id: Key of the target spreadsheet
        root_component: Root component class
        props: Props for the root component
        gc: An authenticated ``gspread.Client`` (from
            ``gspread.service_account()`` or ``gspread.oauth()``).

    Returns:
        The committed context
    """
    from sheetrender.backend.sheets_client import GspreadBackend

    return render_sheet(document_id, root_component, props, GspreadBackend(gc))


def render_locally(
    root_component: Type[Component[Any]],
    props: Any,
    sheets: Optional[Dict[str, Tuple[int, int]]] = None,
) -> "InMemoryBackend":
    """Render a component tree against an in-memory backend (no network required).

    Args:
        root_component: Root component class
        props: Props for the root component
        sheets: Mapping of sheet name to (rows, cols) for the local document

    Returns:
        The ``InMemoryBackend`` instance. Inspect ``backend.calls`` for the
        recorded batches.
    """
    from sheetrender.backend.memory import InMemoryBackend

    backend = InMemoryBackend(sheets)
    render_sheet(LOCAL_DOCUMENT_ID, root_component, props, backend)
    return backend
