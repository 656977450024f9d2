"""
Pending batch serialization utilities.

Provides a JSON snapshot of what a SheetContext would submit on commit(). The
format carries a version for forward compatibility and is meant for dry runs
and debugging; it is never read back by sheetrender.
"""

import json
from typing import Any, Dict

from sheetrender.context import SheetContext


# Current serialization format version
SERIALIZATION_VERSION = "1.0"


def serialize_batches(context: SheetContext) -> Dict[str, Any]:
    """Serialize a context's pending batches to a JSON-serializable dictionary.

    The serialized format includes:
    - version: Format version string
    - document_id: Target document
    - requests: The formatting batch, in application order
    - value_input_option: How values will be interpreted
    - data: The values batch, in call order

    Args:
        context: The context to snapshot; it is not modified

    Returns:
        Dictionary that can be serialized to JSON

    Raises:
        TypeError: If context is not a SheetContext instance
    """
    if not isinstance(context, SheetContext):
        raise TypeError(f"Expected SheetContext, got {type(context)}")

    return {
        "version": SERIALIZATION_VERSION,
        "document_id": context.document_id,
        "requests": context.build_requests(),
        "value_input_option": context.value_input_option,
        "data": context.build_value_data(),
    }


def batches_to_json(context: SheetContext, indent: int = 2) -> str:
    """Serialize a context's pending batches to a JSON string.

    Args:
        context: The context to snapshot
        indent: Indentation passed to json.dumps

    Returns:
        JSON string
    """
    return json.dumps(serialize_batches(context), indent=indent, default=str)
