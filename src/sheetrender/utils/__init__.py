"""
Utility modules for sheetrender.

This package provides helper functions for:
- DataFrame conversion (frame_to_rows)
- Pending batch serialization (serialize_batches, batches_to_json)
"""

from .frames import frame_to_rows
from .serialization import SERIALIZATION_VERSION, batches_to_json, serialize_batches

__all__ = [
    "frame_to_rows",
    "serialize_batches",
    "batches_to_json",
    "SERIALIZATION_VERSION",
]
