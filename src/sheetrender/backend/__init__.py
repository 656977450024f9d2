"""
Backend module for sheetrender.

This module provides the backends a render pass talks to. ``GspreadBackend``
targets the Google Sheets API; ``InMemoryBackend`` records submissions
in-process (no network required).
"""

from sheetrender.backend.base import SheetsBackend
from sheetrender.backend.memory import InMemoryBackend
from sheetrender.backend.sheets_client import GspreadBackend

__all__ = [
    "SheetsBackend",
    "GspreadBackend",
    "InMemoryBackend",
]
