"""
pandas DataFrame to value matrix conversion.
"""

from typing import Any, List

import pandas as pd


def _to_cell(value: Any) -> Any:
    if isinstance(value, (pd.Timestamp, pd.Timedelta)):
        return str(value)
    # numpy scalars -> builtin Python scalars
    if hasattr(value, "item"):
        return value.item()
    return value


def frame_to_rows(frame: pd.DataFrame) -> List[List[Any]]:
    """Convert a DataFrame's data (no header, no index) to a 2D list of cells.

    Missing values (NaN, None, NaT) become empty strings and numpy scalars
    become plain Python values, so the result can be sent to the values API.

    Args:
        frame: Source DataFrame

    Returns:
        List of rows, one list of cell values per DataFrame row
    """
    cleaned = frame.astype(object).where(pd.notna(frame), "")
    return [
        [_to_cell(value) for value in row]
        for row in cleaned.itertuples(index=False, name=None)
    ]
