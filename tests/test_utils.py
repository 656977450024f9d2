"""
Unit tests for utility modules.

Tests cover:
- frame_to_rows: DataFrame to value matrix conversion
- serialize_batches / batches_to_json: pending batch snapshots
"""

import json

import numpy as np
import pandas as pd
import pytest

from sheetrender.context import SheetContext
from sheetrender.utils import SERIALIZATION_VERSION, batches_to_json, frame_to_rows, serialize_batches


class TestFrameToRows:
    """Test Suite for frame_to_rows."""

    def test_basic_frame(self):
        frame = pd.DataFrame({"name": ["Alice", "Bob"], "age": [30, 45]})
        assert frame_to_rows(frame) == [["Alice", 30], ["Bob", 45]]

    def test_missing_values_become_empty_strings(self):
        frame = pd.DataFrame({"a": [1.5, np.nan], "b": [None, "x"]})
        assert frame_to_rows(frame) == [[1.5, ""], ["", "x"]]

    def test_numpy_scalars_become_python_scalars(self):
        frame = pd.DataFrame({"n": np.array([1, 2], dtype=np.int64), "f": [True, False]})
        rows = frame_to_rows(frame)
        assert type(rows[0][0]) is int
        assert type(rows[0][1]) is bool

    def test_timestamps_become_strings(self):
        frame = pd.DataFrame({"when": pd.to_datetime(["2024-01-02", None])})
        assert frame_to_rows(frame) == [["2024-01-02 00:00:00"], [""]]

    def test_index_is_dropped(self):
        frame = pd.DataFrame({"a": [1, 2]}, index=["x", "y"])
        assert frame_to_rows(frame) == [[1], [2]]

    def test_empty_frame(self):
        assert frame_to_rows(pd.DataFrame({"a": []})) == []


class TestSerializeBatches:
    """Test Suite for pending batch serialization."""

    def test_snapshot_contents(self, context):
        context.write_range("'Demo'!A1", [["Title"]])
        context.merge_range("Demo", "A1:D1")

        data = serialize_batches(context)

        assert data["version"] == SERIALIZATION_VERSION
        assert data["document_id"] == "doc-123"
        assert data["value_input_option"] == "USER_ENTERED"
        assert data["requests"] == [{
            "mergeCells": {
                "range": {
                    "sheetId": 0,
                    "startRowIndex": 0,
                    "endRowIndex": 1,
                    "startColumnIndex": 0,
                    "endColumnIndex": 4,
                },
                "mergeType": "MERGE_ALL",
            }
        }]
        assert data["data"] == [{"range": "'Demo'!A1", "values": [["Title"]]}]

    def test_snapshot_does_not_submit(self, context, backend):
        context.set_background("Demo", "A1", "#fff")
        serialize_batches(context)
        assert backend.calls == []
        assert len(context.operations) == 1

    def test_rejects_non_context(self):
        with pytest.raises(TypeError, match="Expected SheetContext"):
            serialize_batches({"requests": []})  # type: ignore

    def test_json_round_trip(self, backend):
        context = SheetContext("doc-9", backend)
        context.set_borders("Demo", "A1:B2", color="#000")
        parsed = json.loads(batches_to_json(context))
        assert parsed["document_id"] == "doc-9"
        assert parsed["requests"][0]["updateBorders"]["top"]["color"] == {
            "red": 0.0, "green": 0.0, "blue": 0.0,
        }
