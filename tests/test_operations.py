"""
Unit tests for queued operation payloads.

Each formatting operation must render the exact Sheets API request shape that
the structural batch sends.
"""

from sheetrender.spreadsheet.model import DimensionRange, GridRange
from sheetrender.spreadsheet.operations import (
    AutoResizeColumns,
    BorderStyle,
    MergeCells,
    RawRequest,
    SetAlignment,
    SetBackground,
    SetBorders,
    SetDataValidationList,
    SetNumberFormat,
    SetTextFormat,
    SetWrapStrategy,
    UnmergeCells,
    ValueWrite,
    enum_value,
)

RANGE = GridRange(sheet_id=0, start_row_index=0, end_row_index=1,
                  start_column_index=0, end_column_index=4)
RANGE_DICT = RANGE.to_dict()
RED = {"red": 1.0, "green": 0.0, "blue": 0.0}


class TestRepeatCellOperations:
    """Test Suite for repeatCell-based operations."""

    def test_background(self):
        assert SetBackground(range=RANGE, color=RED).to_request() == {
            "repeatCell": {
                "range": RANGE_DICT,
                "cell": {"userEnteredFormat": {"backgroundColor": RED}},
                "fields": "userEnteredFormat.backgroundColor",
            }
        }

    def test_number_format_is_typed_number(self):
        request = SetNumberFormat(range=RANGE, pattern="#,##0.00").to_request()
        assert request["repeatCell"]["cell"]["userEnteredFormat"] == {
            "numberFormat": {"type": "NUMBER", "pattern": "#,##0.00"}
        }
        assert request["repeatCell"]["fields"] == "userEnteredFormat.numberFormat"

    def test_text_format_mask_lists_only_given_fields(self):
        op = SetTextFormat(range=RANGE, text_format={"bold": True, "foregroundColor": RED})
        request = op.to_request()
        assert request["repeatCell"]["cell"]["userEnteredFormat"] == {
            "textFormat": {"bold": True, "foregroundColor": RED}
        }
        assert request["repeatCell"]["fields"] == (
            "userEnteredFormat.textFormat.bold,userEnteredFormat.textFormat.foregroundColor"
        )

    def test_alignment_both(self):
        request = SetAlignment(range=RANGE, horizontal="CENTER", vertical="MIDDLE").to_request()
        assert request["repeatCell"]["cell"]["userEnteredFormat"] == {
            "horizontalAlignment": "CENTER",
            "verticalAlignment": "MIDDLE",
        }
        assert request["repeatCell"]["fields"] == (
            "userEnteredFormat.horizontalAlignment,userEnteredFormat.verticalAlignment"
        )

    def test_alignment_vertical_only(self):
        request = SetAlignment(range=RANGE, vertical="TOP").to_request()
        assert request["repeatCell"]["cell"]["userEnteredFormat"] == {"verticalAlignment": "TOP"}
        assert request["repeatCell"]["fields"] == "userEnteredFormat.verticalAlignment"

    def test_wrap_strategy(self):
        request = SetWrapStrategy(range=RANGE, wrap_strategy="WRAP").to_request()
        assert request["repeatCell"]["cell"]["userEnteredFormat"] == {"wrapStrategy": "WRAP"}
        assert request["repeatCell"]["fields"] == "userEnteredFormat.wrapStrategy"


class TestStructuralOperations:
    """Test Suite for borders, merges, resize, validation and raw requests."""

    def test_borders_apply_to_every_edge(self):
        request = SetBorders(range=RANGE, style="DASHED", width=2, color=RED).to_request()
        body = request["updateBorders"]
        assert body["range"] == RANGE_DICT
        expected = {"style": "DASHED", "width": 2, "color": RED}
        for edge in ("top", "bottom", "left", "right", "innerHorizontal", "innerVertical"):
            assert body[edge] == expected

    def test_borders_without_color_omit_color_key(self):
        body = SetBorders(range=RANGE).to_request()["updateBorders"]
        assert body["top"] == {"style": "SOLID", "width": 1}
        assert "color" not in body["innerVertical"]

    def test_merge_defaults_to_merge_all(self):
        assert MergeCells(range=RANGE).to_request() == {
            "mergeCells": {"range": RANGE_DICT, "mergeType": "MERGE_ALL"}
        }

    def test_unmerge(self):
        assert UnmergeCells(range=RANGE).to_request() == {"unmergeCells": {"range": RANGE_DICT}}

    def test_auto_resize_columns(self):
        dims = DimensionRange(sheet_id=0, dimension="COLUMNS", start_index=0, end_index=4)
        assert AutoResizeColumns(dimensions=dims).to_request() == {
            "autoResizeDimensions": {
                "dimensions": {"sheetId": 0, "dimension": "COLUMNS", "startIndex": 0, "endIndex": 4}
            }
        }

    def test_data_validation_list(self):
        request = SetDataValidationList(range=RANGE, values=["Open", "Done"]).to_request()
        assert request == {
            "setDataValidation": {
                "range": RANGE_DICT,
                "rule": {
                    "condition": {
                        "type": "ONE_OF_LIST",
                        "values": [{"userEnteredValue": "Open"}, {"userEnteredValue": "Done"}],
                    },
                    "showCustomUi": True,
                },
            }
        }

    def test_raw_request_is_returned_verbatim(self):
        payload = {"updateSheetProperties": {"properties": {"sheetId": 0}, "fields": "title"}}
        assert RawRequest(payload=payload).to_request() is payload


class TestValueWrite:
    """Test Suite for ValueWrite."""

    def test_to_dict(self):
        write = ValueWrite(range="'Demo'!A1", values=[["Title"]])
        assert write.to_dict() == {"range": "'Demo'!A1", "values": [["Title"]]}


def test_enum_value_accepts_enums_and_strings():
    assert enum_value(BorderStyle.DOUBLE) == "DOUBLE"
    assert enum_value("DOTTED") == "DOTTED"
