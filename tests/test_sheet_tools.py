import logging
import sys

import pytest
from openpyxl import load_workbook

from src.error_messages import ErrorCategory, SpreadsheetError
from src.sheet_tools import clear_cell, copy_cell, merge_range, setup_logging


class TestMergeRange:
    """merge_range 関数のテスト"""

    def test_merge_in_place(self, xlsx_file):
        """結合結果がファイルに保存されること"""
        result = merge_range(xlsx_file, "A1:B1", sheet_name="Data")

        assert result == "A1:B1"
        ws = load_workbook(xlsx_file)["Data"]
        assert ws["A1"].value == "Total"
        assert ws["B1"].value is None
        assert "A1:B1" in {str(mr) for mr in ws.merged_cells.ranges}

    def test_merge_to_output_file(self, xlsx_file, tmp_path):
        """outputを指定すると元ファイルは変更されないこと"""
        output = tmp_path / "merged.xlsx"

        merge_range(xlsx_file, "A3:B3", sheet_name="Data", output=output)

        merged = load_workbook(output)["Data"]
        assert merged["A3"].value == 99
        original = load_workbook(xlsx_file)["Data"]
        assert not original.merged_cells.ranges

    def test_merge_defaults_to_active_sheet(self, xlsx_file):
        merge_range(xlsx_file, "A1:B1")

        wb = load_workbook(xlsx_file)
        assert {str(mr) for mr in wb["Data"].merged_cells.ranges} == {"A1:B1"}
        assert not wb["Other"].merged_cells.ranges

    def test_missing_file(self, tmp_path):
        with pytest.raises(SpreadsheetError) as exc_info:
            merge_range(tmp_path / "missing.xlsx", "A1:B1")

        assert exc_info.value.category == ErrorCategory.WORKBOOK

    def test_missing_sheet(self, xlsx_file):
        with pytest.raises(SpreadsheetError) as exc_info:
            merge_range(xlsx_file, "A1:B1", sheet_name="Nope")

        assert exc_info.value.category == ErrorCategory.WORKBOOK

    def test_invalid_range(self, xlsx_file):
        with pytest.raises(SpreadsheetError) as exc_info:
            merge_range(xlsx_file, "B1:A1")

        assert exc_info.value.category == ErrorCategory.INVALID_RANGE


class TestCopyCell:
    """copy_cell 関数のテスト"""

    def test_copy_cell(self, xlsx_file):
        copy_cell(xlsx_file, "B1", "D5", sheet_name="Data")

        ws = load_workbook(xlsx_file)["Data"]
        assert ws["D5"].value == 42
        assert ws["B1"].value == 42

    def test_copy_cell_rejects_range(self, xlsx_file):
        """コピー元・コピー先は単一セルであること"""
        with pytest.raises(SpreadsheetError) as exc_info:
            copy_cell(xlsx_file, "A1:B1", "D5")

        assert exc_info.value.category == ErrorCategory.INVALID_RANGE


class TestClearCell:
    """clear_cell 関数のテスト"""

    def test_clear_range(self, xlsx_file):
        count = clear_cell(xlsx_file, "A1:B1", sheet_name="Data")

        assert count == 2
        ws = load_workbook(xlsx_file)["Data"]
        assert ws["A1"].value is None
        assert ws["B1"].value is None
        assert ws["B3"].value == 99

    def test_clear_invalid_mode(self, xlsx_file):
        with pytest.raises(SpreadsheetError) as exc_info:
            clear_cell(xlsx_file, "A1", mode="styles")

        assert exc_info.value.category == ErrorCategory.CONFIGURATION


class TestSetupLogging:
    """setup_logging 関数のテスト"""

    def test_logs_to_stderr(self):
        root_logger = logging.getLogger()
        saved_handlers = root_logger.handlers[:]
        saved_level = root_logger.level
        try:
            setup_logging()

            assert len(root_logger.handlers) == 1
            handler = root_logger.handlers[0]
            assert isinstance(handler, logging.StreamHandler)
            assert handler.stream is sys.stderr
        finally:
            root_logger.handlers[:] = saved_handlers
            root_logger.setLevel(saved_level)
