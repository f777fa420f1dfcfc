import os
from unittest.mock import patch

import pytest
from openpyxl import Workbook


@pytest.fixture
def workbook():
    """Empty workbook with a single sheet named 'TestSheet'"""
    wb = Workbook()
    wb.active.title = "TestSheet"
    return wb


@pytest.fixture
def sheet(workbook):
    """Active sheet of the test workbook"""
    return workbook.active


@pytest.fixture
def xlsx_file(tmp_path):
    """Saved workbook used by the file-level operations"""
    wb = Workbook()
    ws = wb.active
    ws.title = "Data"
    ws["A1"] = "Total"
    ws["B1"] = 42
    ws["B3"] = 99

    other = wb.create_sheet("Other")
    other["A1"] = "other sheet"

    path = tmp_path / "book.xlsx"
    wb.save(path)
    return path


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing"""
    env_vars = {
        "SHEET_TOOLS_LOG_LEVEL": "debug",
        "SHEET_TOOLS_CLEAR_MODE": "contents",
        "SHEET_TOOLS_STRICT_HYPERLINK_REMOVAL": "true",
    }

    with patch.dict(os.environ, env_vars, clear=True):
        yield env_vars
