from unittest.mock import patch

import pytest
from openpyxl import load_workbook
from typer.testing import CliRunner

from src.config import config
from src.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    """CLIがテスト中にルートロガーを差し替えないようにする"""
    with patch("src.main.setup_logging"):
        yield


class TestCli:
    """typer CLI のテスト"""

    @pytest.mark.unit
    def test_merge_command(self, xlsx_file):
        result = runner.invoke(app, ["merge", str(xlsx_file), "A1:B1"])

        assert result.exit_code == 0
        assert "A1:B1" in result.output
        ws = load_workbook(xlsx_file)["Data"]
        assert ws["A1"].value == "Total"
        assert "A1:B1" in {str(mr) for mr in ws.merged_cells.ranges}

    @pytest.mark.unit
    def test_merge_command_with_sheet_and_output(self, xlsx_file, tmp_path):
        output = tmp_path / "out.xlsx"

        result = runner.invoke(
            app,
            [
                "merge",
                str(xlsx_file),
                "A1:B1",
                "--sheet",
                "Other",
                "--output",
                str(output),
            ],
        )

        assert result.exit_code == 0
        ws = load_workbook(output)["Other"]
        assert ws["A1"].value == "other sheet"
        assert {str(mr) for mr in ws.merged_cells.ranges} == {"A1:B1"}

    @pytest.mark.unit
    def test_copy_command(self, xlsx_file):
        result = runner.invoke(app, ["copy", str(xlsx_file), "A1", "C1"])

        assert result.exit_code == 0
        assert load_workbook(xlsx_file)["Data"]["C1"].value == "Total"

    @pytest.mark.unit
    def test_clear_command(self, xlsx_file):
        result = runner.invoke(
            app, ["clear", str(xlsx_file), "A1:B1", "--mode", "contents"]
        )

        assert result.exit_code == 0
        assert "Cleared 2 cell(s)" in result.output
        assert load_workbook(xlsx_file)["Data"]["B1"].value is None

    @pytest.mark.unit
    def test_missing_file_exits_with_error(self, tmp_path):
        result = runner.invoke(app, ["merge", str(tmp_path / "missing.xlsx"), "A1:B1"])

        assert result.exit_code == 1

    @pytest.mark.unit
    def test_invalid_range_exits_with_error(self, xlsx_file):
        result = runner.invoke(app, ["merge", str(xlsx_file), "B1:A1"])

        assert result.exit_code == 1
        assert not load_workbook(xlsx_file)["Data"].merged_cells.ranges

    @pytest.mark.unit
    def test_invalid_config_exits_with_error(self, xlsx_file):
        with patch.object(config, "clear_mode", "bogus"):
            result = runner.invoke(app, ["clear", str(xlsx_file), "A1"])

        assert result.exit_code == 1
        assert load_workbook(xlsx_file)["Data"]["A1"].value == "Total"
