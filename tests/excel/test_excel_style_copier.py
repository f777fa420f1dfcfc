"""
ExcelStyleCopierのテスト
"""

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from src.excel import ExcelStyleCopier


class TestExcelStyleCopier:
    """ExcelStyleCopier（スタイル複製）のテスト"""

    def _styled_cell(self, ws):
        cell = ws["A1"]
        cell.font = Font(bold=True, color="FF0000")
        cell.fill = PatternFill(fill_type="solid", fgColor="FFFF00")
        cell.border = Border(left=Side(style="thin"))
        cell.alignment = Alignment(horizontal="center")
        cell.number_format = "yyyy-mm-dd"
        return cell

    def test_copy_within_workbook_shares_style_records(self, sheet):
        """同一Workbookではスタイルレコードを共有すること"""
        source = self._styled_cell(sheet)
        target = sheet["B2"]

        ExcelStyleCopier.copy_cell_style(source, target)

        assert target._style == source._style
        assert target._style is not source._style
        assert target.font.bold is True
        assert target.border.left.style == "thin"
        assert target.number_format == "yyyy-mm-dd"

    def test_copy_within_workbook_is_independent(self, sheet):
        """コピー後にコピー先を変更してもコピー元は変わらないこと"""
        source = self._styled_cell(sheet)
        target = sheet["B2"]

        ExcelStyleCopier.copy_cell_style(source, target)
        target.font = Font(bold=False)

        assert source.font.bold is True

    def test_copy_across_workbooks(self, sheet):
        """別Workbookでは各スタイル要素が複製されること"""
        source = self._styled_cell(sheet)
        target = Workbook().active["C3"]

        assert not ExcelStyleCopier.is_same_workbook(source, target)
        ExcelStyleCopier.copy_cell_style(source, target)

        assert target.font.bold is True
        assert target.fill.fill_type == "solid"
        assert target.border.left.style == "thin"
        assert target.alignment.horizontal == "center"
        assert target.number_format == "yyyy-mm-dd"

    def test_reset_cell_style(self, sheet):
        cell = self._styled_cell(sheet)
        assert ExcelStyleCopier.has_custom_style(cell)

        ExcelStyleCopier.reset_cell_style(cell)

        assert not ExcelStyleCopier.has_custom_style(cell)
        assert not cell.font.bold
        assert cell.number_format == "General"

    def test_has_custom_style_default_cell(self, sheet):
        assert not ExcelStyleCopier.has_custom_style(sheet["A1"])
