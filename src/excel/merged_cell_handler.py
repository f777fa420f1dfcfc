"""
Excelマージセル処理ユーティリティ

セル範囲の結合（内容の集約と結合範囲の登録）を担当するヘルパークラス
"""

import logging

from openpyxl.cell.cell import MergedCell
from openpyxl.utils import column_index_from_string
from openpyxl.utils.cell import coordinate_from_string
from openpyxl.worksheet.cell_range import CellRange

from src.error_messages import get_cell_lookup_error
from src.excel.cell_operations import ExcelCellOperations
from src.excel.range_calculator import ExcelRangeCalculator

logger = logging.getLogger(__name__)


class ExcelMergedCellHandler:
    """セル範囲の結合と結合情報の参照（全て staticmethod）"""

    @staticmethod
    def merge(sheet, cell_range: str | CellRange) -> str:
        """
        隣接する複数セルを結合する

        結合後に内容が残るのは左上セルのみ。
        - 範囲を行優先（上→下、左→右）で走査し、最初に見つかった空でないセルの
          値・スタイル・コメント・ハイパーリンクを左上セルにコピーする
          （左上セル自体が空でなければ、それがそのまま残る）
        - 左上以外のセルは全てクリアする
        - 範囲全体が空の場合も結合範囲として登録する

        途中でセルが解決できない場合は例外を送出する。ロールバックは行わないため、
        シートは途中まで変更された状態になる。

        Args:
            sheet: openpyxl Worksheet
            cell_range: 結合するセル範囲（例: "A1:B2"）またはCellRange

        Returns:
            登録した結合範囲（例: "A1:B2"）

        Raises:
            SpreadsheetError: 範囲が不正、またはセルが解決できない場合
        """
        range_str = ExcelRangeCalculator.to_range_string(cell_range)

        first_row, first_col = ExcelRangeCalculator.get_first_cell_reference(
            cell_range
        )
        upper_left_cell = ExcelMergedCellHandler._get_cell(sheet, first_row, first_col)

        copied = False
        for row_idx, col_idx in ExcelRangeCalculator.get_cell_references(cell_range):
            cell = ExcelMergedCellHandler._get_cell(sheet, row_idx, col_idx)
            if not copied and not ExcelCellOperations.is_blank(cell):
                ExcelCellOperations.copy(cell, upper_left_cell)
                copied = True
            if cell is not upper_left_cell:
                ExcelCellOperations.clear(cell)

        sheet.merge_cells(range_str)
        logger.info(f"Merged {range_str} on sheet '{sheet.title}'")
        return range_str

    @staticmethod
    def get_merged_range(sheet, coordinate: str) -> str | None:
        """
        セル座標を含む結合範囲を返す

        Args:
            sheet: openpyxl Worksheet
            coordinate: セル座標（例: "B2"）

        Returns:
            結合範囲（例: "A1:C3"）またはNone
        """
        col_letter, row_idx = coordinate_from_string(
            coordinate.replace("$", "").upper()
        )
        col_idx = column_index_from_string(col_letter)

        for merged_range in sheet.merged_cells.ranges:
            if (
                merged_range.min_row <= row_idx <= merged_range.max_row
                and merged_range.min_col <= col_idx <= merged_range.max_col
            ):
                return str(merged_range)
        return None

    @staticmethod
    def is_merged(sheet, cell_range: str | CellRange) -> bool:
        """セル範囲がそのまま結合範囲として登録されているか"""
        range_str = ExcelRangeCalculator.to_range_string(cell_range)
        bounds = ExcelRangeCalculator.parse_range(range_str)
        return any(
            (mr.min_row, mr.min_col, mr.max_row, mr.max_col) == bounds
            for mr in sheet.merged_cells.ranges
        )

    @staticmethod
    def _get_cell(sheet, row: int, col: int):
        """
        座標のセルを取得（存在しなければopenpyxlが作成する）

        他の結合範囲に含まれるセル（MergedCell）は書き込めないため解決失敗として扱う。
        """
        coordinate = ExcelRangeCalculator.to_coordinate(row, col)
        try:
            cell = sheet.cell(row=row, column=col)
        except ValueError as e:
            raise get_cell_lookup_error(coordinate, e) from e

        if isinstance(cell, MergedCell):
            merged_range = ExcelMergedCellHandler.get_merged_range(sheet, coordinate)
            raise get_cell_lookup_error(
                coordinate,
                ValueError(f"{coordinate} is already merged in {merged_range}"),
            )
        return cell
