"""
Excel範囲計算ユーティリティ

セル範囲の解析・列挙・変換を担当するヘルパークラス
"""

import logging

from openpyxl.utils import get_column_letter, range_boundaries
from openpyxl.worksheet.cell_range import CellRange

from src.error_messages import get_invalid_range_error

logger = logging.getLogger(__name__)


class ExcelRangeCalculator:
    """セル範囲の解析・列挙・変換（全て staticmethod）"""

    @staticmethod
    def parse_range(cell_range: str | CellRange) -> tuple[int, int, int, int]:
        """
        セル範囲を行・列の境界に分解する

        Args:
            cell_range: セル範囲（例: "A1:D10", "$A$1:$B$2", "C3"）またはCellRange

        Returns:
            (min_row, min_col, max_row, max_col)のタプル

        Raises:
            SpreadsheetError: 範囲が不正・逆順序・行全体/列全体指定の場合
        """
        if isinstance(cell_range, CellRange):
            return (
                cell_range.min_row,
                cell_range.min_col,
                cell_range.max_row,
                cell_range.max_col,
            )

        if not cell_range or not str(cell_range).strip():
            raise get_invalid_range_error(cell_range)

        raw = str(cell_range).strip().replace("$", "").upper()

        try:
            min_col, min_row, max_col, max_row = range_boundaries(raw)
        except (ValueError, TypeError) as e:
            raise get_invalid_range_error(cell_range, e) from e

        # "A:A" / "1:1" のような行全体・列全体指定は矩形として扱わない
        if None in (min_col, min_row, max_col, max_row):
            raise get_invalid_range_error(cell_range)

        # 逆順序の範囲を検出（range_boundariesは順序を正規化しない）
        if max_row < min_row or max_col < min_col:
            raise get_invalid_range_error(cell_range)

        return (min_row, min_col, max_row, max_col)

    @staticmethod
    def get_first_cell_reference(cell_range: str | CellRange) -> tuple[int, int]:
        """
        セル範囲の左上セルの座標を返す

        Args:
            cell_range: セル範囲

        Returns:
            (row, col)のタプル
        """
        min_row, min_col, _, _ = ExcelRangeCalculator.parse_range(cell_range)
        return (min_row, min_col)

    @staticmethod
    def get_cell_references(cell_range: str | CellRange) -> list[tuple[int, int]]:
        """
        セル範囲内の全セル座標を行優先（上→下、各行は左→右）で列挙する

        Examples:
            - "A1:B2" -> [(1, 1), (1, 2), (2, 1), (2, 2)]

        Args:
            cell_range: セル範囲

        Returns:
            (row, col)のリスト。先頭は必ず左上セル
        """
        min_row, min_col, max_row, max_col = ExcelRangeCalculator.parse_range(
            cell_range
        )
        return [
            (row_idx, col_idx)
            for row_idx in range(min_row, max_row + 1)
            for col_idx in range(min_col, max_col + 1)
        ]

    @staticmethod
    def calculate_range_size(cell_range: str | CellRange) -> tuple[int, int]:
        """
        セル範囲から行数と列数を計算

        Args:
            cell_range: セル範囲（例: "A1:D10"）

        Returns:
            (rows, cols)のタプル
        """
        min_row, min_col, max_row, max_col = ExcelRangeCalculator.parse_range(
            cell_range
        )
        return (max_row - min_row + 1, max_col - min_col + 1)

    @staticmethod
    def to_coordinate(row: int, col: int) -> str:
        """行・列番号をA1形式の座標に変換（例: (3, 2) -> "B3"）"""
        return f"{get_column_letter(col)}{row}"

    @staticmethod
    def to_range_string(cell_range: str | CellRange) -> str:
        """
        セル範囲を正規化した文字列表現に変換

        Examples:
            - "$a$1:$b$2" -> "A1:B2"
            - "C3" -> "C3"

        Args:
            cell_range: セル範囲

        Returns:
            正規化されたセル範囲
        """
        min_row, min_col, max_row, max_col = ExcelRangeCalculator.parse_range(
            cell_range
        )
        start = ExcelRangeCalculator.to_coordinate(min_row, min_col)
        if (min_row, min_col) == (max_row, max_col):
            return start
        end = ExcelRangeCalculator.to_coordinate(max_row, max_col)
        return f"{start}:{end}"
