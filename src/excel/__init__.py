"""
Excel処理ヘルパーモジュール

セルのコピー・クリア・範囲結合を行うヘルパークラス群
"""

from src.excel.cell_operations import (
    CellContentKind,
    ExcelCellOperations,
    HyperlinkRemoval,
)
from src.excel.merged_cell_handler import ExcelMergedCellHandler
from src.excel.range_calculator import ExcelRangeCalculator
from src.excel.style_copier import ExcelStyleCopier

__all__ = [
    "CellContentKind",
    "HyperlinkRemoval",
    "ExcelCellOperations",
    "ExcelMergedCellHandler",
    "ExcelRangeCalculator",
    "ExcelStyleCopier",
]
