"""
Excelセルスタイル複製ユーティリティ

セルスタイル（フォント・塗りつぶし・罫線・表示形式など）の複製と初期化を担当するヘルパークラス
"""

from copy import copy

from openpyxl.styles.cell_style import StyleArray


class ExcelStyleCopier:
    """セルスタイルの複製と初期化（全て staticmethod）"""

    @staticmethod
    def is_same_workbook(source, target) -> bool:
        """2つのセルが同じWorkbookに属しているか"""
        return source.parent.parent is target.parent.parent

    @staticmethod
    def copy_cell_style(source, target) -> None:
        """
        セルスタイルをコピー

        同一Workbook内では、スタイル配列（Workbook共有のフォント・塗りつぶし・罫線・
        表示形式テーブルへのインデックス）をコピーするため、コピー先はコピー元と同じ
        スタイルレコードを共有する。
        別Workbookの場合はインデックスが一致しないため、各スタイル要素を個別に複製する
        （名前付きスタイルは引き継がない）。

        Args:
            source: コピー元 openpyxl Cell
            target: コピー先 openpyxl Cell
        """
        if ExcelStyleCopier.is_same_workbook(source, target):
            # StyleArrayはセルごとに可変なので配列自体は複製する
            target._style = copy(source._style)
            return

        target.font = copy(source.font)
        target.fill = copy(source.fill)
        target.border = copy(source.border)
        target.alignment = copy(source.alignment)
        target.protection = copy(source.protection)
        target.number_format = source.number_format

    @staticmethod
    def reset_cell_style(cell) -> None:
        """
        セルスタイルをWorkbookの既定スタイルに戻す

        Args:
            cell: openpyxl Cell
        """
        cell._style = StyleArray()

    @staticmethod
    def has_custom_style(cell) -> bool:
        """既定以外のスタイルが設定されているか"""
        return bool(cell.has_style)
