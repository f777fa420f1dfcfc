"""
Excelセル操作ユーティリティ

セルのコピー・クリア・ハイパーリンク削除を担当するヘルパークラス
"""

import logging
from copy import copy
from enum import Enum

from openpyxl.cell.cell import MergedCell
from openpyxl.cell.rich_text import CellRichText
from openpyxl.worksheet.hyperlink import Hyperlink

from src.config import CLEAR_MODES, config
from src.error_messages import (
    get_configuration_error,
    get_hyperlink_removal_error,
    get_invalid_target_error,
    get_read_only_cell_error,
)
from src.excel.style_copier import ExcelStyleCopier

logger = logging.getLogger(__name__)


class CellContentKind(Enum):
    """セル内容の種類"""

    NUMERIC = "numeric"
    TEXT = "text"
    FORMULA = "formula"
    BLANK = "blank"
    BOOLEAN = "boolean"
    ERROR = "error"


class HyperlinkRemoval(Enum):
    """ハイパーリンク削除の結果"""

    REMOVED = "removed"
    NOT_PRESENT = "not_present"
    # セルからは外したが、シート側の管理リストを更新できなかった
    FAILED = "failed"


# openpyxl の data_type -> 内容の種類
_DATA_TYPE_KINDS = {
    "n": CellContentKind.NUMERIC,
    "d": CellContentKind.NUMERIC,
    "s": CellContentKind.TEXT,
    "inlineStr": CellContentKind.TEXT,
    "f": CellContentKind.FORMULA,
    "b": CellContentKind.BOOLEAN,
    "e": CellContentKind.ERROR,
}


class ExcelCellOperations:
    """セルのコピー・クリア（全て staticmethod）"""

    @staticmethod
    def get_content_kind(cell) -> CellContentKind:
        """
        セル内容の種類を返す

        None・MergedCell・値が空のセルはBLANK。日付・時刻は数値（シリアル値）として扱う。

        Args:
            cell: openpyxl Cell または None

        Returns:
            CellContentKind
        """
        if cell is None or isinstance(cell, MergedCell) or cell.value is None:
            return CellContentKind.BLANK
        return _DATA_TYPE_KINDS.get(cell.data_type, CellContentKind.TEXT)

    @staticmethod
    def is_blank(cell) -> bool:
        return ExcelCellOperations.get_content_kind(cell) is CellContentKind.BLANK

    @staticmethod
    def copy(source, target) -> None:
        """
        セルをコピー（数式とその値、スタイル、コメント、ハイパーリンクを含む）

        - コピー元がNoneの場合は何もしない（コピー先はクリアされない）
        - コピー先がNoneの場合はSpreadsheetErrorを送出

        Args:
            source: コピー元 openpyxl Cell
            target: コピー先 openpyxl Cell

        Raises:
            SpreadsheetError: コピー先がNone、または結合範囲内の読み取り専用セルの場合
        """
        if source is None:
            return

        if target is None:
            raise get_invalid_target_error()

        if isinstance(target, MergedCell):
            raise get_read_only_cell_error(target.coordinate)

        if source is target:
            return

        ExcelCellOperations._copy_cell_value(source, target)
        ExcelStyleCopier.copy_cell_style(source, target)
        ExcelCellOperations._copy_cell_comment(source, target)
        ExcelCellOperations._copy_hyperlink(source, target)

        logger.debug(f"Copied cell {source.coordinate} to {target.coordinate}")

    @staticmethod
    def clear(cell, mode: str | None = None) -> None:
        """
        セルをクリア

        mode="all"（既定）: 値・数式、書式（表示形式・罫線など）、コメント、ハイパーリンクを削除し、
        書式なしの空セルに戻す。
        mode="contents": 値・数式のみ削除する。

        Args:
            cell: openpyxl Cell（Noneの場合は何もしない）
            mode: "all" または "contents"。Noneの場合は設定値（SHEET_TOOLS_CLEAR_MODE）

        Raises:
            SpreadsheetError: 不正なmodeが指定された場合
        """
        if cell is None:
            return

        mode = mode or config.clear_mode
        if mode not in CLEAR_MODES:
            raise get_configuration_error(ValueError(f"Invalid clear mode: {mode}"))

        # MergedCellは常に空で書き込みもできない
        if isinstance(cell, MergedCell):
            return

        cell.value = None
        if mode == "contents":
            return

        ExcelStyleCopier.reset_cell_style(cell)
        cell.comment = None
        ExcelCellOperations.remove_hyperlink(cell)

    @staticmethod
    def clear_contents(cell) -> None:
        """セルの値・数式のみ削除（書式・コメント・ハイパーリンクは残す）"""
        ExcelCellOperations.clear(cell, mode="contents")

    @staticmethod
    def remove_hyperlink(cell) -> HyperlinkRemoval:
        """
        セルのハイパーリンクを削除

        セルからハイパーリンクを外し、シート側の管理リストからも取り除く。

        Args:
            cell: openpyxl Cell または None

        Returns:
            HyperlinkRemoval

        Raises:
            SpreadsheetError: 管理リストを更新できず、SHEET_TOOLS_STRICT_HYPERLINK_REMOVALが有効な場合
        """
        if cell is None or isinstance(cell, MergedCell) or cell.hyperlink is None:
            return HyperlinkRemoval.NOT_PRESENT

        link = cell.hyperlink
        cell.hyperlink = None

        error: Exception | None = None
        hyperlinks = ExcelCellOperations._get_sheet_hyperlinks(cell.parent)
        if hyperlinks is not None:
            try:
                hyperlinks[:] = [h for h in hyperlinks if h is not link]
                return HyperlinkRemoval.REMOVED
            except TypeError as e:
                error = e

        logger.warning(
            f"Failed to remove hyperlink of {cell.coordinate} from sheet bookkeeping: "
            f"{error or 'hyperlink list unavailable'}"
        )
        if config.strict_hyperlink_removal:
            raise get_hyperlink_removal_error(cell.coordinate, error)
        return HyperlinkRemoval.FAILED

    @staticmethod
    def _get_sheet_hyperlinks(sheet) -> list | None:
        """
        シートのハイパーリンク管理リストを取得

        注意: _hyperlinksはopenpyxlのプライベート属性（保存時にセルのハイパーリンクが集約される）のため、
        将来のバージョンで変更される可能性があります。存在しない場合はNoneを返します。
        """
        hyperlinks = getattr(sheet, "_hyperlinks", None)
        if isinstance(hyperlinks, list):
            return hyperlinks
        return None

    @staticmethod
    def _copy_cell_value(source, target) -> None:
        """内容の種類に応じて値をコピー"""
        kind = ExcelCellOperations.get_content_kind(source)
        value = source.value

        if kind is CellContentKind.BLANK:
            target.value = None
            return

        if kind is CellContentKind.TEXT and isinstance(value, CellRichText):
            # リッチテキストはlistなので共有しない
            value = copy(value)
        elif kind is CellContentKind.FORMULA and not isinstance(value, str):
            # ArrayFormula / DataTableFormula
            value = copy(value)

        target.value = value
        # "="で始まる文字列などで型推定がずれないようにコピー元の型に揃える
        target.data_type = source.data_type

    @staticmethod
    def _copy_cell_comment(source, target) -> None:
        # 他セルに紐付いたコメントはopenpyxl側で複製される
        target.comment = source.comment

    @staticmethod
    def _copy_hyperlink(source, target) -> None:
        link = source.hyperlink
        if link is None:
            ExcelCellOperations.remove_hyperlink(target)
            return

        # セッターはrefを書き換え、値が空ならリンク先を値として書き込むため、
        # 新しいHyperlinkを作り、コピー済みの値を退避して戻す
        value, data_type = target._value, target.data_type
        target.hyperlink = Hyperlink(
            ref=target.coordinate,
            location=link.location,
            tooltip=link.tooltip,
            display=link.display,
            target=link.target,
        )
        target._value, target.data_type = value, data_type
