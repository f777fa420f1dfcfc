"""
ワークブック単位のセル操作

ファイルを開き、セル操作ヘルパーを適用して保存するまでをまとめた関数群
"""

import logging
import sys
from pathlib import Path

from openpyxl import load_workbook

from src.config import config
from src.error_messages import get_invalid_range_error, handle_spreadsheet_error
from src.excel import ExcelCellOperations, ExcelMergedCellHandler, ExcelRangeCalculator


def setup_logging():
    """
    すべてのログ出力をstderrに向けるロギングを設定します。
    ログレベルは SHEET_TOOLS_LOG_LEVEL で指定します。
    """
    log_formatter = logging.Formatter("%(asctime)s [%(levelname)s] - %(message)s")
    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level_value)

    # 既存のハンドラをクリア
    root_logger.handlers.clear()

    # stderrにログを出力するハンドラを追加
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(log_formatter)
    root_logger.addHandler(stream_handler)

    logging.debug("Logging configured to output to stderr.")


def _load_sheet(file_path: str | Path, sheet_name: str | None):
    """ワークブックを開き、対象シートを返す（未指定ならアクティブシート）"""
    try:
        workbook = load_workbook(file_path)
        sheet = workbook[sheet_name] if sheet_name else workbook.active
    except Exception as e:
        logging.error(f"Failed to open workbook {file_path}: {str(e)}")
        raise handle_spreadsheet_error(e, "load") from e
    return workbook, sheet


def _save(workbook, file_path: str | Path, output: str | Path | None) -> Path:
    """ワークブックを保存（outputが未指定なら上書き）"""
    destination = Path(output or file_path)
    try:
        workbook.save(destination)
    except Exception as e:
        logging.error(f"Failed to save workbook {destination}: {str(e)}")
        raise handle_spreadsheet_error(e, "save") from e
    return destination


def _resolve_cell(sheet, coordinate: str):
    """単一セルの座標からセルを取得（範囲指定は不可）"""
    if ExcelRangeCalculator.calculate_range_size(coordinate) != (1, 1):
        raise get_invalid_range_error(coordinate)
    row_idx, col_idx = ExcelRangeCalculator.get_first_cell_reference(coordinate)
    return sheet.cell(row=row_idx, column=col_idx)


def merge_range(
    file_path: str | Path,
    cell_range: str,
    sheet_name: str | None = None,
    output: str | Path | None = None,
) -> str:
    """
    ワークブック上のセル範囲を結合して保存

    Args:
        file_path: 対象の.xlsxファイル
        cell_range: 結合するセル範囲（例: "A1:B2"）
        sheet_name: 対象シート名（Noneならアクティブシート）
        output: 保存先（Noneなら上書き）

    Returns:
        登録した結合範囲
    """
    logging.info(f"Merging {cell_range} in {file_path}")
    workbook, sheet = _load_sheet(file_path, sheet_name)

    try:
        merged = ExcelMergedCellHandler.merge(sheet, cell_range)
    except Exception as e:
        logging.error(f"Merge failed: {str(e)}")
        raise handle_spreadsheet_error(e, "merge") from e

    _save(workbook, file_path, output)
    return merged


def copy_cell(
    file_path: str | Path,
    source: str,
    target: str,
    sheet_name: str | None = None,
    output: str | Path | None = None,
) -> None:
    """
    ワークブック上のセルを同じシートの別セルへコピーして保存

    Args:
        file_path: 対象の.xlsxファイル
        source: コピー元セル座標（例: "A1"）
        target: コピー先セル座標（例: "C3"）
        sheet_name: 対象シート名（Noneならアクティブシート）
        output: 保存先（Noneなら上書き）
    """
    logging.info(f"Copying {source} to {target} in {file_path}")
    workbook, sheet = _load_sheet(file_path, sheet_name)

    try:
        ExcelCellOperations.copy(
            _resolve_cell(sheet, source), _resolve_cell(sheet, target)
        )
    except Exception as e:
        logging.error(f"Copy failed: {str(e)}")
        raise handle_spreadsheet_error(e, "copy") from e

    _save(workbook, file_path, output)


def clear_cell(
    file_path: str | Path,
    cell_range: str,
    sheet_name: str | None = None,
    output: str | Path | None = None,
    mode: str | None = None,
) -> int:
    """
    ワークブック上のセル（範囲指定可）をクリアして保存

    Args:
        file_path: 対象の.xlsxファイル
        cell_range: クリアするセルまたは範囲（例: "B2", "A1:C3"）
        sheet_name: 対象シート名（Noneならアクティブシート）
        output: 保存先（Noneなら上書き）
        mode: "all" / "contents"（Noneなら設定値）

    Returns:
        クリアしたセル数
    """
    logging.info(f"Clearing {cell_range} in {file_path}")
    workbook, sheet = _load_sheet(file_path, sheet_name)

    try:
        references = ExcelRangeCalculator.get_cell_references(cell_range)
        for row_idx, col_idx in references:
            ExcelCellOperations.clear(sheet.cell(row=row_idx, column=col_idx), mode)
    except Exception as e:
        logging.error(f"Clear failed: {str(e)}")
        raise handle_spreadsheet_error(e, "clear") from e

    _save(workbook, file_path, output)
    return len(references)
