import logging

import typer

from .config import config
from .error_messages import SpreadsheetError
from .sheet_tools import clear_cell, copy_cell, merge_range, setup_logging

# typerアプリケーションを作成
app = typer.Typer()


def _prepare():
    """ロギング設定と設定値の検証"""
    setup_logging()

    errors = config.validate()
    if errors:
        for error in errors:
            logging.error(error)
        raise typer.Exit(code=1)


@app.command("merge")
def merge(
    path: str = typer.Argument(..., help="対象の.xlsxファイル。"),
    cell_range: str = typer.Argument(..., help="結合するセル範囲（例: A1:B2）。"),
    sheet: str | None = typer.Option(
        None, "--sheet", help="対象シート名（省略時はアクティブシート）。"
    ),
    output: str | None = typer.Option(
        None, "--output", help="保存先（省略時は上書き）。"
    ),
):
    """
    セル範囲を結合します。左上セルには範囲内で最初に見つかった値が残ります。
    """
    _prepare()
    try:
        merged = merge_range(path, cell_range, sheet_name=sheet, output=output)
    except SpreadsheetError as e:
        logging.error(str(e))
        raise typer.Exit(code=1)
    typer.echo(merged)


@app.command("copy")
def copy(
    path: str = typer.Argument(..., help="対象の.xlsxファイル。"),
    source: str = typer.Argument(..., help="コピー元セル（例: A1）。"),
    target: str = typer.Argument(..., help="コピー先セル（例: C3）。"),
    sheet: str | None = typer.Option(
        None, "--sheet", help="対象シート名（省略時はアクティブシート）。"
    ),
    output: str | None = typer.Option(
        None, "--output", help="保存先（省略時は上書き）。"
    ),
):
    """
    セルの値・スタイル・コメント・ハイパーリンクをコピーします。
    """
    _prepare()
    try:
        copy_cell(path, source, target, sheet_name=sheet, output=output)
    except SpreadsheetError as e:
        logging.error(str(e))
        raise typer.Exit(code=1)


@app.command("clear")
def clear(
    path: str = typer.Argument(..., help="対象の.xlsxファイル。"),
    cell_range: str = typer.Argument(..., help="クリアするセルまたは範囲。"),
    sheet: str | None = typer.Option(
        None, "--sheet", help="対象シート名（省略時はアクティブシート）。"
    ),
    output: str | None = typer.Option(
        None, "--output", help="保存先（省略時は上書き）。"
    ),
    mode: str | None = typer.Option(
        None,
        "--mode",
        help="'all'（値・書式・コメント・リンク）または 'contents'（値のみ）。",
    ),
):
    """
    セルをクリアします。
    """
    _prepare()
    try:
        count = clear_cell(path, cell_range, sheet_name=sheet, output=output, mode=mode)
    except SpreadsheetError as e:
        logging.error(str(e))
        raise typer.Exit(code=1)
    typer.echo(f"Cleared {count} cell(s)")


if __name__ == "__main__":
    app()
