"""
設定管理モジュール
"""

import logging
import os

from dotenv import load_dotenv

# .envファイルを読み込み
load_dotenv()

# clear() が受け付けるモード
CLEAR_MODES = ("all", "contents")


class SheetToolsConfig:
    """セル操作ツール設定クラス"""

    def __init__(self):
        # ログ設定
        self.log_level = os.getenv("SHEET_TOOLS_LOG_LEVEL", "INFO").strip().upper()

        # clear() の既定モード（all: 値・書式・コメント・ハイパーリンク / contents: 値のみ）
        self.clear_mode = os.getenv("SHEET_TOOLS_CLEAR_MODE", "all").strip().lower()

        # ハイパーリンク削除失敗時に例外を送出するか（既定は警告ログのみ）
        self.strict_hyperlink_removal = self._parse_bool(
            os.getenv("SHEET_TOOLS_STRICT_HYPERLINK_REMOVAL", "false")
        )

    @property
    def log_level_value(self) -> int:
        """loggingモジュールのレベル値を取得（不正値はINFO）"""
        level = logging.getLevelName(self.log_level)
        if isinstance(level, int):
            return level
        return logging.INFO

    def _parse_bool(self, value: str) -> bool:
        """真偽値文字列をboolに変換"""
        return value.strip().lower() in ("1", "true", "yes", "on")

    def validate(self) -> list[str]:
        """設定の検証を行い、エラーメッセージのリストを返す"""
        errors = []

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Invalid SHEET_TOOLS_LOG_LEVEL: {self.log_level}")

        if self.clear_mode not in CLEAR_MODES:
            errors.append(
                f"Invalid SHEET_TOOLS_CLEAR_MODE: {self.clear_mode} "
                f"(expected one of: {', '.join(CLEAR_MODES)})"
            )

        return errors

    @property
    def is_valid(self) -> bool:
        """設定が有効かどうかを返す"""
        return len(self.validate()) == 0


# グローバル設定インスタンス
config = SheetToolsConfig()
