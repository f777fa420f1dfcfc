"""
開発用ユーティリティコマンド（Lint・フォーマット・型チェック・テスト）
"""

import subprocess
import sys

# 品質チェック対象ディレクトリの定数
QUALITY_CHECK_DIRS = ["src", "tests"]


def _run(cmd: list[str], capture: bool = False) -> subprocess.CompletedProcess:
    return subprocess.run(cmd, capture_output=capture)


def lint():
    """
    ruffでコードの静的解析を実行する
    """
    sys.exit(_run(["ruff", "check"] + QUALITY_CHECK_DIRS).returncode)


def format():
    """
    ruffでコードフォーマットを実行する
    """
    sys.exit(_run(["ruff", "format"] + QUALITY_CHECK_DIRS).returncode)


def fix():
    """
    ruffで自動修正とフォーマットを一括実行する
    """
    print("🔧 コードの自動修正とフォーマットを実行中...")

    fix_result = _run(["ruff", "check", "--fix"] + QUALITY_CHECK_DIRS)
    format_result = _run(["ruff", "format"] + QUALITY_CHECK_DIRS)

    if fix_result.returncode == 0 and format_result.returncode == 0:
        print("✅ 自動修正とフォーマットが完了しました")
    else:
        print("❌ 自動修正またはフォーマットでエラーが発生しました")

    sys.exit(fix_result.returncode or format_result.returncode)


def type_check():
    """
    型チェックを実行する (ty)
    """
    sys.exit(_run(["ty", "check", "src"]).returncode)


def check():
    """
    型チェック、Lint、テストをまとめて実行する（修正はしない）
    """
    steps = [
        ("型チェック", ["ty", "check", "src"]),
        ("Lint", ["ruff", "check"] + QUALITY_CHECK_DIRS),
        ("テスト", [sys.executable, "-m", "pytest", "-q"]),
    ]

    results = []
    for label, cmd in steps:
        print(f"▶ {label}を実行中...")
        results.append((label, _run(cmd, capture=True)))

    print("\n" + "=" * 50)
    print("📊 実行結果サマリー")
    print("=" * 50)
    for label, result in results:
        status = "✅ PASS" if result.returncode == 0 else "❌ FAIL"
        print(f"{label}: {status}")

    failed = [(label, result) for label, result in results if result.returncode != 0]
    for label, result in failed:
        print(f"\n🔍 {label}エラー:")
        print(result.stdout.decode())
        print(result.stderr.decode())

    if failed:
        sys.exit(1)
    print("\n🎉 すべてのチェックが成功しました！")
