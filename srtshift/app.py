"""SRTファイルのタイムスタンプをずらすメインモジュール"""

import argparse
import logging
import re
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import load_settings
from .parsers import ParseError, normalize_text, parse_srt
from .processors import Adjustment, NegativeResultError, adjust_subtitles, parse_adjustment
from .reporting import render_diagnostic
from .writers import format_subtitles

logger = logging.getLogger(__name__)

# "-00:00:01,500" のような負の調整量（argparse はオプションと誤認する）
NEGATIVE_ADJUSTMENT_PATTERN = re.compile(r"^-\d[\d:,]*$")
VALUE_OPTIONS = {"-o", "--output", "--encoding"}


def shift_text(text: str, delta: int | Adjustment) -> str:
    """
    SRTテキストの全タイムスタンプをずらした結果を返す

    Args:
        text: SRTテキスト（改行コード・BOMは正規化される）
        delta: ずらす量（ミリ秒または Adjustment）

    Returns:
        調整後のSRTテキスト

    Raises:
        ParseError: SRTとして解釈できない場合
        NegativeResultError: 調整後の時間が負になる場合
    """
    subtitles = parse_srt(normalize_text(text))
    adjust_subtitles(subtitles, delta)
    return format_subtitles(subtitles)


def read_srt_text(path: Path, encoding: str = "utf-8") -> str:
    """SRTファイルを読み込み、正規化したテキストを返す"""
    return normalize_text(path.read_text(encoding=encoding))


def shift_srt_file(
    input_path: Path,
    delta: int | Adjustment,
    output_path: Path | None = None,
    encoding: str = "utf-8",
) -> Path:
    """
    SRTファイルのタイムスタンプをずらして書き出す

    Args:
        input_path: 入力SRTファイルのパス
        delta: ずらす量（ミリ秒または Adjustment）
        output_path: 出力ファイルのパス（省略時は入力ファイルを上書き）
        encoding: 入出力の文字コード

    Returns:
        出力ファイルのパス
    """
    output_path = output_path or input_path
    logger.debug(f"入力: {input_path} 出力: {output_path} 文字コード: {encoding}")

    output = shift_text(read_srt_text(input_path, encoding), delta)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(output, encoding=encoding, newline="")
    return output_path


def _move_negative_adjustment(argv: list[str]) -> list[str]:
    """
    負の調整量を `--` の後ろへ移し、位置引数として解釈されるようにする

    既に `--` が含まれる場合や、オプションの値として渡された場合はそのままにする。

    Args:
        argv: コマンドライン引数

    Returns:
        並べ替えたコマンドライン引数
    """
    if "--" in argv:
        return argv

    rest: list[str] = []
    moved: list[str] = []
    for i, arg in enumerate(argv):
        if NEGATIVE_ADJUSTMENT_PATTERN.match(arg) and not (i > 0 and argv[i - 1] in VALUE_OPTIONS):
            moved.append(arg)
        else:
            rest.append(arg)

    return [*rest, "--", *moved] if moved else rest


def main(argv: list[str] | None = None) -> None:
    """メイン関数"""
    load_dotenv()

    parser = argparse.ArgumentParser(description="SRTファイルのタイムスタンプを一律にずらす")
    parser.add_argument("file", help="調整するSRTファイルのパス")
    parser.add_argument(
        "adjustment",
        help="ずらす量（例: +2, -00:00:01,500, 1:30）",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="出力ファイルのパス（省略時は入力ファイルを上書き）",
    )
    parser.add_argument(
        "--encoding",
        help="入出力の文字コード（省略時は環境変数 SRTSHIFT_ENCODING、既定値 utf-8）",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="デバッグモードを有効にする（詳細ログ出力）",
    )

    args = parser.parse_args(_move_negative_adjustment(sys.argv[1:] if argv is None else argv))

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"エラー: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else settings.log_level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    encoding = args.encoding or settings.encoding

    try:
        adjustment = parse_adjustment(args.adjustment)
    except ParseError as e:
        print(f"エラー: 調整量を解釈できません: {e.message}", file=sys.stderr)
        sys.exit(1)

    input_path = Path(args.file)
    if not input_path.exists():
        print(f"エラー: ファイルが見つかりません: {input_path}", file=sys.stderr)
        sys.exit(1)

    output_path = Path(args.output) if args.output else input_path

    try:
        shift_srt_file(input_path, adjustment, output_path, encoding=encoding)
    except ParseError as e:
        text = read_srt_text(input_path, encoding)
        print(render_diagnostic(e.diagnostic, text, input_path.name), file=sys.stderr)
        sys.exit(1)
    except NegativeResultError as e:
        print(f"エラー: {e}（{e.reason}）", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeError) as e:
        print(f"エラー: ファイルの読み書きに失敗しました: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"完了: {output_path} ({adjustment.delta:+}ms)")


if __name__ == "__main__":
    main()
