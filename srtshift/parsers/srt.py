"""SRTファイルのパース機能を提供するモジュール"""

import logging
from dataclasses import dataclass, field

from .errors import ParseError
from .timecode import parse_number, parse_time
from .width import display_width

logger = logging.getLogger(__name__)

ARROW_SEPARATOR = " --> "
BYTE_ORDER_MARK = "\ufeff"


@dataclass
class Subtitle:
    """字幕データを表すクラス"""

    index: int
    start_ms: int
    end_ms: int
    lines: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """本文を改行で連結して返す"""
        return "\n".join(self.lines)


def normalize_text(text: str) -> str:
    """改行コードを `\\n` に統一し、先頭のBOMを取り除く"""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.removeprefix(BYTE_ORDER_MARK)


def _split_lines(text: str) -> list[str]:
    """`\\n` で行に分割する（末尾の改行で空行を増やさない）"""
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def parse_srt(text: str) -> list[Subtitle]:
    """
    SRTテキストをパースして字幕リストを返す

    エラー位置は表示幅単位のオフセットで表され、各行の改行は幅1として数える。
    最初のエラーでパース全体を中断する。

    Args:
        text: normalize_text で正規化済みのSRTテキスト

    Returns:
        字幕データのリスト

    Raises:
        ParseError: 番号・時間行・タイムスタンプのいずれかが不正な場合
    """
    lines = _split_lines(text)
    total_width = sum(display_width(line) + 1 for line in lines)
    if lines and not text.endswith("\n"):
        total_width -= 1

    subtitles: list[Subtitle] = []
    index = 0
    position = 0

    while position < len(lines):
        number_line = lines[position]
        position += 1

        # 末尾の空行のみが残っている場合は正常終了
        if not number_line and not any(lines[position:]):
            break

        number = parse_number(number_line)
        if number is None:
            raise ParseError(
                f"Failed to parse {number_line!r} as an integer",
                "Invalid subtitle number",
                index,
                index + display_width(number_line),
            )
        index += display_width(number_line) + 1

        if position >= len(lines):
            index = min(index, total_width)
            raise ParseError(
                f"Expected to find time line for subtitle {number_line}",
                "Missing time line",
                index,
                index,
            )
        time_line = lines[position]
        position += 1

        start_text, arrow, end_text = time_line.partition(ARROW_SEPARATOR)
        if not arrow:
            raise ParseError(
                f"Expected to find arrow in time line for subtitle {number_line}",
                f"Missing '{ARROW_SEPARATOR}'",
                index,
                index + display_width(time_line),
            )

        start_ms = parse_time(start_text, index)
        end_ms = parse_time(end_text, index + display_width(start_text) + display_width(ARROW_SEPARATOR))
        index += display_width(time_line) + 1

        body: list[str] = []
        while position < len(lines):
            line = lines[position]
            position += 1
            index += display_width(line) + 1
            if not line:
                break
            body.append(line)

        subtitles.append(Subtitle(index=number, start_ms=start_ms, end_ms=end_ms, lines=body))

    logger.debug(f"{len(subtitles)}件の字幕をパースしました")
    return subtitles
