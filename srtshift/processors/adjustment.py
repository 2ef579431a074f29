"""字幕のタイムスタンプを一律にずらすモジュール"""

import logging
from dataclasses import dataclass

from ..parsers import Subtitle, parse_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Adjustment:
    """符号と大きさを分けて保持する時間調整量"""

    milliseconds: int
    negative: bool = False

    @property
    def delta(self) -> int:
        """符号付きのミリ秒を返す"""
        return -self.milliseconds if self.negative else self.milliseconds


class NegativeResultError(ValueError):
    """調整後のタイムスタンプが負になることを表す例外"""

    reason = "NegativeResult"

    def __init__(self, index: int, field: str, value: int):
        super().__init__(f"Adjusted {field} time of subtitle {index} would be negative ({value}ms)")
        self.index = index
        self.field = field
        self.value = value


def parse_adjustment(text: str) -> Adjustment:
    """
    `+00:00:02,000` や `-1,500` のような調整量をパースする

    先頭の `+` / `-` を符号として取り除き、残りをタイムスタンプとして解釈する。

    Args:
        text: 調整量の文字列

    Returns:
        調整量

    Raises:
        ParseError: タイムスタンプとして解釈できない場合
    """
    negative = text.startswith("-")
    magnitude = text[1:] if text[:1] in ("+", "-") else text
    return Adjustment(milliseconds=parse_time(magnitude, 0), negative=negative)


def adjust_subtitles(subtitles: list[Subtitle], delta: int | Adjustment) -> None:
    """
    全字幕の開始・終了時間をずらす

    1件でも負になる場合は何も変更せずに例外を送出する。

    Args:
        subtitles: 字幕データのリスト（その場で更新される）
        delta: ずらす量（ミリ秒、負の値で前へずらす）

    Raises:
        NegativeResultError: 調整後の時間が負になる字幕がある場合
    """
    if isinstance(delta, Adjustment):
        delta = delta.delta

    # 先に全件を検査してから更新する
    for subtitle in subtitles:
        for field, value in (("start", subtitle.start_ms), ("end", subtitle.end_ms)):
            if value + delta < 0:
                raise NegativeResultError(subtitle.index, field, value + delta)

    for subtitle in subtitles:
        subtitle.start_ms += delta
        subtitle.end_ms += delta

    logger.debug(f"{len(subtitles)}件の字幕を{delta:+}msずらしました")
