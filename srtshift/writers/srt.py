"""字幕データをSRT形式の文字列に変換するモジュール"""

from ..parsers import Subtitle, format_time
from ..parsers.srt import ARROW_SEPARATOR


def format_subtitle(subtitle: Subtitle) -> str:
    """1件の字幕を番号行・時間行・本文の順に出力する（区切りの空行は含まない）"""
    text = f"{subtitle.index}\n"
    text += f"{format_time(subtitle.start_ms)}{ARROW_SEPARATOR}{format_time(subtitle.end_ms)}\n"
    for line in subtitle.lines:
        text += f"{line}\n"
    return text


def format_subtitles(subtitles: list[Subtitle]) -> str:
    """
    字幕リストをSRT形式の文字列に変換する

    最後の字幕の後にも空行を1つ出力する。

    Args:
        subtitles: 字幕データのリスト

    Returns:
        SRTテキスト
    """
    return "".join(f"{format_subtitle(subtitle)}\n" for subtitle in subtitles)
