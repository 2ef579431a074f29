"""タイムスタンプとミリ秒の相互変換を行うモジュール"""

from .errors import ParseError
from .width import display_width

SECOND = 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60


def parse_number(segment: str) -> int | None:
    """ASCII数字のみからなる文字列を整数に変換する（不正な場合はNone）"""
    if not segment or not segment.isascii() or not segment.isdigit():
        return None
    try:
        return int(segment)
    except ValueError:
        # 桁数が int の変換上限 (sys.get_int_max_str_digits) を超える場合
        return None


def parse_time(text: str, index: int = 0) -> int:
    """
    `[[H:]MM:]SS[,mmm]` 形式のタイムスタンプをミリ秒に変換する

    Args:
        text: タイムスタンプ文字列
        index: 入力全体におけるtextの開始位置（エラー位置の算出用）

    Returns:
        ミリ秒

    Raises:
        ParseError: いずれかの数値部分が整数として解釈できない場合
    """
    end = index + display_width(text)

    # 右から分割: [時, 分, 秒(,ミリ秒)] のうち存在する分だけ
    segments = text.rsplit(":", 2)
    segments.reverse()

    seconds_str, comma, millis_str = segments[0].partition(",")
    if not comma:
        millis_str = "0"

    seconds = parse_number(seconds_str)
    if seconds is None:
        raise ParseError(f"Failed to parse {seconds_str!r} as an integer", "Invalid seconds", index, end)

    millis = parse_number(millis_str)
    if millis is None:
        raise ParseError(f"Failed to parse {millis_str!r} as an integer", "Invalid millis", index, end)

    minutes = 0
    if len(segments) > 1:
        minutes = parse_number(segments[1])
        if minutes is None:
            raise ParseError(f"Failed to parse {segments[1]!r} as an integer", "Invalid minutes", index, end)

    hours = 0
    if len(segments) > 2:
        # "1:2:3:4" のような4区切り以上は時の部分に ":" が残るためここで弾かれる
        hours = parse_number(segments[2])
        if hours is None:
            raise ParseError(f"Failed to parse {segments[2]!r} as an integer", "Invalid hours", index, end)

    return hours * HOUR + minutes * MINUTE + seconds * SECOND + millis


def format_time(ms: int) -> str:
    """
    ミリ秒を `HH:MM:SS,mmm` 形式の文字列に変換する

    時は2桁でゼロ埋めし、100時間以上はそのまま桁が増える。

    Args:
        ms: ミリ秒（0以上）

    Returns:
        タイムスタンプ文字列
    """
    if ms < 0:
        raise ValueError(f"負のタイムスタンプは表現できません: {ms}")

    hours, leftover = divmod(ms, HOUR)
    minutes, leftover = divmod(leftover, MINUTE)
    seconds, millis = divmod(leftover, SECOND)
    return f"{hours:02}:{minutes:02}:{seconds:02},{millis:03}"
