"""パースエラーを端末向けに整形するモジュール"""

from ..parsers import Diagnostic, display_width


def locate(text: str, offset: int) -> tuple[int, int]:
    """
    表示幅単位のオフセットを行番号・列番号に変換する

    Args:
        text: パースに使用した正規化済みテキスト
        offset: 表示幅単位のオフセット

    Returns:
        (行番号, 列番号)のタプル（どちらも1始まり）
    """
    lines = text.split("\n")
    line_start = 0
    for line_no, line in enumerate(lines, start=1):
        width = display_width(line)
        if offset <= line_start + width:
            return (line_no, offset - line_start + 1)
        line_start += width + 1
    return (len(lines), display_width(lines[-1]) + 1)


def render_diagnostic(diagnostic: Diagnostic, text: str, file_name: str) -> str:
    """
    診断情報をソース行と下線付きの文字列に整形する

    Args:
        diagnostic: 診断情報
        text: パースに使用した正規化済みテキスト
        file_name: 表示用のファイル名

    Returns:
        整形済みのエラーレポート
    """
    line_no, column = locate(text, diagnostic.span.start)
    source_line = text.split("\n")[line_no - 1]

    underline_width = min(len(diagnostic.span), display_width(source_line) - column + 1)
    underline = " " * (column - 1) + "^" * max(underline_width, 1)

    gutter = " " * len(str(line_no))
    return "\n".join(
        [
            f"error: {diagnostic.message}",
            f"{gutter}--> {file_name}:{line_no}:{column}",
            f"{gutter} |",
            f"{line_no} | {source_line}",
            f"{gutter} | {underline} {diagnostic.reason}",
        ]
    )
