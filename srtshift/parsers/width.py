"""端末上の表示幅を計算するモジュール"""

from wcwidth import wcwidth


def display_width(text: str) -> int:
    """
    テキストの表示幅を返す

    全角文字は2、結合文字は0として数える。制御文字（タブなど）は0とする。

    Args:
        text: 対象のテキスト（改行を含まない1行）

    Returns:
        表示幅（カラム数）
    """
    return sum(max(wcwidth(char), 0) for char in text)
