"""SRTファイルのタイムスタンプを一律にずらすパッケージ"""

from .app import shift_srt_file, shift_text

__all__ = ["shift_srt_file", "shift_text"]
