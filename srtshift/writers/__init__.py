from .srt import format_subtitle, format_subtitles

__all__ = ["format_subtitle", "format_subtitles"]
