from .errors import Diagnostic, ParseError, Span
from .srt import Subtitle, normalize_text, parse_srt
from .timecode import format_time, parse_time
from .width import display_width

__all__ = [
    "Diagnostic",
    "ParseError",
    "Span",
    "Subtitle",
    "display_width",
    "format_time",
    "normalize_text",
    "parse_srt",
    "parse_time",
]
