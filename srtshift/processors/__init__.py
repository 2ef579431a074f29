from .adjustment import Adjustment, NegativeResultError, adjust_subtitles, parse_adjustment

__all__ = ["Adjustment", "NegativeResultError", "adjust_subtitles", "parse_adjustment"]
