import copy
import sys

import pytest

from srtshift.parsers import ParseError, Subtitle, parse_srt
from srtshift.processors import Adjustment, NegativeResultError, adjust_subtitles, parse_adjustment

from .samples import HUGE_DIGITS, MULTI_SRT, SAMPLE_SRT


def test_positive_delta():
    subtitles = parse_srt(SAMPLE_SRT)
    adjust_subtitles(subtitles, 2000)
    assert (subtitles[0].start_ms, subtitles[0].end_ms) == (3000, 5500)


def test_zero_delta_is_identity():
    subtitles = parse_srt(MULTI_SRT)
    original = copy.deepcopy(subtitles)
    adjust_subtitles(subtitles, 0)
    assert subtitles == original


def test_deltas_compose():
    once = parse_srt(MULTI_SRT)
    twice = copy.deepcopy(once)

    adjust_subtitles(twice, 1500)
    adjust_subtitles(twice, -700)
    adjust_subtitles(once, 800)

    assert twice == once


def test_negative_result_is_rejected():
    subtitles = parse_srt(SAMPLE_SRT)

    with pytest.raises(NegativeResultError) as exc_info:
        adjust_subtitles(subtitles, parse_adjustment("-00:00:01,500"))

    error = exc_info.value
    assert error.reason == "NegativeResult"
    assert (error.index, error.field, error.value) == (1, "start", -500)
    assert (subtitles[0].start_ms, subtitles[0].end_ms) == (1000, 3500)


def test_negative_result_leaves_every_subtitle_untouched():
    subtitles = [
        Subtitle(index=1, start_ms=5000, end_ms=6000),
        Subtitle(index=2, start_ms=1000, end_ms=2000),
    ]

    with pytest.raises(NegativeResultError) as exc_info:
        adjust_subtitles(subtitles, -1500)

    assert exc_info.value.index == 2
    assert subtitles[0].start_ms == 5000


def test_negative_end_is_reported():
    subtitles = [Subtitle(index=3, start_ms=2000, end_ms=500)]

    with pytest.raises(NegativeResultError) as exc_info:
        adjust_subtitles(subtitles, -1000)

    assert (exc_info.value.field, exc_info.value.value) == ("end", -500)


def test_shift_to_exactly_zero_is_allowed():
    subtitles = parse_srt(SAMPLE_SRT)
    adjust_subtitles(subtitles, -1000)
    assert subtitles[0].start_ms == 0


@pytest.mark.parametrize(
    "text, milliseconds, negative",
    [
        ("+2", 2000, False),
        ("2", 2000, False),
        ("-00:00:01,500", 1500, True),
        ("1:30", 90_000, False),
        ("-0", 0, True),
    ],
)
def test_parse_adjustment(text, milliseconds, negative):
    assert parse_adjustment(text) == Adjustment(milliseconds=milliseconds, negative=negative)


def test_adjustment_delta():
    assert Adjustment(1500, negative=True).delta == -1500
    assert Adjustment(1500).delta == 1500


@pytest.mark.parametrize("text", ["", "--1", "+-1", "1s", "1-2"])
def test_parse_adjustment_rejects_garbage(text):
    with pytest.raises(ParseError):
        parse_adjustment(text)


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="int()に桁数上限がない")
def test_parse_adjustment_rejects_digit_runs_beyond_int_limit():
    with pytest.raises(ParseError) as exc_info:
        parse_adjustment(f"-{HUGE_DIGITS}")
    assert exc_info.value.reason == "Invalid seconds"
