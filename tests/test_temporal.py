from datetime import date, datetime, timedelta, timezone

import pytest

from task_engine.schema import InvalidArgument
from task_engine.temporal import (
    has_temporal_hint,
    is_pacific_daylight_time,
    pacific_today,
    resolve,
    resolve_date,
    resolve_time,
    weekday_index,
)

ANCHOR = date(2025, 1, 15)  # Wednesday


@pytest.mark.parametrize(
    "text,expected",
    [
        ("lunch at noon", "12:00"),
        ("deploy at midnight", "00:00"),
        ("run in the morning", "09:00"),
        ("nap this afternoon", "14:00"),
        ("read in the evening", "18:00"),
        ("movie night", "20:00"),
        ("call at 4pm", "16:00"),
        ("call at 4 PM", "16:00"),
        ("standup 9:30am", "09:30"),
        ("flight 12am", "00:00"),
        ("lunch 12pm", "12:00"),
        ("meet @11:45pm", "23:45"),
    ],
)
def test_resolve_time(text, expected):
    assert resolve_time(text) == expected


def test_part_of_day_wins_over_clock():
    assert resolve_time("morning run at 7am") == "09:00"


def test_resolve_time_no_match():
    assert resolve_time("call mom") is None
    assert resolve_time("room 13pm") is None
    assert resolve_time("tonight") is None


def test_resolve_date_relative_words():
    assert resolve_date("do it tomorrow", ANCHOR) == "2025-01-16"
    assert resolve_date("do it tmr", ANCHOR) == "2025-01-16"
    assert resolve_date("do it TODAY", ANCHOR) == "2025-01-15"


def test_tomorrow_beats_weekday():
    assert resolve_date("tomorrow not friday", ANCHOR) == "2025-01-16"


def test_resolve_bare_weekday():
    assert resolve_date("concert Friday", ANCHOR) == "2025-01-17"
    assert resolve_date("report by Monday", ANCHOR) == "2025-01-20"
    assert resolve_date("gym on tues", ANCHOR) == "2025-01-21"
    assert resolve_date("this thurs", ANCHOR) == "2025-01-16"


def test_same_weekday_stays_on_anchor():
    assert resolve_date("on wednesday", ANCHOR) == "2025-01-15"


def test_resolve_next_weekday():
    assert resolve_date("next friday", ANCHOR) == "2025-01-24"
    assert resolve_date("next mon", ANCHOR) == "2025-01-27"
    assert resolve_date("next wednesday", ANCHOR) == "2025-01-22"


@pytest.mark.parametrize("name", ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"])
def test_next_weekday_lands_seven_to_thirteen_days_out(name):
    for shift in range(7):
        anchor = ANCHOR + timedelta(days=shift)
        resolved = date.fromisoformat(resolve_date(f"next {name}", anchor))
        assert 7 <= (resolved - anchor).days <= 13


def test_weekday_needs_word_boundary():
    assert resolve_date("buy a sandwich", ANCHOR) is None
    assert resolve_date("monsoon season", ANCHOR) is None
    assert resolve_date("call mom", ANCHOR) is None


def test_resolve_returns_independent_values():
    assert resolve("gym at 6pm", ANCHOR) == (None, "18:00")
    assert resolve("gym tomorrow", ANCHOR) == ("2025-01-16", None)


def test_weekday_index_abbreviations():
    assert weekday_index("Thurs") == 3
    assert weekday_index("sun") == 6


def test_has_temporal_hint():
    assert has_temporal_hint("5pm")
    assert has_temporal_hint("tmr")
    assert has_temporal_hint("7:30")
    assert not has_temporal_hint("milk")


def test_pacific_today_standard_time():
    # 2025-01-16 06:00 UTC is still 2025-01-15 in PST (UTC-8).
    now = datetime(2025, 1, 16, 6, 0, tzinfo=timezone.utc)
    assert not is_pacific_daylight_time(now)
    assert pacific_today(now) == date(2025, 1, 15)


def test_pacific_today_daylight_time():
    # 2025-07-01 06:30 UTC is 2025-06-30 23:30 PDT (UTC-7).
    now = datetime(2025, 7, 1, 6, 30, tzinfo=timezone.utc)
    assert is_pacific_daylight_time(now)
    assert pacific_today(now) == date(2025, 6, 30)
    assert pacific_today(datetime(2025, 7, 1, 7, 30)) == date(2025, 7, 1)


def test_daylight_window_edges():
    # 2025: DST from Sunday March 9 to Sunday November 2.
    assert not is_pacific_daylight_time(datetime(2025, 3, 8, 23, 59, tzinfo=timezone.utc))
    assert is_pacific_daylight_time(datetime(2025, 3, 9, 0, 0, tzinfo=timezone.utc))
    assert is_pacific_daylight_time(datetime(2025, 11, 1, 23, 59, tzinfo=timezone.utc))
    assert not is_pacific_daylight_time(datetime(2025, 11, 2, 0, 0, tzinfo=timezone.utc))


def test_resolve_date_accepts_datetime_anchor():
    assert resolve_date("tomorrow", datetime(2025, 1, 15, 23, 59)) == "2025-01-16"
    with pytest.raises(InvalidArgument):
        resolve_date("tomorrow", "2025-01-15")
