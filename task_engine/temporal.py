"""Temporal resolution of dates and times in task text.

Dates are resolved relative to an anchor "today" (a plain calendar date)
and formatted as ``YYYY-MM-DD``; times are returned as 24-hour ``HH:MM``.
Both resolvers walk a fixed priority list and the first rule that matches
wins. Neither ever raises on unexpected text: no match yields ``None``.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from task_engine.schema import InvalidArgument

# Python weekday numbering: Monday == 0.
WEEKDAYS = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

WEEKDAY_ABBREVIATIONS = {
    "mon": "monday",
    "tue": "tuesday",
    "tues": "tuesday",
    "wed": "wednesday",
    "thu": "thursday",
    "thur": "thursday",
    "thurs": "thursday",
    "fri": "friday",
    "sat": "saturday",
    "sun": "sunday",
}

# Order matters: first keyword found wins.
PART_OF_DAY = (
    ("noon", "12:00"),
    ("midnight", "00:00"),
    ("morning", "09:00"),
    ("afternoon", "14:00"),
    ("evening", "18:00"),
    ("night", "20:00"),
)

# Longest alternatives first so "thurs" is not cut down to "thu".
WEEKDAY_PATTERN = "|".join(
    sorted([*WEEKDAYS, *WEEKDAY_ABBREVIATIONS], key=len, reverse=True)
)
PART_OF_DAY_PATTERN = "|".join(word for word, _ in PART_OF_DAY)
CLOCK_PATTERN = r"\b\d{1,2}(?::\d{2})?\s*(?:am|pm)\b"

_CLOCK_RE = re.compile(r"\b(\d{1,2})(?::(\d{2}))?\s*(am|pm)\b", re.IGNORECASE)
_PART_OF_DAY_RES = [(re.compile(rf"\b{word}\b", re.IGNORECASE), value) for word, value in PART_OF_DAY]
_TOMORROW_RE = re.compile(r"\b(?:tomorrow|tmr)\b", re.IGNORECASE)
_TODAY_RE = re.compile(r"\btoday\b", re.IGNORECASE)
_NEXT_WEEKDAY_RE = re.compile(rf"\bnext\s+({WEEKDAY_PATTERN})\b", re.IGNORECASE)
_WEEKDAY_RE = re.compile(rf"\b(?:(?:on|by|this)\s+)?({WEEKDAY_PATTERN})\b", re.IGNORECASE)
_TEMPORAL_HINT_RE = re.compile(
    rf"\d\s*(?:am|pm)\b|\d:\d|\b(?:today|tomorrow|tmr|tonight|{WEEKDAY_PATTERN})\b",
    re.IGNORECASE,
)

PACIFIC_STANDARD_OFFSET = timedelta(hours=-8)
PACIFIC_DAYLIGHT_OFFSET = timedelta(hours=-7)


def weekday_index(name: str) -> int:
    """Map a weekday name or abbreviation (any case) to Python's weekday number."""

    key = name.lower()
    return WEEKDAYS[WEEKDAY_ABBREVIATIONS.get(key, key)]


def has_temporal_hint(text: str) -> bool:
    """Return True when text carries a clock time or a day keyword."""

    return bool(_TEMPORAL_HINT_RE.search(text))


def resolve_time(text: str) -> Optional[str]:
    """Resolve a 24-hour ``HH:MM`` time from text, or None."""

    for pattern, value in _PART_OF_DAY_RES:
        if pattern.search(text):
            return value

    for match in _CLOCK_RE.finditer(text):
        hour = int(match.group(1))
        minutes = int(match.group(2) or 0)
        if not 1 <= hour <= 12 or minutes > 59:
            continue
        meridiem = match.group(3).lower()
        if meridiem == "am":
            hour = 0 if hour == 12 else hour
        else:
            hour = 12 if hour == 12 else hour + 12
        return f"{hour:02d}:{minutes:02d}"

    return None


def _days_until(target: int, anchor: date) -> int:
    offset = target - anchor.weekday()
    if offset < 0:
        offset += 7
    return offset


def resolve_date(text: str, anchor: date) -> Optional[str]:
    """Resolve a ``YYYY-MM-DD`` date from text relative to ``anchor``, or None."""

    anchor = as_anchor(anchor)

    if _TOMORROW_RE.search(text):
        return (anchor + timedelta(days=1)).isoformat()

    if _TODAY_RE.search(text):
        return anchor.isoformat()

    match = _NEXT_WEEKDAY_RE.search(text)
    if match:
        offset = _days_until(weekday_index(match.group(1)), anchor) + 7
        return (anchor + timedelta(days=offset)).isoformat()

    match = _WEEKDAY_RE.search(text)
    if match:
        # A same-day match stays on the anchor date.
        offset = _days_until(weekday_index(match.group(1)), anchor)
        return (anchor + timedelta(days=offset)).isoformat()

    return None


def resolve(text: str, anchor: date) -> tuple[Optional[str], Optional[str]]:
    """Return ``(date, time)`` for a fragment; each is independently nullable."""

    return resolve_date(text, anchor), resolve_time(text)


def _nth_sunday(year: int, month: int, n: int) -> datetime:
    first = datetime(year, month, 1, tzinfo=timezone.utc)
    # weekday(): Monday == 0, so Sunday == 6.
    days_to_sunday = (6 - first.weekday()) % 7
    return first + timedelta(days=days_to_sunday + 7 * (n - 1))


def is_pacific_daylight_time(now: datetime) -> bool:
    """US daylight saving window: second Sunday of March to first Sunday of November."""

    now = _as_utc(now)
    start = _nth_sunday(now.year, 3, 2)
    end = _nth_sunday(now.year, 11, 1)
    return start <= now < end


def pacific_today(now: Optional[datetime] = None) -> date:
    """Return the current calendar date in US Pacific time.

    ``now`` is treated as UTC when naive; it defaults to the real clock.
    """

    now = _as_utc(now or datetime.now(timezone.utc))
    offset = PACIFIC_DAYLIGHT_OFFSET if is_pacific_daylight_time(now) else PACIFIC_STANDARD_OFFSET
    return (now + offset).date()


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def as_anchor(value: date) -> date:
    """Reduce a ``datetime`` anchor to its calendar date; plain dates pass through."""

    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise InvalidArgument(f"Anchor must be a date, got {type(value).__name__}")
    return value
