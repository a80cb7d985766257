"""Clean task titles out of fragment text."""

from __future__ import annotations

import re

from task_engine.temporal import CLOCK_PATTERN, PART_OF_DAY_PATTERN, WEEKDAY_PATTERN

MAX_NAME_LENGTH = 50
ELLIPSIS = "..."

_FLAGS = re.IGNORECASE

# Removal passes, applied in order.
_STRIP_PATTERNS = [
    # "at 8pm", "by 5pm", "around 11am", "@3:30pm"
    re.compile(rf"(?:\b(?:at|by|around)\s+|@\s*){CLOCK_PATTERN}", _FLAGS),
    # "at noon", "in the evening", "this afternoon"
    re.compile(rf"(?:\b(?:at|by|around|this|in\s+the)\s+|@\s*)\b(?:{PART_OF_DAY_PATTERN})\b", _FLAGS),
    re.compile(CLOCK_PATTERN, _FLAGS),
    re.compile(rf"\b(?:{PART_OF_DAY_PATTERN})\b", _FLAGS),
    re.compile(r"(?:\b(?:on|by|for|until|before|due)\s+)?\b(?:tomorrow|tmr|today)\b", _FLAGS),
    re.compile(rf"(?:\b(?:on|by|this|next)\s+)+\b(?:{WEEKDAY_PATTERN})\b", _FLAGS),
    re.compile(rf"\b(?:{WEEKDAY_PATTERN})\b", _FLAGS),
]
_DANGLING_RE = re.compile(r"(?:\s+|^)(?:(?:at|by|on|around)\b|@)\s*$", _FLAGS)
_SPACES_RE = re.compile(r"\s+")


def strip_temporal_phrases(text: str) -> str:
    """Remove date and time phrases, leaving the rest of the text in place."""

    for pattern in _STRIP_PATTERNS:
        text = pattern.sub(" ", text)
    text = _SPACES_RE.sub(" ", text).strip()

    while True:
        trimmed = _DANGLING_RE.sub("", text).strip()
        if trimmed == text:
            return trimmed
        text = trimmed


def normalize_name(text: str) -> str:
    """Return a capitalized title of at most 50 characters plus an ellipsis.

    An empty string comes back when nothing but date/time words were present.
    """

    name = strip_temporal_phrases(text).strip(" ,;")
    if not name:
        return ""

    name = name[0].upper() + name[1:]
    if len(name) > MAX_NAME_LENGTH:
        name = name[:MAX_NAME_LENGTH] + ELLIPSIS
    return name
