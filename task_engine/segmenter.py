"""Split one utterance into independent task fragments."""

from __future__ import annotations

import re

from task_engine.temporal import has_temporal_hint

# Applied in order; each pass re-splits every fragment from the previous pass.
SEPARATORS = (
    re.compile(r"\band\b(?:\s+I\s+(?:have|need\s+to)\b)?", re.IGNORECASE),
    re.compile(r"\bthen\b", re.IGNORECASE),
    re.compile(r",\s*(?:and\b|I\s+have\b|I\s+need\s+to\b)?", re.IGNORECASE),
    re.compile(r";"),
)

MIN_FRAGMENT_LENGTH = 5


def _keep(fragment: str) -> bool:
    return len(fragment) > MIN_FRAGMENT_LENGTH or has_temporal_hint(fragment)


def split_fragments(text: str) -> list[str]:
    """Return the ordered, non-empty task fragments of ``text``.

    Short fragments without any date or time hint are dropped. When nothing
    survives, the whole trimmed input is returned as the only fragment.
    """

    fragments = [text]
    for separator in SEPARATORS:
        fragments = [piece for fragment in fragments for piece in separator.split(fragment)]

    kept = [fragment.strip() for fragment in fragments]
    kept = [fragment for fragment in kept if fragment and _keep(fragment)]
    if not kept:
        return [text.strip()]
    return kept
