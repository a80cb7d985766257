"""Hashtag extraction."""

from __future__ import annotations

import re

_TAG_RE = re.compile(r"#(\w+)")
_SPACES_RE = re.compile(r"\s{2,}")


def find_tags(text: str) -> list[str]:
    """Return hashtag words in order of appearance, without duplicates.

    Tags keep their original case; ``#Work`` and ``#work`` are distinct.
    """

    tags: list[str] = []
    for tag in _TAG_RE.findall(text):
        if tag not in tags:
            tags.append(tag)
    return tags


def strip_tags(text: str) -> str:
    """Remove every ``#word`` token and collapse the gaps it leaves."""

    return _SPACES_RE.sub(" ", _TAG_RE.sub("", text)).strip()


def extract_tags(fragment: str, global_tags: list[str]) -> tuple[str, list[str]]:
    """Split a fragment into tag-free text and its tags.

    Fragment-local tags come first, followed by any global tags not
    already present.
    """

    tags = find_tags(fragment)
    for tag in global_tags:
        if tag not in tags:
            tags.append(tag)
    return strip_tags(fragment), tags
