"""Text-to-tasks extraction pipeline."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from task_engine.naming import normalize_name
from task_engine.schema import InvalidArgument, ParsedTask
from task_engine.segmenter import split_fragments
from task_engine.tags import extract_tags, find_tags
from task_engine.temporal import as_anchor, pacific_today, resolve

logger = logging.getLogger(__name__)


def parse_fragment(fragment: str, anchor: date, global_tags: Optional[list[str]] = None) -> ParsedTask:
    """Turn a single fragment into a task."""

    clean_text, tags = extract_tags(fragment, global_tags or [])
    task_date, task_time = resolve(clean_text, anchor)
    return ParsedTask(
        task_name=normalize_name(clean_text),
        description=clean_text,
        date=task_date,
        time=task_time,
        tags=tags,
    )


def extract_tasks(text: str, anchor: Optional[date] = None) -> list[ParsedTask]:
    """Extract one or more tasks from free-form text.

    ``anchor`` is the "today" used for relative dates and defaults to the
    current date in US Pacific time. Always returns at least one task.
    """

    if not isinstance(text, str):
        raise InvalidArgument(f"Expected text to be a string, got {type(text).__name__}")
    if not text.strip():
        raise InvalidArgument("Text must not be empty")

    anchor = pacific_today() if anchor is None else as_anchor(anchor)
    global_tags = find_tags(text)

    tasks = [parse_fragment(fragment, anchor, global_tags) for fragment in split_fragments(text)]

    # Fragments holding only hashtags contribute their tags, not a task.
    with_content = [task for task in tasks if task.description]
    if with_content:
        tasks = with_content

    logger.debug("Extracted %d task(s) from %r (anchor %s)", len(tasks), text, anchor.isoformat())
    return tasks
