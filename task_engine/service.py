"""Hosted-model first, local engine as fallback.

The local engine is always the recovery path: an unconfigured deployment,
a transport failure, a timeout, malformed JSON or a result that does not
fit the task schema all end up in :func:`extract_tasks` / :func:`categorize`.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Optional

import httpx

from task_engine.classifier import Category, as_metadata, categorize
from task_engine.config import Settings
from task_engine.extractor import extract_tasks
from task_engine.llm_client import HostedModelClient, HostedModelError
from task_engine.schema import CategorizationResult, InvalidArgument, ParsedTask
from task_engine.temporal import as_anchor, pacific_today

logger = logging.getLogger(__name__)

CONFIDENCE_THRESHOLD = 50
HIGH_CONFIDENCE = 70

_UNCATEGORIZED_RE = re.compile(r"uncategorized|general|misc|inbox|backlog")

TASK_SYSTEM_PROMPT = """You are a task processing assistant. Extract task information from the user's input.
The current date is {today} in Pacific Time (PT).
Return a JSON object of the form {{"tasks": [task, ...]}} where each task is:
{{
  "taskName": "Main task name",
  "description": "Detailed description",
  "date": "YYYY-MM-DD or null if no date mentioned",
  "time": "HH:MM in 24-hour format or null if no time mentioned",
  "tags": ["array", "of", "relevant", "tags"]
}}
Rules:
- Split the input into one task per independent activity.
- Use the current date ({today}) to resolve relative dates like "tomorrow".
- Extract any hashtags as tags.
- Keep the taskName concise but descriptive.
- If no date or time is mentioned, set it to null."""

CATEGORY_SYSTEM_PROMPT = """You are a task categorization assistant.
Pick the single best category for the task from the provided list.
Respond with ONLY a JSON object: {"category": "CategoryName", "confidence": 0-100, "reasoning": "Brief explanation"}.
If your confidence is below 50, use "Uncategorized"."""


def _hosted_client(settings: Settings, client: Optional[httpx.Client]) -> Optional[HostedModelClient]:
    if not settings.hosted_configured:
        return None
    return HostedModelClient(settings, client=client)


def _tasks_from_result(result: dict) -> list[ParsedTask]:
    items = result.get("tasks") if "tasks" in result else [result]
    if not isinstance(items, list) or not items:
        raise ValueError("Hosted result holds no tasks")
    return [ParsedTask.from_dict(item) for item in items]


def process_voice_input(
    raw_input: str,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
    now: Optional[datetime] = None,
    anchor: Optional[date] = None,
) -> list[ParsedTask]:
    """Turn a transcript or typed text into tasks.

    ``anchor`` overrides the Pacific "today" given to both the hosted model
    and the local engine.
    """

    if not isinstance(raw_input, str) or not raw_input.strip():
        raise InvalidArgument("No input provided")

    settings = settings or Settings.from_env()
    today = pacific_today(now) if anchor is None else as_anchor(anchor)
    hosted = _hosted_client(settings, client)
    if hosted is None:
        logger.debug("Hosted model not configured; using local extraction")
        return extract_tasks(raw_input, anchor=today)

    try:
        result = hosted.complete_json(TASK_SYSTEM_PROMPT.format(today=today.isoformat()), raw_input)
        return _tasks_from_result(result)
    except HostedModelError as exc:
        logger.warning("Hosted task extraction failed (%s); using local extraction", exc)
    except ValueError as exc:
        logger.warning("Hosted task result rejected (%s); using local extraction", exc)
    return extract_tasks(raw_input, anchor=today)


def _category_context(categories: list[Category]) -> str:
    lines = []
    for category in categories:
        metadata = as_metadata(category)
        line = f"- {metadata.name}"
        if metadata.description:
            line += f": {metadata.description}"
        if metadata.keywords:
            line += f" | Related to: {', '.join(metadata.keywords)}"
        lines.append(line)
    return "\n".join(lines)


def _confidence_level(score: float) -> str:
    if score >= HIGH_CONFIDENCE:
        return "high"
    if score >= CONFIDENCE_THRESHOLD:
        return "medium"
    return "low"


def resolve_hosted_category(result: dict, categories: list[Category]) -> CategorizationResult:
    """Map a hosted ``{category, confidence, reasoning}`` answer onto the caller's labels."""

    names = [as_metadata(category).name for category in categories]
    suggested = result.get("category")
    if not isinstance(suggested, str) or not suggested.strip():
        raise ValueError("Hosted category result missing category")
    try:
        score = float(result.get("confidence", 0))
    except (TypeError, ValueError) as exc:
        raise ValueError("Hosted category confidence is not numeric") from exc
    reasoning = str(result.get("reasoning") or "")

    uncategorized = next((name for name in names if _UNCATEGORIZED_RE.search(name.lower())), None)

    if score < CONFIDENCE_THRESHOLD and uncategorized:
        suggested = uncategorized
        reasoning = f"Low confidence ({score:g}): {reasoning}"

    match = next((name for name in names if name.lower() == suggested.strip().lower()), None)
    if match is None:
        if uncategorized is None:
            raise ValueError(f"Hosted category '{suggested}' is not a known category")
        reasoning = f"Category '{suggested}' not found"
        match = uncategorized

    return CategorizationResult(
        suggested_category=match,
        confidence=_confidence_level(score),
        reasoning=reasoning,
        confidence_score=score,
    )


def categorize_task(
    text: str,
    categories: list[Category],
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> CategorizationResult:
    """Suggest a category, preferring the hosted model when it is configured."""

    if not isinstance(text, str) or not text.strip():
        raise InvalidArgument("Task text is required")
    if not categories:
        raise InvalidArgument("At least one category is required")

    settings = settings or Settings.from_env()
    hosted = _hosted_client(settings, client)
    if hosted is None:
        logger.debug("Hosted model not configured; using keyword categorization")
        return categorize(text, categories)

    user_prompt = f'Task: "{text}"\n\nAvailable Categories:\n{_category_context(categories)}'
    try:
        result = hosted.complete_json(CATEGORY_SYSTEM_PROMPT, user_prompt, max_tokens=150)
        return resolve_hosted_category(result, categories)
    except HostedModelError as exc:
        logger.warning("Hosted categorization failed (%s); using keyword categorization", exc)
    except ValueError as exc:
        logger.warning("Hosted category rejected (%s); using keyword categorization", exc)
    return categorize(text, categories)
