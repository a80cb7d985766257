"""JSON adapter for labelled benchmark cases."""

from __future__ import annotations

import json
from datetime import date

from task_engine.schema import LabeledCase, ParsedTask

_REQUIRED_FIELDS = {"utterance"}


def _parse_anchor(raw, index: int):
    if raw in (None, ""):
        return None
    try:
        return date.fromisoformat(str(raw))
    except ValueError as exc:
        raise ValueError(f"Item {index}: malformed anchor") from exc


def _parse_item(item: dict, index: int) -> LabeledCase:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    missing = [field for field in _REQUIRED_FIELDS if not item.get(field)]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    tasks_raw = item.get("tasks") or []
    if not isinstance(tasks_raw, list):
        raise ValueError(f"Item {index}: tasks must be a list")
    try:
        expected = [ParsedTask.from_dict(task) for task in tasks_raw]
    except ValueError as exc:
        raise ValueError(f"Item {index}: invalid expected task ({exc})") from exc

    categories = item.get("categories") or []
    if not isinstance(categories, list):
        raise ValueError(f"Item {index}: categories must be a list")

    category_raw = item.get("category")
    category = str(category_raw).strip() if category_raw else None

    return LabeledCase(
        case_id=str(item.get("case_id") or index),
        utterance=str(item["utterance"]),
        anchor=_parse_anchor(item.get("anchor"), index),
        expected=expected,
        category=category,
        categories=[str(name).strip() for name in categories if str(name).strip()],
    )


def parse(file_path: str) -> list[LabeledCase]:
    """Parse JSON file into labelled cases."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    return [_parse_item(item, i) for i, item in enumerate(payload, start=1)]
