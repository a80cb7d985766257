"""CSV adapter for labelled benchmark cases.

One row per expected task; rows sharing a ``case_id`` belong to the same
utterance. A row with an empty ``task_name`` only labels the category.
"""

from __future__ import annotations

import csv
from datetime import date

from task_engine.schema import LabeledCase, ParsedTask

_REQUIRED_FIELDS = {"case_id", "utterance"}


def _optional(row: dict, key: str):
    value = (row.get(key) or "").strip()
    return value or None


def _parse_task(row: dict, row_number: int):
    name = _optional(row, "task_name")
    if name is None:
        return None
    payload = {
        "taskName": name,
        "date": _optional(row, "date"),
        "time": _optional(row, "time"),
        "tags": (row.get("tags") or "").split(),
    }
    try:
        return ParsedTask.from_dict(payload)
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: invalid expected task ({exc})") from exc


def _parse_anchor(row: dict, row_number: int):
    raw = _optional(row, "anchor")
    if raw is None:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: malformed anchor") from exc


def parse(file_path: str) -> list[LabeledCase]:
    """Parse CSV file into labelled cases, keeping first-seen case order."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        cases: dict[str, LabeledCase] = {}
        for row_number, row in enumerate(reader, start=2):
            missing = [field for field in _REQUIRED_FIELDS if not row.get(field)]
            if missing:
                raise ValueError(f"Row {row_number}: missing required fields {missing}")

            case_id = row["case_id"].strip()
            case = cases.get(case_id)
            if case is None:
                categories = (row.get("categories") or "").split("|")
                case = LabeledCase(
                    case_id=case_id,
                    utterance=row["utterance"],
                    anchor=_parse_anchor(row, row_number),
                    expected=[],
                    category=_optional(row, "category"),
                    categories=[name.strip() for name in categories if name.strip()],
                )
                cases[case_id] = case
            elif row["utterance"] != case.utterance:
                raise ValueError(f"Row {row_number}: utterance differs for case '{case_id}'")

            task = _parse_task(row, row_number)
            if task is not None:
                case.expected.append(task)

    return list(cases.values())
