"""Core data schema for parsed tasks and category suggestions."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

CONFIDENCE_LEVELS = ("high", "medium", "low")


class InvalidArgument(ValueError):
    """Raised when a caller breaks an input precondition."""


@dataclass
class ParsedTask:
    """One structured task extracted from an utterance."""

    task_name: str
    description: str
    date: Optional[str]
    time: Optional[str]
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "taskName": self.task_name,
            "description": self.description,
            "date": self.date,
            "time": self.time,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "ParsedTask":
        """Build a task from its wire shape, rejecting malformed payloads."""

        if not isinstance(payload, dict):
            raise ValueError("Task payload must be an object")

        name = payload.get("taskName")
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Task payload missing taskName")

        description = payload.get("description") or ""
        if not isinstance(description, str):
            raise ValueError("Task description must be a string")

        date_value = payload.get("date")
        if date_value is not None:
            try:
                date.fromisoformat(str(date_value))
            except ValueError as exc:
                raise ValueError(f"Malformed task date '{date_value}'") from exc

        time_value = payload.get("time")
        if time_value is not None and not _is_clock(str(time_value)):
            raise ValueError(f"Malformed task time '{time_value}'")

        tags_raw = payload.get("tags") or []
        if not isinstance(tags_raw, list):
            raise ValueError("Task tags must be a list")
        tags: list[str] = []
        for tag in tags_raw:
            text = str(tag).lstrip("#").strip()
            if text and text not in tags:
                tags.append(text)

        return cls(
            task_name=name.strip(),
            description=description.strip(),
            date=str(date_value) if date_value is not None else None,
            time=str(time_value) if time_value is not None else None,
            tags=tags,
        )


def _is_clock(value: str) -> bool:
    hours, sep, minutes = value.partition(":")
    if not sep or len(hours) != 2 or len(minutes) != 2:
        return False
    if not (hours.isdigit() and minutes.isdigit()):
        return False
    return int(hours) < 24 and int(minutes) < 60


@dataclass
class CategoryMetadata:
    """A category label with optional user-supplied description and keywords."""

    name: str
    description: Optional[str] = None
    keywords: list[str] = field(default_factory=list)


@dataclass
class CategorizationResult:
    """Single best category for a piece of text."""

    suggested_category: str
    confidence: str
    reasoning: Optional[str] = None
    confidence_score: Optional[float] = None

    def __post_init__(self):
        if self.confidence not in CONFIDENCE_LEVELS:
            raise ValueError(f"Unknown confidence level '{self.confidence}'")

    def to_dict(self) -> dict:
        payload = {"suggestedCategory": self.suggested_category, "confidence": self.confidence}
        if self.reasoning is not None:
            payload["reasoning"] = self.reasoning
        if self.confidence_score is not None:
            payload["confidenceScore"] = self.confidence_score
        return payload


@dataclass
class LabeledCase:
    """Benchmark case: an utterance with the tasks and category it should yield."""

    case_id: str
    utterance: str
    anchor: Optional[date]
    expected: list[ParsedTask]
    category: Optional[str] = None
    categories: list[str] = field(default_factory=list)
