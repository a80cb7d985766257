"""Keyword-overlap category classifier."""

from __future__ import annotations

from typing import Union

from task_engine.schema import CategorizationResult, CategoryMetadata, InvalidArgument

NAME_MATCH_SCORE = 10
DESCRIPTION_MATCH_SCORE = 8
KEYWORD_MATCH_SCORE = 5

_EVENT_KEYWORDS = (
    "event", "events", "concert", "show", "gig", "performance",
    "festival", "ticket", "tickets", "venue", "meetup", "conference",
)

KEYWORD_LEXICON = {
    "work": (
        "work", "job", "office", "meeting", "project", "client", "business", "deadline",
        "presentation", "report", "email", "call", "interview", "career", "professional",
        "standup", "sync", "onboarding", "resume", "application", "position", "role", "employment",
    ),
    "personal": ("birthday", "anniversary", "family", "relationship", "self", "personal goal"),
    "health": (
        "health", "fitness", "exercise", "workout", "gym", "diet", "medical",
        "doctor", "appointment", "therapy", "wellness",
    ),
    "shopping": ("shopping", "buy", "purchase", "store", "market", "groceries", "order", "amazon", "shop"),
    "finance": ("finance", "money", "budget", "bill", "payment", "bank", "investment", "invoice", "tax", "expense"),
    "learning": (
        "learn", "study", "read", "course", "education", "training", "class", "homework",
        "assignment", "exam", "test", "quiz", "lecture", "tutorial", "practice", "review",
        "midterm", "final", "textbook", "notes", "research", "paper", "essay", "problem set",
        "lab", "school", "college", "university", "student", "grade", "submit", "due", "chapter",
    ),
    "travel": ("travel", "trip", "vacation", "flight", "hotel", "booking", "airport", "passport", "visa"),
    "social": ("social", "friend", "hangout", "coffee", "lunch", "dinner", "catch up"),
    "events": _EVENT_KEYWORDS,
    "event": _EVENT_KEYWORDS,
    "chores": ("chore", "clean", "laundry", "dishes", "organize", "maintenance", "repair", "vacuum", "tidy"),
    "hobby": ("hobby", "craft", "art", "music", "game", "fun", "entertainment", "movie", "watch", "play"),
}

Category = Union[str, CategoryMetadata]


def as_metadata(category: Category) -> CategoryMetadata:
    if isinstance(category, CategoryMetadata):
        return category
    if isinstance(category, str):
        return CategoryMetadata(name=category)
    raise InvalidArgument(f"Unsupported category type {type(category).__name__}")


def category_keywords(category: CategoryMetadata) -> list[str]:
    """Keywords used to score a category.

    User keywords and description words win; the built-in lexicon is the
    fallback for categories that carry neither.
    """

    keywords = list(category.keywords)
    if category.description:
        keywords.extend(word for word in category.description.lower().split() if len(word) > 3)
    if not keywords:
        keywords = list(KEYWORD_LEXICON.get(category.name.lower(), ()))

    unique: list[str] = []
    for keyword in keywords:
        keyword = keyword.lower()
        if keyword and keyword not in unique:
            unique.append(keyword)
    return unique


def score_category(text: str, category: CategoryMetadata) -> int:
    lowered = text.lower()
    score = 0
    if category.name.lower() in lowered:
        score += NAME_MATCH_SCORE
    if category.description and category.description.lower() in lowered:
        score += DESCRIPTION_MATCH_SCORE
    for keyword in category_keywords(category):
        if keyword in lowered:
            score += KEYWORD_MATCH_SCORE
    return score


def categorize(text: str, categories: list[Category]) -> CategorizationResult:
    """Pick the best-matching category for ``text``.

    Ties keep the earliest category; with no match at all the first
    category is returned with low confidence.
    """

    if not isinstance(text, str):
        raise InvalidArgument(f"Expected text to be a string, got {type(text).__name__}")
    if not categories:
        raise InvalidArgument("At least one category is required")

    candidates = [as_metadata(category) for category in categories]
    best = candidates[0]
    best_score = 0
    for candidate in candidates:
        score = score_category(text, candidate)
        if score > best_score:
            best, best_score = candidate, score

    if best_score > 0:
        return CategorizationResult(
            suggested_category=best.name,
            confidence="medium",
            reasoning=f"Keyword match score {best_score}",
        )
    return CategorizationResult(
        suggested_category=best.name,
        confidence="low",
        reasoning="No keyword matches",
    )
