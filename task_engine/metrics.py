"""Benchmark metrics for extraction and categorization."""

from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Optional

import numpy as np
from sklearn.metrics import accuracy_score, f1_score

from task_engine.classifier import categorize
from task_engine.extractor import extract_tasks
from task_engine.schema import LabeledCase

_FIELDS = ("task_name", "date", "time", "tags")


def _rate(values: list[bool]) -> float:
    return float(np.mean(values)) if values else 0.0


def extraction_metrics(cases: list[LabeledCase], anchor: Optional[date] = None) -> dict:
    """Exact-match rates of the extraction pipeline against labelled tasks.

    Tasks are compared position by position; ``anchor`` is used for cases
    that do not carry their own.
    """

    labelled = [case for case in cases if case.expected]
    if not labelled:
        report = {"n_cases": 0, "n_tasks": 0, "task_count_accuracy": 0.0}
        report.update({f"{field}_accuracy": 0.0 for field in _FIELDS})
        report["failed_cases"] = []
        return report

    count_hits: list[bool] = []
    field_hits: dict[str, list[bool]] = {field: [] for field in _FIELDS}
    failures: list[str] = []

    for case in labelled:
        predicted = extract_tasks(case.utterance, anchor=case.anchor or anchor)
        count_hits.append(len(predicted) == len(case.expected))
        case_ok = count_hits[-1]
        for got, want in zip(predicted, case.expected):
            for field in _FIELDS:
                hit = getattr(got, field) == getattr(want, field)
                field_hits[field].append(hit)
                case_ok = case_ok and hit
        if not case_ok:
            failures.append(case.case_id)

    report = {
        "n_cases": len(labelled),
        "n_tasks": int(sum(len(case.expected) for case in labelled)),
        "task_count_accuracy": _rate(count_hits),
    }
    report.update({f"{field}_accuracy": _rate(hits) for field, hits in field_hits.items()})
    report["failed_cases"] = failures
    return report


def classification_metrics(cases: list[LabeledCase]) -> dict:
    """Accuracy and macro F1 of the keyword classifier on labelled cases."""

    labelled = [case for case in cases if case.category and case.categories]
    if not labelled:
        return {"n_cases": 0, "accuracy": 0.0, "macro_f1": 0.0, "confidence_counts": {}}

    y_true = [case.category for case in labelled]
    results = [categorize(case.utterance, case.categories) for case in labelled]
    y_pred = [result.suggested_category for result in results]

    return {
        "n_cases": len(labelled),
        "accuracy": float(accuracy_score(y_true, y_pred)),
        "macro_f1": float(f1_score(y_true, y_pred, average="macro", zero_division=0)),
        "confidence_counts": dict(Counter(result.confidence for result in results)),
    }
