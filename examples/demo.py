"""Demo script for task-engine."""

import json
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_engine.classifier import categorize
from task_engine.extractor import extract_tasks

UTTERANCES = [
    "Zed concert at 4pm tomorrow and Noc2 concert at 6pm Friday",
    "Buy milk, pick up kids, call dentist #errands",
    "submit report by Monday morning",
    "dentist appointment next tue at 9:30am #health",
]
CATEGORIES = ["work", "health", "shopping", "events"]


def main() -> None:
    anchor = date(2025, 1, 15)
    for utterance in UTTERANCES:
        tasks = extract_tasks(utterance, anchor=anchor)
        print(utterance)
        for task in tasks:
            category = categorize(task.description, CATEGORIES)
            print("  ", json.dumps(task.to_dict()), "->", category.suggested_category)


if __name__ == "__main__":
    main()
