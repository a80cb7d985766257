from datetime import date, datetime

import pytest

from task_engine.extractor import extract_tasks, parse_fragment
from task_engine.schema import InvalidArgument

ANCHOR = date(2025, 1, 15)  # Wednesday


def test_two_concerts():
    tasks = extract_tasks("Zed concert at 4pm tomorrow and Noc2 concert at 6pm Friday", anchor=ANCHOR)
    assert [(t.task_name, t.date, t.time) for t in tasks] == [
        ("Zed concert", "2025-01-16", "16:00"),
        ("Noc2 concert", "2025-01-17", "18:00"),
    ]
    assert tasks[0].description == "Zed concert at 4pm tomorrow"


def test_comma_separated_errands():
    tasks = extract_tasks("Buy milk, pick up kids, call dentist", anchor=ANCHOR)
    assert [t.task_name for t in tasks] == ["Buy milk", "Pick up kids", "Call dentist"]
    assert all(t.date is None and t.time is None for t in tasks)


def test_deadline_with_part_of_day():
    tasks = extract_tasks("submit report by Monday morning", anchor=ANCHOR)
    assert len(tasks) == 1
    assert (tasks[0].task_name, tasks[0].date, tasks[0].time) == ("Submit report", "2025-01-20", "09:00")


def test_plain_task():
    tasks = extract_tasks("call mom", anchor=ANCHOR)
    assert [t.to_dict() for t in tasks] == [
        {"taskName": "Call mom", "description": "call mom", "date": None, "time": None, "tags": []}
    ]


def test_global_tags_shared_by_every_task():
    tasks = extract_tasks("Buy milk #errands and call mom #family", anchor=ANCHOR)
    assert tasks[0].tags == ["errands", "family"]
    assert tasks[1].tags == ["family", "errands"]
    assert tasks[0].description == "Buy milk"


def test_tag_only_fragment_is_not_a_task():
    tasks = extract_tasks("Buy milk, call mom, #errands", anchor=ANCHOR)
    assert [t.task_name for t in tasks] == ["Buy milk", "Call mom"]
    assert all(t.tags == ["errands"] for t in tasks)


def test_only_tags_still_yields_one_task():
    tasks = extract_tasks("#urgent", anchor=ANCHOR)
    assert len(tasks) == 1
    assert tasks[0].task_name == ""
    assert tasks[0].tags == ["urgent"]


def test_date_only_fragment_keeps_empty_name():
    task = parse_fragment("tomorrow at 5pm", ANCHOR)
    assert task.task_name == ""
    assert (task.date, task.time) == ("2025-01-16", "17:00")


def test_names_never_exceed_bound():
    tasks = extract_tasks("prepare " + "very " * 30 + "long slides for the offsite", anchor=ANCHOR)
    assert all(len(t.task_name) <= 53 for t in tasks)


def test_default_anchor_uses_pacific_today(monkeypatch):
    monkeypatch.setattr("task_engine.extractor.pacific_today", lambda: date(2025, 3, 1))
    tasks = extract_tasks("water plants tomorrow")
    assert tasks[0].date == "2025-03-02"


@pytest.mark.parametrize("bad", [None, 42, "", "   "])
def test_invalid_input_raises(bad):
    with pytest.raises(InvalidArgument):
        extract_tasks(bad, anchor=ANCHOR)


def test_datetime_anchor_yields_plain_date():
    tasks = extract_tasks("call mom tomorrow", anchor=datetime(2025, 1, 15, 22, 30))
    assert tasks[0].date == "2025-01-16"

    tasks = extract_tasks("call mom today", anchor=datetime(2025, 1, 15, 22, 30))
    assert tasks[0].date == "2025-01-15"


def test_non_date_anchor_rejected():
    with pytest.raises(InvalidArgument):
        extract_tasks("call mom tomorrow", anchor="2025-01-15")
