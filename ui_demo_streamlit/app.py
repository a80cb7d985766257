"""Streamlit demo UI for task-engine."""

from __future__ import annotations

from datetime import date
from typing import Any

from task_engine.classifier import categorize
from task_engine.config import Settings
from task_engine.extractor import extract_tasks
from task_engine.service import categorize_task, process_voice_input
from task_engine.temporal import pacific_today

DEFAULT_CATEGORIES = "work, personal, health, shopping, finance, learning, travel, social, chores, hobby"


def _parse_categories(raw: str) -> list[str]:
    return [name.strip() for name in raw.split(",") if name.strip()]


def run_engine(text: str, anchor: date, categories: list[str], use_hosted: bool = False) -> dict[str, Any]:
    """Run extraction and categorization and return a UI-friendly payload."""

    if use_hosted:
        settings = Settings.from_env()
        tasks = process_voice_input(text, settings=settings, anchor=anchor)
    else:
        tasks = extract_tasks(text, anchor=anchor)

    rows = []
    for task in tasks:
        row = task.to_dict()
        row["tags"] = ", ".join(task.tags)
        if categories:
            if use_hosted:
                result = categorize_task(task.description or text, categories, settings=settings)
            else:
                result = categorize(task.description or text, categories)
            row["category"] = result.suggested_category
            row["confidence"] = result.confidence
        rows.append(row)

    return {"anchor": anchor.isoformat(), "n_tasks": len(tasks), "rows": rows}


def main() -> None:
    import streamlit as st
    from dotenv import load_dotenv

    load_dotenv()

    st.set_page_config(page_title="Task Engine Demo", layout="wide")
    st.title("Task Engine - Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        anchor = st.date_input("Anchor date", value=pacific_today())
        categories_raw = st.text_input("Categories (comma separated)", value=DEFAULT_CATEGORIES)
        hosted_available = Settings.from_env().hosted_configured
        use_hosted = st.checkbox("Use hosted model", value=False, disabled=not hosted_available)

    text = st.text_area("What do you need to do?", value="Zed concert at 4pm tomorrow and Noc2 concert at 6pm Friday")
    run = st.button("Extract tasks", type="primary")

    if not run:
        st.info("Type or paste an utterance and click **Extract tasks**.")
        return

    try:
        result = run_engine(text, anchor, _parse_categories(categories_raw), use_hosted=use_hosted)
    except ValueError as exc:
        st.error(f"Input error: {exc}")
        return

    st.success(f"Extracted {result['n_tasks']} task(s) relative to {result['anchor']}.")
    st.table(result["rows"])


if __name__ == "__main__":
    main()
