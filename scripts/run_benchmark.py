"""Run extraction and categorization metrics over a labelled CSV/JSON dataset."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from dotenv import load_dotenv

from task_engine.adapters import csv_adapter, json_adapter
from task_engine.metrics import classification_metrics, extraction_metrics


def _load_cases(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def main() -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Run task-engine extraction benchmark")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON labelled cases")
    parser.add_argument("--anchor", help="Anchor date (YYYY-MM-DD) for cases without one")
    args = parser.parse_args()

    anchor = date.fromisoformat(args.anchor) if args.anchor else None
    cases = _load_cases(Path(args.data))
    report = {
        "extraction": extraction_metrics(cases, anchor=anchor),
        "classification": classification_metrics(cases),
        "n_cases": len(cases),
    }

    print(json.dumps(report, indent=2))

    outputs_dir = Path("outputs")
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / "benchmark_report.json"
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    print(f"Saved benchmark report to {out_path}")


if __name__ == "__main__":
    main()
