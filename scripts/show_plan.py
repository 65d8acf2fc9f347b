"""Print the computed timeline for a plan file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from day_planner.adapters import csv_adapter, json_adapter
from day_planner.config import get_settings
from day_planner.logging_setup import setup_logging
from day_planner.planner import Planner
from day_planner.store import TaskStore


def _load_plan(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def build_report(planner: Planner) -> dict:
    """Collect timeline, backlog and allocation for the selected date."""

    return {
        "summary": planner.summary(),
        "timeline": [
            {"start": t.start_time, "end": t.end_time, "title": t.title, "duration": t.duration, "category": t.category.value}
            for t in planner.scheduled_tasks()
        ],
        "backlog": [{"title": t.title, "duration": t.duration, "category": t.category.value} for t in planner.backlog_tasks()],
        "allocation": [
            {"category": entry.category.value, "total_minutes": entry.total_minutes} for entry in planner.allocation()
        ],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Show the day timeline for a plan file")
    parser.add_argument("--plan", required=True, help="Path to CSV/JSON plan file")
    parser.add_argument("--date", help="ISO date to show (defaults to the first date in the plan)")
    parser.add_argument("--start", help="Day start time as HH:MM (defaults to settings)")
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level)

    plan = _load_plan(Path(args.plan))
    if not plan and not args.date:
        parser.error("plan file has no dates; pass --date")
    selected = args.date or min(plan)
    planner = Planner(store=TaskStore.from_mapping(plan), selected_date=selected, day_start=args.start)

    print(json.dumps(build_report(planner), indent=2))


if __name__ == "__main__":
    main()
