"""CSV adapter for date-keyed plans."""

from __future__ import annotations

import csv
import logging
from datetime import date

from day_planner.schema import Category, Task

logger = logging.getLogger(__name__)

FIELDNAMES = ["date", "id", "title", "duration", "category", "is_raw"]

_REQUIRED_FIELDS = {"date", "id", "duration", "category"}
_TRUE_VALUES = {"true", "yes", "1"}
_FALSE_VALUES = {"false", "no", "0", ""}


def _parse_row(row: dict, row_number: int) -> tuple[str, Task]:
    missing = sorted(field for field in _REQUIRED_FIELDS if not row.get(field))
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    day = row["date"].strip()
    try:
        date.fromisoformat(day)
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: malformed date") from exc

    try:
        duration = int(row["duration"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Row {row_number}: invalid duration") from exc

    try:
        category = Category(row["category"].strip())
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: invalid category '{row['category']}'") from exc

    raw_value = (row.get("is_raw") or "").strip().lower()
    if raw_value not in _TRUE_VALUES | _FALSE_VALUES:
        raise ValueError(f"Row {row_number}: invalid is_raw '{row.get('is_raw')}'")

    task = Task(
        task_id=row["id"].strip(),
        title=row.get("title") or "",
        duration=duration,
        category=category,
        is_raw=raw_value in _TRUE_VALUES,
    )
    return day, task


def parse(file_path: str) -> dict[str, list[Task]]:
    """Parse a CSV plan file; row order becomes timeline order per date."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return {}

        plan: dict[str, list[Task]] = {}
        seen: set[str] = set()
        for row_number, row in enumerate(reader, start=2):
            day, task = _parse_row(row, row_number)
            if task.task_id in seen:
                raise ValueError(f"Row {row_number}: duplicate id '{task.task_id}' on {day}")
            seen.add(task.task_id)
            plan.setdefault(day, []).append(task)

    logger.info("Loaded %s dates from %s", len(plan), file_path)
    return plan


def dump(plan: dict[str, list[Task]], file_path: str) -> None:
    """Write a plan to CSV, one row per task."""

    with open(file_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=FIELDNAMES)
        writer.writeheader()
        for day, tasks in plan.items():
            for task in tasks:
                writer.writerow(
                    {
                        "date": day,
                        "id": task.task_id,
                        "title": task.title,
                        "duration": task.duration,
                        "category": task.category.value,
                        "is_raw": "true" if task.is_raw else "false",
                    }
                )
