"""JSON adapter for date-keyed plans."""

from __future__ import annotations

import json
import logging
from datetime import date

from day_planner.schema import Category, Task, coerce_duration

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"id", "duration", "category"}


def _parse_item(item: dict, index: int) -> Task:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    missing = sorted(field for field in _REQUIRED_FIELDS if item.get(field) in (None, ""))
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        duration = coerce_duration(item["duration"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Item {index}: invalid duration") from exc

    try:
        category = Category(str(item["category"]).strip())
    except ValueError as exc:
        raise ValueError(f"Item {index}: invalid category '{item['category']}'") from exc

    is_raw = item.get("isRaw", False)
    if not isinstance(is_raw, bool):
        raise ValueError(f"Item {index}: isRaw must be true or false")

    return Task(
        task_id=str(item["id"]).strip(),
        title=str(item.get("title") or ""),
        duration=duration,
        category=category,
        is_raw=is_raw,
    )


def _to_item(task: Task) -> dict:
    return {
        "id": task.task_id,
        "title": task.title,
        "duration": task.duration,
        "category": task.category.value,
        "isRaw": task.is_raw,
    }


def parse(file_path: str) -> dict[str, list[Task]]:
    """Parse a JSON plan file into tasks keyed by ISO date."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, dict):
        raise ValueError("JSON payload must be an object keyed by date")

    plan: dict[str, list[Task]] = {}
    seen: set[str] = set()
    index = 0
    for day, items in payload.items():
        try:
            date.fromisoformat(day)
        except ValueError as exc:
            raise ValueError(f"Invalid date key '{day}'") from exc
        if not isinstance(items, list):
            raise ValueError(f"Date {day}: expected a list of tasks")
        tasks = []
        for item in items:
            index += 1
            task = _parse_item(item, index)
            if task.task_id in seen:
                raise ValueError(f"Item {index}: duplicate id '{task.task_id}' on {day}")
            seen.add(task.task_id)
            tasks.append(task)
        plan[day] = tasks

    logger.info("Loaded %s tasks over %s dates from %s", index, len(plan), file_path)
    return plan


def dumps(plan: dict[str, list[Task]]) -> str:
    """Serialize a plan to JSON text; derived times are left out."""

    return json.dumps({day: [_to_item(task) for task in tasks] for day, tasks in plan.items()}, indent=2)


def dump(plan: dict[str, list[Task]], file_path: str) -> None:
    """Write a plan to a JSON file."""

    with open(file_path, "w", encoding="utf-8") as handle:
        handle.write(dumps(plan))
