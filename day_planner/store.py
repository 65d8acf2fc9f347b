"""In-memory date-keyed task store."""

from __future__ import annotations

import logging
import uuid
from dataclasses import fields, replace
from typing import Any, Optional

from day_planner.constants import DEFAULT_CATEGORY, DEFAULT_DURATION
from day_planner.schema import Category, Task, coerce_duration

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = {"title", "duration", "category", "is_raw"}
_TASK_FIELDS = {field.name for field in fields(Task)}


class InvalidIndexError(IndexError):
    """Raised when a reorder index falls outside the scheduled subset."""


def _coerce_changes(changes: dict[str, Any]) -> dict[str, Any]:
    unknown = set(changes) - _TASK_FIELDS
    if unknown:
        raise ValueError(f"Unknown task fields {sorted(unknown)}")
    locked = set(changes) - _EDITABLE_FIELDS
    if locked:
        raise ValueError(f"Task fields {sorted(locked)} cannot be updated")

    coerced = dict(changes)
    if "category" in coerced:
        coerced["category"] = Category(coerced["category"])
    if "duration" in coerced:
        coerced["duration"] = coerce_duration(coerced["duration"])
    if "is_raw" in coerced:
        coerced["is_raw"] = bool(coerced["is_raw"])
    if "title" in coerced:
        coerced["title"] = str(coerced["title"])
    return coerced


class TaskStore:
    """Ordered task sequences keyed by ISO date.

    Stored records never carry start/end times; those are derived by the block
    scheduler from the scheduled subset's order.
    """

    def __init__(self) -> None:
        self._tasks_by_date: dict[str, list[Task]] = {}

    @classmethod
    def from_mapping(cls, mapping: dict[str, list[Task]]) -> TaskStore:
        """Build a store seeded with copies of the given tasks."""

        store = cls()
        seen: dict[str, str] = {}
        for date, tasks in mapping.items():
            for task in tasks:
                if task.task_id in seen:
                    raise ValueError(
                        f"Duplicate task id '{task.task_id}' on {date} (already used on {seen[task.task_id]})"
                    )
                seen[task.task_id] = date
            store._tasks_by_date[date] = [replace(task, start_time=None, end_time=None) for task in tasks]
        return store

    def _sequence(self, date: str) -> list[Task]:
        return self._tasks_by_date.setdefault(date, [])

    def _new_id(self) -> str:
        known = {task.task_id for tasks in self._tasks_by_date.values() for task in tasks}
        while True:
            task_id = uuid.uuid4().hex[:9]
            if task_id not in known:
                return task_id

    def dates(self) -> list[str]:
        """Return dates that have a task sequence, sorted."""

        return sorted(self._tasks_by_date)

    def tasks_for(self, date: str) -> list[Task]:
        """Return copies of the date's tasks in stored order."""

        return [replace(task) for task in self._sequence(date)]

    def scheduled(self, date: str) -> list[Task]:
        return [task for task in self.tasks_for(date) if not task.is_raw]

    def backlog(self, date: str) -> list[Task]:
        return [task for task in self.tasks_for(date) if task.is_raw]

    def snapshot(self) -> dict[str, list[Task]]:
        """Return a detached copy of the whole date-keyed mapping."""

        return {date: self.tasks_for(date) for date in self.dates()}

    def add_task(self, date: str, is_raw: bool, **overrides: Any) -> Task:
        """Append a new task with default fields to the end of the date's sequence."""

        values = {"title": "", "duration": DEFAULT_DURATION, "category": DEFAULT_CATEGORY, "is_raw": is_raw}
        values.update(_coerce_changes(overrides))
        task = Task(task_id=self._new_id(), **values)
        self._sequence(date).append(task)
        logger.debug("Added task %s on %s (raw=%s)", task.task_id, date, task.is_raw)
        return replace(task)

    def update_task(self, date: str, task_id: str, **changes: Any) -> Optional[Task]:
        """Merge ``changes`` into the task with ``task_id``; ``None`` if absent."""

        coerced = _coerce_changes(changes)
        sequence = self._sequence(date)
        for index, task in enumerate(sequence):
            if task.task_id == task_id:
                sequence[index] = replace(task, **coerced)
                return replace(sequence[index])
        logger.debug("Update ignored, no task %s on %s", task_id, date)
        return None

    def delete_task(self, date: str, task_id: str) -> bool:
        """Remove the task with ``task_id``, keeping the order of the rest."""

        sequence = self._sequence(date)
        remaining = [task for task in sequence if task.task_id != task_id]
        if len(remaining) == len(sequence):
            logger.debug("Delete ignored, no task %s on %s", task_id, date)
            return False
        self._tasks_by_date[date] = remaining
        return True

    def reorder_scheduled(self, date: str, from_index: int, to_index: int) -> list[Task]:
        """Move a scheduled task within the scheduled subset.

        The backlog keeps its internal order and is stored after the whole
        scheduled block.
        """

        sequence = self._sequence(date)
        active = [task for task in sequence if not task.is_raw]
        raw = [task for task in sequence if task.is_raw]

        for name, index in (("from_index", from_index), ("to_index", to_index)):
            if not 0 <= index < len(active):
                raise InvalidIndexError(f"{name} {index} out of range for {len(active)} scheduled tasks")

        moved = active.pop(from_index)
        active.insert(to_index, moved)
        self._tasks_by_date[date] = active + raw
        logger.debug("Moved task %s on %s from %s to %s", moved.task_id, date, from_index, to_index)
        return [replace(task) for task in active]
