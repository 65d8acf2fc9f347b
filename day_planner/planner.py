"""Planner session state: selected date, day start and the task store."""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from day_planner.clock import normalize_time
from day_planner.config import get_settings
from day_planner.metrics import CategoryTotal, aggregate_by_category, chart_data, plan_summary
from day_planner.scheduling import calculate_blocks
from day_planner.schema import Task
from day_planner.store import TaskStore

logger = logging.getLogger(__name__)


def _iso_date(value: date | str) -> str:
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.isoformat()
    try:
        return date.fromisoformat(value).isoformat()
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid ISO date {value!r}") from exc


class Planner:
    """State holder owned by the presentation shell.

    Mutators act on the selected date. Timed blocks, backlog and allocation are
    recomputed from the store on every call and never cached.
    """

    def __init__(
        self,
        store: Optional[TaskStore] = None,
        selected_date: date | str | None = None,
        day_start: time | str | None = None,
        default_duration: Optional[int] = None,
    ) -> None:
        if day_start is None or default_duration is None:
            settings = get_settings()
            day_start = settings.day_start if day_start is None else day_start
            default_duration = settings.default_duration if default_duration is None else default_duration
        self.store = store if store is not None else TaskStore()
        self.selected_date = _iso_date(selected_date if selected_date is not None else date.today())
        self.day_start = normalize_time(day_start)
        self.default_duration = default_duration

    def set_selected_date(self, value: date | str) -> str:
        self.selected_date = _iso_date(value)
        return self.selected_date

    def navigate_date(self, days: int) -> str:
        """Shift the selected date by ``days`` (negative goes back)."""

        shifted = date.fromisoformat(self.selected_date) + timedelta(days=days)
        return self.set_selected_date(shifted)

    def set_day_start(self, value: time | str) -> str:
        self.day_start = normalize_time(value)
        logger.debug("Day start set to %s", self.day_start)
        return self.day_start

    def scheduled_tasks(self) -> list[Task]:
        return calculate_blocks(self.store.scheduled(self.selected_date), self.day_start)

    def backlog_tasks(self) -> list[Task]:
        return self.store.backlog(self.selected_date)

    def allocation(self) -> list[CategoryTotal]:
        return aggregate_by_category(self.scheduled_tasks())

    def chart_data(self) -> list[dict]:
        return chart_data(self.scheduled_tasks())

    def summary(self) -> dict:
        summary = plan_summary(self.scheduled_tasks(), self.backlog_tasks(), self.day_start)
        summary["date"] = self.selected_date
        return summary

    def add_task(self, is_raw: bool, **overrides: Any) -> Task:
        overrides.setdefault("duration", self.default_duration)
        return self.store.add_task(self.selected_date, is_raw, **overrides)

    def update_task(self, task_id: str, **changes: Any) -> Optional[Task]:
        return self.store.update_task(self.selected_date, task_id, **changes)

    def delete_task(self, task_id: str) -> bool:
        return self.store.delete_task(self.selected_date, task_id)

    def reorder_scheduled(self, from_index: int, to_index: int) -> list[Task]:
        """Move a timeline block and return the re-timed timeline."""

        self.store.reorder_scheduled(self.selected_date, from_index, to_index)
        return self.scheduled_tasks()

    def schedule_task(self, task_id: str) -> Optional[Task]:
        """Move a backlog item onto the timeline."""

        return self.update_task(task_id, is_raw=False)
