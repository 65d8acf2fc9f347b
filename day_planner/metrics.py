"""Category allocation and plan summary metrics."""

from __future__ import annotations

from dataclasses import dataclass

from day_planner.constants import CATEGORY_CHART_COLORS
from day_planner.scheduling import day_end
from day_planner.schema import Category, Task


@dataclass
class CategoryTotal:
    category: Category
    total_minutes: int


def aggregate_by_category(scheduled: list[Task]) -> list[CategoryTotal]:
    """Sum durations per category in order of first appearance."""

    totals: dict[Category, int] = {}
    for task in scheduled:
        totals[task.category] = totals.get(task.category, 0) + task.duration
    return [CategoryTotal(category, minutes) for category, minutes in totals.items()]


def chart_data(scheduled: list[Task]) -> list[dict]:
    """Return allocation entries with their chart colour."""

    return [
        {
            "name": entry.category.value,
            "value": entry.total_minutes,
            "color": CATEGORY_CHART_COLORS[entry.category],
        }
        for entry in aggregate_by_category(scheduled)
    ]


def plan_summary(scheduled: list[Task], backlog: list[Task], start_from: str) -> dict:
    """Compute counts, total planned minutes and the day's end time."""

    return {
        "scheduled_count": len(scheduled),
        "backlog_count": len(backlog),
        "total_minutes": sum(task.duration for task in scheduled),
        "day_start": start_from,
        "day_end": day_end(scheduled, start_from),
    }
