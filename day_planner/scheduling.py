"""Sequential block scheduling for the day timeline."""

from __future__ import annotations

import logging
from dataclasses import replace

from day_planner.clock import minutes_to_time, time_to_minutes
from day_planner.schema import Task

logger = logging.getLogger(__name__)


def calculate_blocks(tasks: list[Task], start_from: str) -> list[Task]:
    """Lay tasks out back to back from ``start_from`` and return timed copies."""

    cursor = time_to_minutes(start_from)
    blocks: list[Task] = []
    for task in tasks:
        if task.duration < 0:
            logger.warning("Task %s has negative duration %s", task.task_id, task.duration)
        start_time = minutes_to_time(cursor)
        # The cursor keeps growing past midnight; only the display wraps.
        cursor += task.duration
        blocks.append(replace(task, start_time=start_time, end_time=minutes_to_time(cursor)))
    return blocks


def day_end(tasks: list[Task], start_from: str) -> str:
    """Return the clock time at which the last block finishes."""

    total = sum(task.duration for task in tasks)
    return minutes_to_time(time_to_minutes(start_from) + total)
