"""Core data schema for planner tasks."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Category(str, Enum):
    """Fixed set of task categories."""

    STUDY = "Study"
    WORK = "Work"
    SOCIAL = "Social"
    REST = "Rest"
    GAMING = "Gaming"
    OTHER = "Other"


@dataclass
class Task:
    """Task record owned by the store.

    ``start_time`` and ``end_time`` are only filled on copies returned by the
    block scheduler; stored records always leave them unset.
    """

    task_id: str
    title: str
    duration: int
    category: Category
    is_raw: bool
    start_time: Optional[str] = None
    end_time: Optional[str] = None


def coerce_duration(value) -> int:
    """Return ``value`` as whole minutes, rejecting booleans and fractional numbers."""

    if isinstance(value, bool):
        raise ValueError(f"Duration must be a whole number of minutes, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Duration must be a whole number of minutes, got {value!r}")
        return int(value)
    return int(value)
