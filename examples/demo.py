"""Demo script for day-planner."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from day_planner.adapters.json_adapter import parse
from day_planner.planner import Planner
from day_planner.store import TaskStore


def main() -> None:
    plan = parse("examples/sample_plan.json")
    planner = Planner(store=TaskStore.from_mapping(plan), selected_date=min(plan), day_start="07:00")
    for task in planner.scheduled_tasks():
        print(f"{task.start_time}-{task.end_time}  {task.title} [{task.category.value}]")
    print("Allocation:", [(e.category.value, e.total_minutes) for e in planner.allocation()])

    planner.reorder_scheduled(3, 0)
    print("After moving the last block first:")
    for task in planner.scheduled_tasks():
        print(f"{task.start_time}-{task.end_time}  {task.title}")


if __name__ == "__main__":
    main()
