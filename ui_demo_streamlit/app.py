"""Streamlit shell for the day planner."""

from __future__ import annotations

import tempfile
from datetime import date, time
from pathlib import Path
from typing import Any

from day_planner.adapters import csv_adapter, json_adapter
from day_planner.config import get_settings
from day_planner.logging_setup import setup_logging
from day_planner.planner import Planner
from day_planner.schema import Category, Task
from day_planner.store import TaskStore

DEMO_PLAN = "examples/sample_plan.json"
CATEGORIES = [category.value for category in Category]


def _load_plan_from_path(file_path: str) -> dict[str, list[Task]]:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> dict[str, list[Task]]:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return _load_plan_from_path(temp_path)


def _fmt_minutes(total: int) -> str:
    hours, mins = divmod(total, 60)
    return f"{hours}h {mins:02d}m"


def _task_row(task: Task) -> dict[str, Any]:
    return {
        "start": task.start_time,
        "end": task.end_time,
        "title": task.title or "(untitled)",
        "duration": task.duration,
        "category": task.category.value,
    }


def build_view(planner: Planner) -> dict[str, Any]:
    """Collect every derived snapshot the page renders."""

    return {
        "summary": planner.summary(),
        "timeline": [_task_row(task) for task in planner.scheduled_tasks()],
        "backlog": [{"title": task.title or "(untitled)", "duration": task.duration} for task in planner.backlog_tasks()],
        "allocation": planner.chart_data(),
    }


def load_plan(planner: Planner, plan: dict[str, list[Task]]) -> None:
    """Replace the planner's store with a loaded plan and jump to its first date if needed."""

    planner.store = TaskStore.from_mapping(plan)
    if plan and planner.selected_date not in plan:
        planner.set_selected_date(min(plan))


def _render_task_editor(st, planner: Planner, task: Task, prefix: str) -> None:
    cols = st.columns([1, 4, 2, 2, 1])
    cols[0].write(f"**{task.start_time}**" if task.start_time else "")
    title = cols[1].text_input("Title", value=task.title, key=f"{prefix}-title-{task.task_id}", label_visibility="collapsed")
    duration = cols[2].number_input(
        "Minutes", value=task.duration, step=5, key=f"{prefix}-duration-{task.task_id}", label_visibility="collapsed"
    )
    category = cols[3].selectbox(
        "Category",
        options=CATEGORIES,
        index=CATEGORIES.index(task.category.value),
        key=f"{prefix}-category-{task.task_id}",
        label_visibility="collapsed",
    )
    changes = {}
    if title != task.title:
        changes["title"] = title
    if int(duration) != task.duration:
        changes["duration"] = int(duration)
    if category != task.category.value:
        changes["category"] = category
    if changes:
        planner.update_task(task.task_id, **changes)
        st.rerun()
    if cols[4].button("Delete", key=f"{prefix}-delete-{task.task_id}"):
        planner.delete_task(task.task_id)
        st.rerun()


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Day Planner", layout="wide")
    st.title("Day Planner")

    if "planner" not in st.session_state:
        setup_logging(get_settings().log_level)
        st.session_state.planner = Planner()
    planner: Planner = st.session_state.planner

    try:
        with st.sidebar:
            st.header("Day")
            prev_col, next_col = st.columns(2)
            if prev_col.button("Previous day"):
                planner.navigate_date(-1)
                st.rerun()
            if next_col.button("Next day"):
                planner.navigate_date(1)
                st.rerun()
            picked = st.date_input("Date", value=date.fromisoformat(planner.selected_date))
            planner.set_selected_date(picked)
            start = st.time_input("Day starts at", value=time.fromisoformat(planner.day_start), step=300)
            planner.set_day_start(start)

            st.header("Plan file")
            uploaded = st.file_uploader("Load plan", type=["csv", "json"])
            if uploaded is not None and st.button("Replace plan with upload"):
                load_plan(planner, _parse_uploaded(uploaded))
                st.rerun()
            if st.button("Load demo plan"):
                load_plan(planner, _load_plan_from_path(DEMO_PLAN))
                st.rerun()
            st.download_button(
                "Download plan",
                data=json_adapter.dumps(planner.store.snapshot()),
                file_name="plan.json",
                mime="application/json",
            )

        view = build_view(planner)
        summary = view["summary"]
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Blocks", summary["scheduled_count"])
        c2.metric("Planned", _fmt_minutes(summary["total_minutes"]))
        c3.metric("Ends at", summary["day_end"])
        c4.metric("Backlog", summary["backlog_count"])

        timeline_col, side_col = st.columns([2, 1])
        with timeline_col:
            st.subheader("Timeline")
            scheduled = planner.scheduled_tasks()
            for task in scheduled:
                _render_task_editor(st, planner, task, "timeline")
            if not scheduled:
                st.info("No blocks yet. Add one below or schedule an idea from the backlog.")
            if st.button("Add block"):
                planner.add_task(is_raw=False)
                st.rerun()

            if len(scheduled) > 1:
                labels = [f"{i + 1}. {t.start_time} {t.title or '(untitled)'}" for i, t in enumerate(scheduled)]
                m1, m2, m3 = st.columns([3, 3, 1])
                from_index = m1.selectbox("Move", range(len(scheduled)), format_func=labels.__getitem__)
                to_index = m2.selectbox("To position", range(len(scheduled)), format_func=lambda i: str(i + 1))
                if m3.button("Move"):
                    planner.reorder_scheduled(from_index, to_index)
                    st.rerun()

        with side_col:
            st.subheader("Allocation")
            if view["allocation"]:
                st.bar_chart(view["allocation"], x="name", y="value", color="color")
                st.table([{"category": e["name"], "time": _fmt_minutes(e["value"])} for e in view["allocation"]])
            else:
                st.write("Nothing scheduled.")

            st.subheader("Backlog")
            for task in planner.backlog_tasks():
                _render_task_editor(st, planner, task, "backlog")
                if st.button("Schedule", key=f"schedule-{task.task_id}"):
                    planner.schedule_task(task.task_id)
                    st.rerun()
            if st.button("Add idea"):
                planner.add_task(is_raw=True)
                st.rerun()

    except (ValueError, IndexError) as exc:
        st.error(f"Input error: {exc}")


if __name__ == "__main__":
    main()
