from day_planner.metrics import CategoryTotal, aggregate_by_category, chart_data, plan_summary
from day_planner.schema import Category, Task


def sample_scheduled():
    return [
        Task("1", "Write report", 120, Category.WORK, False),
        Task("2", "Nap", 45, Category.REST, False),
        Task("3", "Review PRs", 60, Category.WORK, False),
    ]


def test_aggregate_uses_first_seen_order():
    result = aggregate_by_category(sample_scheduled())
    assert result == [CategoryTotal(Category.WORK, 180), CategoryTotal(Category.REST, 45)]


def test_aggregate_omits_absent_categories_and_handles_empty():
    assert {entry.category for entry in aggregate_by_category(sample_scheduled())} == {Category.WORK, Category.REST}
    assert aggregate_by_category([]) == []


def test_aggregate_total_matches_durations():
    tasks = sample_scheduled() + [Task("4", "", 0, Category.GAMING, False)]
    result = aggregate_by_category(tasks)
    assert sum(entry.total_minutes for entry in result) == sum(t.duration for t in tasks)
    assert result[-1] == CategoryTotal(Category.GAMING, 0)


def test_chart_data_includes_colors():
    data = chart_data(sample_scheduled())
    assert data == [
        {"name": "Work", "value": 180, "color": "#10b981"},
        {"name": "Rest", "value": 45, "color": "#f43f5e"},
    ]


def test_plan_summary():
    backlog = [Task("9", "Someday", 30, Category.OTHER, True)]
    summary = plan_summary(sample_scheduled(), backlog, "08:00")
    assert summary == {
        "scheduled_count": 3,
        "backlog_count": 1,
        "total_minutes": 225,
        "day_start": "08:00",
        "day_end": "11:45",
    }
