from day_planner.clock import time_to_minutes
from day_planner.scheduling import calculate_blocks, day_end
from day_planner.schema import Category, Task


def sample_tasks():
    return [
        Task("1", "Morning Routine", 45, Category.REST, False),
        Task("2", "Deep Work", 180, Category.WORK, False),
        Task("3", "Lunch", 60, Category.REST, False),
        Task("4", "Team Sync", 30, Category.SOCIAL, False),
    ]


def test_calculate_blocks_lays_out_tasks_back_to_back():
    blocks = calculate_blocks(sample_tasks(), "07:00")
    assert [b.start_time for b in blocks] == ["07:00", "07:45", "10:45", "11:45"]
    assert [b.end_time for b in blocks] == ["07:45", "10:45", "11:45", "12:15"]
    assert [b.task_id for b in blocks] == ["1", "2", "3", "4"]
    assert blocks[1].title == "Deep Work"
    assert blocks[1].category is Category.WORK


def test_calculate_blocks_is_contiguous_and_sums_durations():
    tasks = [Task(str(i), "", d, Category.OTHER, False) for i, d in enumerate([10, 0, 95, 240, 5])]
    blocks = calculate_blocks(tasks, "09:10")
    for current, following in zip(blocks, blocks[1:]):
        assert current.end_time == following.start_time
    elapsed = time_to_minutes(blocks[-1].end_time) - time_to_minutes(blocks[0].start_time)
    assert elapsed % 1440 == sum(t.duration for t in tasks) % 1440


def test_calculate_blocks_does_not_mutate_input():
    tasks = sample_tasks()
    calculate_blocks(tasks, "07:00")
    assert all(t.start_time is None and t.end_time is None for t in tasks)


def test_calculate_blocks_empty():
    assert calculate_blocks([], "07:00") == []


def test_zero_duration_block_starts_and_ends_together():
    blocks = calculate_blocks([Task("z", "", 0, Category.OTHER, False)], "13:00")
    assert blocks[0].start_time == blocks[0].end_time == "13:00"


def test_blocks_wrap_past_midnight():
    tasks = [Task("a", "", 90, Category.GAMING, False), Task("b", "", 30, Category.REST, False)]
    blocks = calculate_blocks(tasks, "23:00")
    assert [(b.start_time, b.end_time) for b in blocks] == [("23:00", "00:30"), ("00:30", "01:00")]


def test_negative_duration_moves_cursor_backwards():
    tasks = [Task("a", "", -30, Category.OTHER, False), Task("b", "", 60, Category.OTHER, False)]
    blocks = calculate_blocks(tasks, "08:00")
    assert (blocks[0].start_time, blocks[0].end_time) == ("08:00", "07:30")
    assert (blocks[1].start_time, blocks[1].end_time) == ("07:30", "08:30")


def test_day_end():
    assert day_end(sample_tasks(), "07:00") == "12:15"
    assert day_end([], "07:00") == "07:00"
