# tests/test_views.py

from __future__ import annotations

from todo_board.core.views import filter_tasks, page_count, paginate
from todo_board.tasks.task_models import Task, mock_display_date


def _tasks(n: int, titles: dict[int, str] | None = None) -> tuple[Task, ...]:
    titles = titles or {}
    return tuple(
        Task(
            id=i + 1,
            title=titles.get(i, f"task number {i}"),
            completed=False,
            user_id=1,
            display_date=mock_display_date(i),
        )
        for i in range(n)
    )


def test_25_tasks_make_three_pages() -> None:
    tasks = _tasks(25)
    filtered = filter_tasks(tasks, "", "")

    assert page_count(len(filtered)) == 3
    assert paginate(filtered, 0) == tasks[0:10]
    assert paginate(filtered, 2) == tasks[20:25]


def test_pages_concatenate_back_to_filtered_sequence() -> None:
    for n in (0, 1, 9, 10, 11, 30, 99):
        filtered = filter_tasks(_tasks(n), "number", "")
        pages = page_count(len(filtered))
        assert pages == -(-n // 10)
        joined: list[Task] = []
        for p in range(pages):
            joined.extend(paginate(filtered, p))
        assert tuple(joined) == filtered


def test_search_is_case_insensitive_substring() -> None:
    tasks = _tasks(15, titles={4: "Make a phone CALL"})

    result = filter_tasks(tasks, "call", "")

    assert [t.id for t in result] == [5]
    assert filter_tasks(tasks, "PHONE c", "") == result
    assert filter_tasks(tasks, "", "") == tasks


def test_search_result_does_not_depend_on_page() -> None:
    tasks = _tasks(40, titles={33: "Make a phone call"})
    filtered = filter_tasks(tasks, "call", "")

    assert len(filtered) == 1
    assert filtered[0].title == "Make a phone call"


def test_date_filter_is_exact_string_equality() -> None:
    tasks = _tasks(60)

    on_fifth = filter_tasks(tasks, "", "2024-07-5")
    assert [t.id for t in on_fifth] == [5, 35]

    # Zero-padded value is a different string.
    assert filter_tasks(tasks, "", "2024-07-05") == ()


def test_search_and_date_combine() -> None:
    tasks = _tasks(60, titles={4: "call mom", 34: "water plants"})

    assert [t.id for t in filter_tasks(tasks, "call", "2024-07-5")] == [5]
    assert filter_tasks(tasks, "plants", "2024-07-6") == ()


def test_recomputing_gives_identical_output() -> None:
    tasks = _tasks(23, titles={3: "Call"})

    first = paginate(filter_tasks(tasks, "c", ""), 1)
    second = paginate(filter_tasks(tasks, "c", ""), 1)

    assert first == second


def test_out_of_range_page_is_empty() -> None:
    filtered = filter_tasks(_tasks(5), "", "")

    assert paginate(filtered, 3) == ()
    assert paginate(filtered, -1) == ()
    assert page_count(0) == 0
