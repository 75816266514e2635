from __future__ import annotations

import io
from collections.abc import Iterable
from datetime import datetime, timedelta
from pathlib import Path

from rich.console import Console

from task_tracker.domain.enums import TaskStatus
from task_tracker.infra.activity_log import ActivityLog
from task_tracker.infra.repository import JsonTaskRepository
from task_tracker.services.task_service import TaskService
from task_tracker.services.task_store import TaskStore
from task_tracker.ui.console import ConsoleApp


class ScriptedInput:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None


def make_app(tmp_path: Path, lines: Iterable[str]) -> tuple[ConsoleApp, TaskService, io.StringIO]:
    repo = JsonTaskRepository(tmp_path / "tasks.json")
    service = TaskService(TaskStore(repo.load()), repo, ActivityLog(tmp_path / "activity_log.txt"))
    output = io.StringIO()
    console = Console(file=output, width=400, force_terminal=False, color_system=None)
    app = ConsoleApp(service, console, read_line=ScriptedInput(lines), pause_after_action=False)
    return app, service, output


def test_add_then_exit(tmp_path: Path) -> None:
    app, service, output = make_app(tmp_path, ["1", "Fix bug", "Alice", "2", "3", "7"])

    app.run()

    (task,) = service.list_tasks()
    assert task.title == "Fix bug"
    assert "Task 1 created!" in output.getvalue()
    assert (tmp_path / "tasks.json").exists()
    assert (tmp_path / "activity_log.txt").read_text(encoding="utf-8").rstrip().endswith(
        "Added Task 1"
    )


def test_list_flags_overdue_tasks(tmp_path: Path) -> None:
    app, service, output = make_app(tmp_path, ["2", "7"])
    service.create_task("Late report", "Bob", 1, -2)
    service.create_task("Future plan", "Carol", 0, 5)
    done = service.create_task("Old but done", "Dana", 0, -5)
    service.update_status(done.id, TaskStatus.DONE)

    app.run()

    lines = output.getvalue().splitlines()
    assert any("Late report" in line and "OVERDUE" in line for line in lines)
    assert not any("Future plan" in line and "OVERDUE" in line for line in lines)
    assert not any("Old but done" in line and "OVERDUE" in line for line in lines)


def test_empty_list_message(tmp_path: Path) -> None:
    app, _, output = make_app(tmp_path, ["2", "7"])

    app.run()

    assert "No tasks found." in output.getvalue()


def test_search_lists_matches_only(tmp_path: Path) -> None:
    app, service, output = make_app(tmp_path, ["3", "ALICE", "7"])
    service.create_task("Fix bug", "Alice", 2, 3)
    service.create_task("Write docs", "Bob", 0, 3)

    app.run()

    text = output.getvalue()
    assert "Fix bug" in text
    assert "Write docs" not in text


def test_update_status_flow(tmp_path: Path) -> None:
    app, service, output = make_app(tmp_path, ["4", "1", "1", "7"])
    service.create_task("Fix bug", "Alice", 2, 3)

    app.run()

    assert service.get_task(1).status is TaskStatus.IN_PROGRESS
    assert "| 1   | Fix bug              | High       | ToDo       |" in output.getvalue()
    assert "Current: ToDo" in output.getvalue()
    assert "Status updated!" in output.getvalue()


def test_update_unknown_task_reports_and_continues(tmp_path: Path) -> None:
    app, service, output = make_app(tmp_path, ["4", "42", "4", "abc", "7"])

    app.run()

    text = output.getvalue()
    assert "[ERROR] Task 42 not found." in text
    assert "[ERROR] Invalid task id: 'abc'" in text


def test_update_with_invalid_status_reports_error(tmp_path: Path) -> None:
    app, service, output = make_app(tmp_path, ["4", "1", "9", "7"])
    service.create_task("Fix bug", "Alice")

    app.run()

    assert service.get_task(1).status is TaskStatus.TODO
    assert "[ERROR] Invalid choice '9'" in output.getvalue()


def test_invalid_selection(tmp_path: Path) -> None:
    app, _, output = make_app(tmp_path, ["8", "7"])

    app.run()

    assert "[ERROR] Invalid Selection" in output.getvalue()


def test_sort_options_reorder_and_save(tmp_path: Path) -> None:
    app, service, _ = make_app(tmp_path, ["5", "6", "7"])
    service.create_task("later", "x", 2, 9)
    service.create_task("sooner", "x", 0, 1)

    app.run()

    assert [task.title for task in service.list_tasks()] == ["sooner", "later"]
    reloaded = JsonTaskRepository(tmp_path / "tasks.json").load()
    assert [task.title for task in reloaded] == ["sooner", "later"]


def test_unexpected_error_is_reported_and_loop_continues(tmp_path: Path, monkeypatch) -> None:
    app, service, output = make_app(tmp_path, ["5", "1", "Next", "Bob", "", "", "7"])

    def boom() -> None:
        raise RuntimeError("kaboom")

    monkeypatch.setattr(service, "sort_by_priority", boom)

    app.run()

    assert "[ERROR] Critical Error: kaboom" in output.getvalue()
    assert [task.title for task in service.list_tasks()] == ["Next"]


def test_save_failure_is_reported_but_change_kept(tmp_path: Path) -> None:
    app, service, output = make_app(tmp_path, ["1", "Fix bug", "Alice", "1", "2", "7"])
    (tmp_path / "tasks.json").mkdir()

    app.run()

    assert [task.title for task in service.list_tasks()] == ["Fix bug"]
    assert "kept for this session only" in output.getvalue()


def test_end_of_input_exits_quietly(tmp_path: Path) -> None:
    app, service, _ = make_app(tmp_path, ["1", "Half typed"])

    app.run()

    assert service.list_tasks() == []


def test_default_due_date_is_one_day_ahead(tmp_path: Path) -> None:
    app, service, _ = make_app(tmp_path, ["1", "", "", "", "", "7"])
    before = datetime.now()

    app.run()

    (task,) = service.list_tasks()
    assert task.title == "Untitled"
    assert task.assignee == "Unassigned"
    assert before + timedelta(days=1) <= task.due_date <= datetime.now() + timedelta(days=1)
