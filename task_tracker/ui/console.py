from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from rich.console import Console
from rich.text import Text

from task_tracker.domain.entities import TaskEntity
from task_tracker.domain.errors import PersistenceError, TaskNotFoundError, TaskTrackerError
from task_tracker.domain.parsing import parse_task_id
from task_tracker.services.task_service import TaskService

from . import widgets

logger = logging.getLogger(__name__)

EXIT_CHOICE = "7"


class ConsoleApp:
    """Numbered menu loop over a TaskService.

    Nothing raised by a menu action ends the loop; only the Exit option,
    end of input or Ctrl+C do.
    """

    def __init__(
        self,
        service: TaskService,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
        pause_after_action: bool = True,
    ) -> None:
        self._service = service
        self._console = console or Console()
        self._read_line = read_line or self._console.input
        self._pause_after_action = pause_after_action
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_task,
            "2": self.list_tasks,
            "3": self.search_tasks,
            "4": self.update_task_status,
            "5": self.sort_by_priority,
            "6": self.sort_by_due_date,
        }

    def run(self) -> None:
        logger.info("Console session started with %d tasks", len(self._service.list_tasks()))
        try:
            while self.run_once():
                pass
        except (EOFError, KeyboardInterrupt):
            self._console.print()
        logger.info("Console session finished")

    def run_once(self) -> bool:
        self._console.clear()
        self._console.print(widgets.main_menu())
        choice = self._ask("Select Option").strip()
        if choice == EXIT_CHOICE:
            return False

        action = self._actions.get(choice)
        if action is None:
            self._error("Invalid Selection")
            return True

        try:
            action()
        except PersistenceError as exc:
            self._error(f"{exc}. The change is kept for this session only.")
        except TaskTrackerError as exc:
            self._error(str(exc))
        except (EOFError, KeyboardInterrupt):
            raise
        except Exception as exc:  # noqa: BLE001
            logger.exception("Menu action %s failed", choice)
            self._error(f"Critical Error: {exc}")
        return True

    def add_task(self) -> None:
        self._header("Add New Task")
        title = self._ask("Enter Title")
        assignee = self._ask("Enter Assignee")
        priority = self._ask(widgets.PRIORITY_PROMPT)
        days = self._ask("Days until due")

        task = self._service.create_task(title, assignee, priority, days)
        self._success(f"Task {task.id} created!")

    def list_tasks(self, tasks: Sequence[TaskEntity] | None = None, title: str = "Task List") -> None:
        tasks = self._service.list_tasks() if tasks is None else tasks
        self._header(title)
        if not tasks:
            self._console.print("No tasks found.")
        else:
            self._console.print(widgets.task_table(tasks))
        self._pause("Press Enter to return to menu...")

    def search_tasks(self) -> None:
        self._header("Search")
        keyword = self._ask("Keyword")
        self.list_tasks(self._service.search(keyword), title="Search Results")

    def update_task_status(self) -> None:
        self._header("Update Status")
        raw_id = self._ask("Enter Task ID")
        task_id = parse_task_id(raw_id)
        if task_id is None:
            self._error(f"Invalid task id: {raw_id!r}")
            return

        task = self._service.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        self._console.print(Text(task.describe()))
        self._console.print(f"Current: {task.status.label}")
        raw_status = self._ask(widgets.STATUS_PROMPT)
        self._service.update_status(task_id, raw_status)
        self._success("Status updated!")

    def sort_by_priority(self) -> None:
        self._service.sort_by_priority()
        self._success("Sorted by Priority.")
        self.list_tasks()

    def sort_by_due_date(self) -> None:
        self._service.sort_by_due_date()
        self._success("Sorted by Due Date.")
        self.list_tasks()

    def _ask(self, label: str) -> str:
        return self._read_line(f"{label}: ")

    def _header(self, title: str) -> None:
        self._console.clear()
        self._console.print(widgets.header(title))

    def _success(self, message: str) -> None:
        self._console.print(widgets.success(message))
        self._pause()

    def _error(self, message: str) -> None:
        self._console.print(widgets.error(message))
        self._pause()

    def _pause(self, message: str = "Press Enter to continue...") -> None:
        if not self._pause_after_action:
            return
        self._read_line(f"{message}\n")
