from __future__ import annotations

import logging

from rich.console import Console

from task_tracker.config import SETTINGS
from task_tracker.infra.activity_log import ActivityLog
from task_tracker.infra.logging import setup_logging
from task_tracker.infra.repository import JsonTaskRepository
from task_tracker.services.task_service import TaskService
from task_tracker.ui.console import ConsoleApp

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    logger.info("Using task file %s", SETTINGS.tasks_file)

    repo = JsonTaskRepository(SETTINGS.tasks_file)
    activity_log = ActivityLog(SETTINGS.activity_log_file)
    service = TaskService.from_repository(repo, activity_log)

    app = ConsoleApp(service, Console(), pause_after_action=SETTINGS.pause_after_action)
    app.run()


if __name__ == "__main__":
    main()
