from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ActivityLog:
    """Append-only audit trail of mutating actions, one line per action."""

    def __init__(self, path: Path | str, clock: Callable[[], datetime] = datetime.now) -> None:
        self._path = Path(path)
        self._clock = clock

    def write(self, message: str) -> None:
        entry = f"{self._clock().strftime(TIMESTAMP_FORMAT)}: {message}\n"
        try:
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(entry)
        except OSError:
            logger.debug("Activity log write to %s failed", self._path, exc_info=True)
