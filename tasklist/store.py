"""Plain-text file store for task persistence."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from tasklist.config import Settings
from tasklist.exceptions import TaskDecodeError, TaskStoreWriteError
from tasklist.models import Task, encode_tasks, split_lines

logger = logging.getLogger(__name__)


class TaskStore:
    """Reads and writes the task file.

    The whole list is loaded at the start of an invocation and the whole file
    is replaced on save. Failures that only mean "no tasks available" are
    logged and turned into an empty list; write failures are raised.

    No file locking is done: two processes saving at once means the last
    writer wins.
    """

    def __init__(self, path: Path | None, strict: bool = True) -> None:
        """Initialize store with the task file path.

        Args:
            path: Task file location, or None if the home directory is unknown.
            strict: Raise on the first malformed line instead of skipping it.
        """
        self._path = path
        self._strict = strict
        self._skipped = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> TaskStore:
        """Build a store for the file named by the settings."""
        return cls(settings.task_file_path(), strict=settings.strict)

    @property
    def path(self) -> Path | None:
        return self._path

    def _read_text(self) -> str | None:
        """Read the raw file, creating it if missing. Returns None when unavailable."""
        if self._path is None:
            logger.error("Failed to find home directory")
            return None

        try:
            return self._path.read_bytes().decode("utf-8")
        except FileNotFoundError:
            try:
                self._path.touch()
                logger.info("Created empty task file at %s", self._path)
            except OSError as e:
                logger.error("Failed to create task file %s: %s", self._path, e)
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read task file %s: %s", self._path, e)
            return None

    def load(self) -> list[Task]:
        """Load every task in file order.

        Lines are split on line feeds only; a carriage return is kept unless it ends
        the line. In lenient mode, skipped lines block the next save.

        Raises:
            TaskDecodeError: In strict mode, on the first malformed line.
        """
        self._skipped = 0
        text = self._read_text()
        if not text:
            return []

        tasks: list[Task] = []
        for number, line in enumerate(split_lines(text), start=1):
            try:
                tasks.append(Task.decode(line, number))
            except TaskDecodeError as e:
                if self._strict:
                    raise
                self._skipped += 1
                logger.warning("Skipping %s", e.message)

        logger.debug("Loaded %d task(s) from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> bool:
        """Replace the file contents with the given tasks, in order.

        The file must already exist (load() creates it). Returns False if the
        home directory is unknown and nothing was written.

        Raises:
            TaskStoreWriteError: If the file cannot be opened, written or flushed,
                or if the last load skipped malformed lines that a rewrite would drop.
        """
        if self._path is None:
            logger.error("Failed to find home directory; tasks were not saved")
            return False

        if self._skipped:
            raise TaskStoreWriteError(
                self._path,
                f"{self._skipped} malformed line(s) were skipped on load; "
                "fix them before changing the list",
            )

        data = encode_tasks(list(tasks))
        try:
            fd = os.open(self._path, os.O_WRONLY | os.O_TRUNC)
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as fp:
                fp.write(data)
                fp.flush()
        except OSError as e:
            raise TaskStoreWriteError(self._path, e.strerror or str(e)) from e

        logger.debug("Saved %d task(s) to %s", len(tasks), self._path)
        return True
