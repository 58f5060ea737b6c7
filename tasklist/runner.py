"""Orchestrates one command: load, mutate, then save or render."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tasklist.commands import Command, CommandKind
from tasklist.config import Settings
from tasklist.display import TaskRenderer
from tasklist.exceptions import TasklistError
from tasklist.models import Task
from tasklist.store import TaskStore

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of a single invocation.

    Attributes:
        kind: The command that ran.
        tasks: The task list after the command was applied.
        saved: Whether the task file was rewritten.
    """

    kind: CommandKind
    tasks: list[Task] = field(default_factory=list)
    saved: bool = False


class TaskRunner:
    """Runs commands against a task store.

    Each call to :meth:`run` is an independent transaction: the list is
    loaded fresh, changed, and either written back or rendered. Nothing is
    kept between calls.
    """

    def __init__(self, store: TaskStore, renderer: TaskRenderer) -> None:
        """Initialize runner with a store and a renderer."""
        self._store = store
        self._renderer = renderer

    @classmethod
    def from_settings(cls, settings: Settings) -> TaskRunner:
        return cls(TaskStore.from_settings(settings), TaskRenderer(no_color=settings.no_color))

    def run(self, command: Command) -> RunResult:
        """Execute a command.

        Raises:
            TaskDecodeError: If the task file is malformed (strict mode).
            TaskStoreWriteError: If saving fails or lines were skipped on a
                lenient load (ADD/REMOVE).
            TasklistError: If an ADD command carries no task.
            RenderError: If terminal output fails (LIST).
        """
        tasks = self._store.load()
        handler = getattr(self, f"_handle_{command.kind.value}")
        return handler(command, tasks)

    def _handle_add(self, command: Command, tasks: list[Task]) -> RunResult:
        if command.task is None:
            raise TasklistError("ADD command has no task")
        tasks.append(command.task)
        saved = self._store.save(tasks)
        logger.info("Added task: %s", command.task.title)
        return RunResult(CommandKind.ADD, tasks, saved=saved)

    def _handle_remove(self, command: Command, tasks: list[Task]) -> RunResult:
        index = next((i for i, task in enumerate(tasks) if task.title == command.title), None)
        if index is None:
            logger.warning("Found no task with title: %s", command.title)
            return RunResult(CommandKind.REMOVE, tasks, saved=False)

        del tasks[index]
        saved = self._store.save(tasks)
        logger.info("Removed task: %s", command.title)
        return RunResult(CommandKind.REMOVE, tasks, saved=saved)

    def _handle_list(self, command: Command, tasks: list[Task]) -> RunResult:
        for task in tasks:
            self._renderer.render(task)
        return RunResult(CommandKind.LIST, tasks)


def run(command: Command, settings: Settings | None = None) -> RunResult:
    """Run a command with the given (or default) settings."""
    if settings is None:
        settings = Settings.from_yaml()
    return TaskRunner.from_settings(settings).run(command)
