"""tasklist - a personal to-do list kept in a plain text file."""

__version__ = "0.1.0"

from tasklist.commands import Command, CommandKind
from tasklist.models import Task, Urgency
from tasklist.runner import RunResult, TaskRunner, run
from tasklist.store import TaskStore

__all__ = [
    "Command",
    "CommandKind",
    "RunResult",
    "Task",
    "TaskRunner",
    "TaskStore",
    "Urgency",
    "__version__",
    "run",
]
