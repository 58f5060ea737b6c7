"""Validated user intents consumed by the runner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tasklist.models import Task, Urgency


class CommandKind(Enum):
    """What the runner should do."""

    ADD = "add"
    REMOVE = "remove"
    LIST = "list"


@dataclass(frozen=True)
class Command:
    """A fully validated command.

    Build instances through :meth:`add`, :meth:`remove` or :meth:`list`
    rather than the constructor.

    Attributes:
        kind: Which operation to run.
        task: The task to append (ADD only).
        title: The title to remove (REMOVE only).
    """

    kind: CommandKind
    task: Optional[Task] = None
    title: Optional[str] = None

    @classmethod
    def add(cls, title: str, content: str, urgency: str) -> Optional[Command]:
        """Build an ADD command, or None if the urgency token is not recognised.

        Accepted tokens are "l", "low", "m", "medium", "h" and "high".
        """
        level = Urgency.from_token(urgency)
        if level is None:
            return None
        return cls(CommandKind.ADD, task=Task(title=title, content=content, urgency=level))

    @classmethod
    def remove(cls, title: str) -> Command:
        """Build a REMOVE command. Whether the title exists is checked at run time."""
        return cls(CommandKind.REMOVE, title=title)

    @classmethod
    def list(cls) -> Command:
        """Build a LIST command."""
        return cls(CommandKind.LIST)
