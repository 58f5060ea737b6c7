"""Task model, urgency levels and the canonical line encoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional

from tasklist.exceptions import TaskDecodeError

URGENCY_SEPARATOR = "|"
TITLE_SEPARATOR = ": "


@total_ordering
class Urgency(Enum):
    """Task urgency levels, ordered Low < Medium < High."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def rank(self) -> int:
        return _URGENCY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_text(cls, value: str) -> Urgency:
        """Parse the canonical text form ("Low", "Medium", "High").

        Matching is case-sensitive.
        """
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(u.value for u in cls)
            raise ValueError(f"Invalid urgency '{value}'. Must be one of: {valid}") from None

    @classmethod
    def from_token(cls, token: str) -> Optional[Urgency]:
        """Parse a user-supplied token such as "h" or "medium".

        Returns None for anything outside the lowercase token table.
        """
        return _URGENCY_TOKENS.get(token)


_URGENCY_RANK = {Urgency.LOW: 0, Urgency.MEDIUM: 1, Urgency.HIGH: 2}

_URGENCY_TOKENS = {
    "l": Urgency.LOW,
    "low": Urgency.LOW,
    "m": Urgency.MEDIUM,
    "medium": Urgency.MEDIUM,
    "h": Urgency.HIGH,
    "high": Urgency.HIGH,
}


@dataclass(frozen=True)
class Task:
    """Immutable task representation.

    Attributes:
        title: Task title, used as the lookup key for removal.
        content: Free-form task body.
        urgency: Task urgency level.
    """

    title: str
    content: str
    urgency: Urgency

    def encode(self) -> str:
        """Return the canonical line form: ``<urgency>|<title>: <content>``."""
        return f"{self.urgency}{URGENCY_SEPARATOR}{self.title}{TITLE_SEPARATOR}{self.content}"

    @classmethod
    def decode(cls, line: str, line_number: int = 0) -> Task:
        """Parse one canonical line.

        Raises:
            TaskDecodeError: If the line does not match the expected structure
                or the urgency is not one of the canonical values.
        """
        urgency_text, sep, rest = line.partition(URGENCY_SEPARATOR)
        if not sep:
            raise TaskDecodeError(line_number, line, f"missing '{URGENCY_SEPARATOR}' separator")

        title, sep, content = rest.partition(TITLE_SEPARATOR)
        if not sep:
            raise TaskDecodeError(line_number, line, f"missing '{TITLE_SEPARATOR}' separator")

        try:
            urgency = Urgency.from_text(urgency_text)
        except ValueError as e:
            raise TaskDecodeError(line_number, line, str(e)) from e

        return cls(title=title, content=content, urgency=urgency)

    def encoding_problem(self) -> Optional[str]:
        """Describe why this task would not survive a save/load cycle.

        The line format has no escaping, so a title holding either separator
        or any field holding a line break would be read back differently.
        Returns None when the task encodes cleanly.
        """
        if not self.title:
            return "Title cannot be empty"
        if URGENCY_SEPARATOR in self.title:
            return f"Title cannot contain '{URGENCY_SEPARATOR}'"
        if TITLE_SEPARATOR in self.title:
            return f"Title cannot contain '{TITLE_SEPARATOR}'"
        if _has_line_break(self.title):
            return "Title cannot contain line breaks"
        if _has_line_break(self.content):
            return "Content cannot contain line breaks"
        return None


def _has_line_break(text: str) -> bool:
    return "\n" in text or "\r" in text


def encode_tasks(tasks: list[Task]) -> str:
    """Encode tasks one per line, joined by newlines without a trailing one."""
    return "\n".join(task.encode() for task in tasks)


def split_lines(text: str) -> list[str]:
    """Split file text into lines.

    A single trailing newline is tolerated and a trailing carriage return is
    stripped from each line. Blank lines in the middle are kept (and later
    rejected by the decoder).
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
