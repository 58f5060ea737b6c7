"""
Custom exceptions for tasklist.

Exception hierarchy:
- TasklistError (base)
  - TaskDecodeError
  - TaskStoreWriteError
  - RenderError
  - ConfigurationError

Conditions that only degrade functionality (home directory not found,
missing or unreadable task file) are logged by the store and never raised.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class TasklistError(Exception):
    """
    Base exception for all fatal tasklist errors.

    Attributes:
        message: Human-readable error description
        details: Additional context for debugging
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class TaskDecodeError(TasklistError):
    """A line of the task file does not follow the canonical format."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        details = {"line_number": line_number, "line": line}
        super().__init__(f"Incorrect task syntax on line {line_number}: {reason}", details)
        self.line_number = line_number
        self.line = line
        self.reason = reason


class TaskStoreWriteError(TasklistError):
    """Failed to open, write or flush the task file."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write task file '{path}': {reason}", {"path": str(path)})
        self.path = path
        self.reason = reason


class RenderError(TasklistError):
    """Failed to write task output to the terminal."""

    def __init__(self, reason: str, title: str | None = None) -> None:
        details = {"title": title} if title is not None else None
        super().__init__(f"Failed to render task: {reason}", details)
        self.reason = reason


class ConfigurationError(TasklistError):
    """Invalid or unreadable configuration."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key
