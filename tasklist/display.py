"""Display formatting for task output."""

from __future__ import annotations

from typing import Optional

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

from tasklist.exceptions import RenderError
from tasklist.models import Task, Urgency

URGENCY_COLORS = {
    Urgency.LOW: "green",
    Urgency.MEDIUM: "yellow",
    Urgency.HIGH: "red",
}

LINE_END = "\r\n"


def title_style(urgency: Urgency) -> Style:
    return Style.parse(f"bold {URGENCY_COLORS[urgency]}")


def format_task(task: Task, color_system: Optional[str] = None, no_color: bool = False) -> str:
    """Build the line for a task, without the line ending.

    Only the bracketed title is styled. The content is kept byte for byte,
    tabs and trailing spaces included.

    Args:
        task: Task to format.
        color_system: A rich color system name ("standard", "256", ...).
            None gives plain text.
        no_color: Keep bold but drop the urgency colour.
    """
    title = f"[{task.title}]"
    if color_system is not None:
        style = title_style(task.urgency)
        if no_color:
            style = style.without_color
        title = style.render(title, color_system=COLOR_SYSTEMS[color_system])
    return f"  {title} {task.content}"


class TaskRenderer:
    """Writes tasks to the terminal, one flushed line each."""

    def __init__(self, console: Console | None = None, no_color: bool = False) -> None:
        if console is None:
            console = Console(highlight=False, no_color=no_color, soft_wrap=True)
        self._console = console

    @property
    def console(self) -> Console:
        return self._console

    def render(self, task: Task) -> None:
        """Write one task.

        The console decides the colour system; the line is written to its
        file directly so rich does not expand tabs or strip control
        characters. Lines end with CR LF so output stays aligned under raw
        terminal modes.

        Raises:
            RenderError: If writing to or flushing the terminal fails.
        """
        line = format_task(task, self._console.color_system, self._console.no_color)
        try:
            self._console.file.write(line + LINE_END)
            self._console.file.flush()
        except OSError as e:
            raise RenderError(e.strerror or str(e), title=task.title) from e
