"""Test fixtures and configuration."""

import io
import logging
from pathlib import Path

import pytest
from rich.console import Console

from tasklist.config import Settings
from tasklist.display import TaskRenderer
from tasklist.models import Task, Urgency
from tasklist.runner import TaskRunner
from tasklist.store import TaskStore

ENV_VARS = [
    "TASKLIST_HOME_DIR",
    "TASKLIST_FILE_NAME",
    "TASKLIST_LOG_LEVEL",
    "TASKLIST_LOG_FILE",
    "TASKLIST_STRICT",
    "TASKLIST_NO_COLOR",
    "NO_COLOR",
    "FORCE_COLOR",
    "TTY_COMPATIBLE",
    "TTY_INTERACTIVE",
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep the real environment and config file out of every test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TASKLIST_CONFIG", str(tmp_path / "no-such-config.yaml"))
    yield
    # cli.main() reconfigures the package logger; undo so caplog keeps working.
    package_logger = logging.getLogger("tasklist")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Create temporary home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def task_file(home_dir: Path) -> Path:
    """Path of the task file inside the temporary home (not created)."""
    return home_dir / "TODO"


@pytest.fixture
def settings(home_dir: Path) -> Settings:
    """Create test settings pointing at the temporary home."""
    return Settings(home_dir=home_dir)


@pytest.fixture
def store(task_file: Path) -> TaskStore:
    return TaskStore(task_file)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """Console that emits ANSI colors into a string buffer."""
    return Console(
        file=output,
        force_terminal=True,
        color_system="standard",
        width=200,
        highlight=False,
        soft_wrap=True,
    )


@pytest.fixture
def renderer(console: Console) -> TaskRenderer:
    return TaskRenderer(console)


@pytest.fixture
def runner(store: TaskStore, renderer: TaskRenderer) -> TaskRunner:
    return TaskRunner(store, renderer)


# --- Sample Data Fixtures ---


@pytest.fixture
def sample_tasks() -> list[Task]:
    """Tasks from the two-line example file."""
    return [
        Task(title="Buy milk", content="2 liters", urgency=Urgency.LOW),
        Task(title="Pay rent", content="due Friday", urgency=Urgency.HIGH),
    ]


@pytest.fixture
def sample_file(task_file: Path) -> Path:
    """Task file holding two tasks."""
    task_file.write_text("Low|Buy milk: 2 liters\nHigh|Pay rent: due Friday", encoding="utf-8")
    return task_file
