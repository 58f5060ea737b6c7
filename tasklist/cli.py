"""Command-line interface for tasklist."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from tasklist import __version__
from tasklist.commands import Command
from tasklist.config import Settings
from tasklist.exceptions import ConfigurationError, TasklistError
from tasklist.models import Urgency
from tasklist.runner import TaskRunner
from tasklist.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tasklist",
        description="Keep a to-do list in ~/TODO. Lists tasks when no option is given.",
    )
    parser.add_argument("-a", "--add", metavar="TITLE", help="Add a task with this title")
    parser.add_argument("-c", "--content", help="Task content (required with --add)")
    parser.add_argument(
        "-u", "--urgency",
        help="Task urgency: l/low, m/medium, h/high (required with --add)",
    )
    parser.add_argument("-r", "--remove", metavar="TITLE", help="Remove the task with this title")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--config", type=Path, help="Path to a YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_command(args: argparse.Namespace) -> Optional[Command]:
    """Turn parsed arguments into a command.

    Returns None (after logging why) when the input is invalid, in which
    case the task file must not be touched.
    """
    if args.add is not None and args.remove is not None:
        logger.error("Please don't use --add and --remove at the same time")
        return None

    if args.remove is not None:
        return Command.remove(args.remove)

    if args.add is None:
        return Command.list()

    if args.content is None:
        logger.error("Please provide the task's content (--content)")
        return None
    if args.urgency is None:
        logger.error("Please provide the task's urgency (--urgency)")
        return None

    command = Command.add(args.add, args.content, args.urgency)
    if command is None:
        valid = ", ".join(u.value.lower() for u in Urgency)
        logger.error("Invalid urgency '%s'. Use l, m, h or one of: %s", args.urgency, valid)
        return None

    problem = command.task.encoding_problem()
    if problem:
        logger.error("%s", problem)
        return None
    return command


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Bootstrap logging so config errors are reported; reconfigured below.
    setup_logging(level="DEBUG" if args.verbose else "WARNING")
    try:
        settings = Settings.from_yaml(args.config)
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1

    if args.no_color:
        settings = settings.model_copy(update={"no_color": True})
    try:
        setup_logging(
            level="DEBUG" if args.verbose else settings.log_level,
            log_file=settings.log_file,
        )
    except OSError as e:
        error = ConfigurationError(
            f"Failed to open log file '{settings.log_file}': {e.strerror or e}",
            config_key="log_file",
        )
        logger.error("%s", error)
        return 1

    command = build_command(args)
    if command is None:
        return 0

    try:
        TaskRunner.from_settings(settings).run(command)
    except TasklistError as e:
        logger.error("%s", e)
        logger.debug("Error details: %s", e.to_dict())
        return 1
    return 0
