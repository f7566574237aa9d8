# src/todo_keeper/connectors/console_connector.py

from __future__ import annotations

import logging
import random
import sys
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TextIO

from ..cli.commands import add_plain
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import FilterMode, Task
from ..view.projector import empty_message, format_counts, project, summarize

logger = logging.getLogger(__name__)

CONFETTI_GLYPHS = "*+o.~^"


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


class ConsoleRenderer:
    """
    Prints the filtered list.

    Each row shows the full-list number (position + 1); that number is what
    /done and /rm take, whatever the current filter.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def _write(self, line: str) -> None:
        print(line, file=self._out or sys.stdout)

    def __call__(self, tasks: Sequence[Task], mode: FilterMode) -> None:
        rows = project(tasks, mode)
        self._write(f"-- {mode.value} --")
        if not rows:
            self._write(f"  {empty_message(mode)}")
        for position, task in rows:
            box = "[x]" if task.completed else "[ ]"
            self._write(f"  {position + 1:>3}. {box} {task.text}  ({task.priority})")

        active_line, completed_line = format_counts(summarize(tasks))
        self._write(f"  {active_line} | {completed_line}")


class ConsoleConfirm:
    """Blocking y/N question on stdin. EOF or Ctrl+C counts as "no"."""

    def __init__(self, read: Callable[[str], str] = input) -> None:
        self._read = read

    def __call__(self, question: str) -> bool:
        try:
            answer = self._read(f"{question} [y/N] ")
        except (EOFError, KeyboardInterrupt):
            return False
        return answer.strip().lower() in {"y", "yes"}


class ConsoleConfetti:
    """Completion listener: a short burst of confetti characters."""

    def __init__(self, out: TextIO | None = None, *, width: int = 25, rng: random.Random | None = None) -> None:
        self._out = out
        self._width = width
        self._rng = rng or random.Random()

    def __call__(self, task: Task, position: int) -> None:
        burst = "".join(self._rng.choice(CONFETTI_GLYPHS) for _ in range(self._width))
        print(f"{burst}  Done: {task.text}!", file=self._out or sys.stdout)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.task_store))
    _print_ts("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    # Initial paint.
    state.task_store.refresh()

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            if user_input.startswith("/"):
                cmd_response = command_registry.handle(state, user_input, emit=emit)
            else:
                # Plain text is a new task, taken as typed.
                cmd_response = add_plain(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response:
            _print_ts(cmd_response)

    logger.info("Console connector finished.")
