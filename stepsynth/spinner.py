from __future__ import annotations

import os
import sys
import traceback
from typing import IO

from rich.console import Console
from rich.panel import Panel
from rich.status import Status
from rich.text import Text
from rich.traceback import Traceback

from .logging_utils import get_log_path

_DEBUG_ENV = "STEPSYNTH_DEBUG"


class Spinner:
    """Rich status line shown while a render runs; silent off a terminal."""

    def __init__(
        self,
        message: str,
        *,
        stream: IO[str] | None = None,
        enabled: bool | None = None,
    ) -> None:
        self._message = message
        self._stream = stream or sys.stderr
        self._enabled = self._stream.isatty() if enabled is None else enabled
        self._console = Console(file=self._stream) if self._enabled else None
        self._status: Status | None = None

    def start(self) -> None:
        if self._console is None or self._status is not None:
            return
        self._status = self._console.status(self._message)
        self._status.start()

    def update(self, message: str) -> None:
        self._message = message
        if self._status is not None:
            self._status.update(message)

    def stop(self) -> None:
        if self._status is None:
            return
        self._status.stop()
        self._status = None

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.stop()


def render_error(
    context: str,
    exc: BaseException,
    *,
    stream: IO[str] | None = None,
) -> None:
    target = stream or sys.stderr
    debug = bool(os.environ.get(_DEBUG_ENV))
    log_path = get_log_path()
    if target.isatty():
        console = Console(file=target)
        body = Text.assemble(
            ("stepsynth error while ", "bold"),
            (context, "bold"),
            (":\n\n", "bold"),
            (type(exc).__name__, "bold red"),
            (": ", "bold"),
            str(exc),
            (f"\nLogs: {log_path}", "dim"),
            (f"\n\nSet {_DEBUG_ENV}=1 for console trace.", "dim"),
        )
        console.print(Panel(body, title="Error", border_style="red"))
        if debug:
            console.print(Traceback.from_exception(type(exc), exc, exc.__traceback__))
        return
    target.write(f"{context} failed: {type(exc).__name__}: {exc} (logs: {log_path})\n")
    if debug:
        traceback.print_exception(type(exc), exc, exc.__traceback__, file=target)
