"""Timestamped, severity-tagged terminal output."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Callable, TextIO

import typer

from .constants import TIMESTAMP_FORMAT


def supports_color(no_color: bool = False, stream: TextIO | None = None) -> bool:
    """Colour only on an interactive terminal and only when NO_COLOR is unset."""
    if no_color:
        return False
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Console:
    # level tag, colour, goes to stderr
    LEVELS = {
        "info": ("INFO ", typer.colors.CYAN, False),
        "ok": ("OK   ", typer.colors.GREEN, False),
        "warn": ("WARN ", typer.colors.YELLOW, True),
        "error": ("ERROR", typer.colors.RED, True),
    }

    def __init__(
        self,
        color: bool | None = None,
        no_color: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        # color=None decides per stream, at write time
        self.color = color
        self.no_color = no_color
        self._clock = clock

    def _ts(self) -> str:
        return self._clock().strftime(TIMESTAMP_FORMAT)

    def _use_color(self, err: bool) -> bool:
        if self.color is not None:
            return self.color
        return supports_color(self.no_color, sys.stderr if err else sys.stdout)

    def _emit(self, parts: list[tuple[str, dict]], err: bool = False) -> None:
        color = self._use_color(err)
        line = "".join(typer.style(text, **styles) if color and styles else text for text, styles in parts)
        typer.echo(line, err=err, color=color)

    def log(self, message: str) -> None:
        self._emit([(f"[{self._ts()}] {message}", {"dim": True})])

    def _tagged(self, level: str, message: str) -> None:
        tag, fg, err = self.LEVELS[level]
        self._emit(
            [
                (f"[{self._ts()}] ", {"dim": True}),
                (tag, {"fg": fg}),
                (" ", {}),
                (message, {"dim": True}),
            ],
            err=err,
        )

    def info(self, message: str) -> None:
        self._tagged("info", message)

    def ok(self, message: str) -> None:
        self._tagged("ok", message)

    def warn(self, message: str) -> None:
        self._tagged("warn", message)

    def error(self, message: str) -> None:
        self._tagged("error", message)

    def detail(self, text: str) -> None:
        """Echo captured tool output under an error line."""
        for line in text.splitlines():
            self._emit([(f"    {line}", {"dim": True})], err=True)
