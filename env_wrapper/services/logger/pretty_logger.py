from __future__ import annotations

import sys
from typing import Any, TextIO

from env_wrapper.services.logger.interface import LoggingInterface

_STYLES = {
    "DEBUG": "\033[2m",   # dim
    "INFO": "\033[32m",   # green
    "WARN": "\033[33m",   # yellow
}
_RESET = "\033[0m"


class PrettyLogger(LoggingInterface):
    """One line per event on stderr: ``env_wrapper WARN  msg key=value ...``.

    Levels are colored only when the stream is a terminal.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def debug(self, msg: str, **ctx: Any) -> None:
        self._emit("DEBUG", msg, ctx)

    def info(self, msg: str, **ctx: Any) -> None:
        self._emit("INFO", msg, ctx)

    def warn(self, msg: str, **ctx: Any) -> None:
        self._emit("WARN", msg, ctx)

    def _emit(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        stream = self._stream or sys.stderr
        label = f"{level:<5}"
        if stream.isatty():
            label = f"{_STYLES[level]}{label}{_RESET}"
        fields = "".join(f" {key}={value}" for key, value in ctx.items())
        stream.write(f"env_wrapper {label} {msg}{fields}\n")
