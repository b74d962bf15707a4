"""Diagnostic messages written to stderr while a listing runs.

Recoverable failures (unreadable paths, unopenable directories) are reported
here once each and never abort the run.
"""

from __future__ import annotations

import sys
from typing import TextIO

PROG_NAME = "lr"


class Diagnostics:
    """Writes ``lr: <message>`` lines and remembers what was reported.

    ``stream`` defaults to the current ``sys.stderr`` at report time so tests
    can patch it after construction.
    """

    def __init__(self, stream: TextIO | None = None, prog: str = PROG_NAME) -> None:
        self._stream = stream
        self.prog = prog
        self.messages: list[str] = []

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def report(self, message: str) -> None:
        self.messages.append(message)
        stream = self.stream
        stream.write(f"{self.prog}: {message}\n")
        stream.flush()

    @property
    def count(self) -> int:
        return len(self.messages)


__all__ = [
    "PROG_NAME",
    "Diagnostics",
]
