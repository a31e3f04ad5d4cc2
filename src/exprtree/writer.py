from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

# Set EXPRTREE_DEBUG=1 to trace every evaluation step.
DEBUG = os.environ.get("EXPRTREE_DEBUG", "") not in ("", "0")

SECTION_WIDTH = 80


class TraceWriter:
    """Prints demo sections and, when debugging, one line per evaluation step.

    Trace lines are indented by how many Binary nodes enclose the step, so a
    trace of a nested tree reads like the tree itself.
    """

    def __init__(self, indent_size: int = 3, debug: bool | None = None) -> None:
        self._indent_size = indent_size
        self._depth = 0
        self._debug = debug

    @property
    def debugging(self) -> bool:
        return DEBUG if self._debug is None else self._debug

    @property
    def depth(self) -> int:
        return self._depth

    @contextmanager
    def nested(self) -> Iterator[None]:
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def trace(self, message: str) -> None:
        if self.debugging:
            print(" " * self._indent_size * self._depth + message)

    def binary_step(self, left_text: str, right_text: str, result: str) -> None:
        self.trace(f"[B({left_text}, {right_text}) => {result}]")

    def iterative_result(self, result: str) -> None:
        self.trace(f"[iterative => {result}]")

    def section(self, title: str) -> None:
        print("-" * SECTION_WIDTH)
        print(title)

    def println(self, message: str) -> None:
        print(message)
