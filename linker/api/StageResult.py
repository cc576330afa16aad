"""Outcome of a linker command run in four stages."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class StageResult:
    """Announce line, progress generator, result line and output payload.

    ``progress_callback`` receives the StageResult itself and fills in
    ``result``, ``output`` and ``success`` while it yields
    ``(fraction, message)`` pairs. Command payloads carry an ``errors`` list.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False

    def succeed(self, result: str, output: dict[str, Any]) -> None:
        self.result = result
        self.output = output
        self.success = True

    def fail(self, result: str, output: dict[str, Any], error: str | None = None) -> None:
        """Record a failed run; error (default: result) is appended to output["errors"]."""
        output.setdefault("errors", []).append(error or result)
        self.result = result
        self.output = output
        self.success = False
