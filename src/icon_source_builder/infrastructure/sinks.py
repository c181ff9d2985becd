"""Output sink implementations."""

from __future__ import annotations

from typing import TextIO

import typer


class ConsoleSink:
    """Write each line to stdout (or ``stream``) as it arrives."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, line: str) -> None:
        """Echo ``line`` followed by a newline."""
        typer.echo(line, file=self._stream)


class MemorySink:
    """Collect lines in memory, for embedding and tests."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write(self, line: str) -> None:
        """Append ``line``."""
        self.lines.append(line)
