"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol

from icon_source_builder.types import IconMapping


class IconSourceLoader(Protocol):
    """Resolve an icon metadata mapping from a reference string."""

    def __call__(self, reference: str) -> IconMapping:
        """Return the mapping named by ``reference``."""


class OutputSink(Protocol):
    """Line-oriented destination for worker output events."""

    def write(self, line: str) -> None:
        """Write one line."""
