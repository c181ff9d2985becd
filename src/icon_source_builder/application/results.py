"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildResult:
    """Structured build outcome."""

    worker: str
    entry_count: int
    event_count: int
    completed: bool
