"""Public build API (delegates to application use-cases)."""

from __future__ import annotations

from typing import Iterable
from typing import Mapping
from typing import Optional

from icon_source_builder.application.ports import OutputSink
from icon_source_builder.application.results import BuildResult
from icon_source_builder.application.use_cases import run_build
from icon_source_builder.infrastructure.sinks import ConsoleSink, MemorySink


def build_icon_sources_from_reference(
    icons: str,
    worker_name: str = "echo",
    worker_modules: Optional[Iterable[str]] = None,
    options: Optional[Mapping[str, object]] = None,
    sink: Optional[OutputSink] = None,
) -> BuildResult:
    """Build sources for the icon mapping at ``icons`` and write them to ``sink``.

    ``sink`` defaults to standard output.
    """
    return run_build(
        icons=icons,
        sink=sink or ConsoleSink(),
        worker_name=worker_name,
        worker_modules=worker_modules,
        options=options,
    )


def collect_icon_sources(
    icons: str,
    worker_name: str = "echo",
    worker_modules: Optional[Iterable[str]] = None,
    options: Optional[Mapping[str, object]] = None,
) -> list[str]:
    """Build sources and return the emitted lines instead of printing them."""
    sink = MemorySink()
    run_build(
        icons=icons,
        sink=sink,
        worker_name=worker_name,
        worker_modules=worker_modules,
        options=options,
    )
    return sink.lines
