"""Application-layer use-cases and result objects."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from icon_source_builder.application.ports import IconSourceLoader, OutputSink
from icon_source_builder.application.results import BuildResult
from icon_source_builder.types import IconMapping
from icon_source_builder.workers.base import SourceBuilderWorker


def build_icon_sources(
    *,
    icons: IconMapping,
    worker: SourceBuilderWorker,
    sink: OutputSink,
    options: Mapping[str, object] | None = None,
) -> BuildResult:
    """Build icon sources via lazy use-case import."""
    from icon_source_builder.application.use_cases import build_icon_sources as _impl

    return _impl(icons=icons, worker=worker, sink=sink, options=options)


def run_build(
    *,
    icons: str,
    sink: OutputSink,
    worker_name: str = "echo",
    worker_modules: Iterable[str] | None = None,
    options: Mapping[str, object] | None = None,
    loader: IconSourceLoader | None = None,
) -> BuildResult:
    """Resolve source and worker, then build, via lazy use-case import."""
    from icon_source_builder.application.use_cases import run_build as _impl

    return _impl(
        icons=icons,
        sink=sink,
        worker_name=worker_name,
        worker_modules=worker_modules,
        options=options,
        loader=loader,
    )


__all__ = [
    "BuildResult",
    "IconSourceLoader",
    "OutputSink",
    "build_icon_sources",
    "run_build",
]
