"""Application use-cases orchestrating icon source builds."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping

from pydantic import ValidationError

from icon_source_builder.application.ports import IconSourceLoader, OutputSink
from icon_source_builder.application.results import BuildResult
from icon_source_builder.errors import IconBuildError, PluginError, WorkerError
from icon_source_builder.schemas import BuildConfig
from icon_source_builder.sources import load_icon_source
from icon_source_builder.types import IconEntry, IconMapping, OutputEvent
from icon_source_builder.workers.base import SourceBuilderWorker, WorkerHandle
from icon_source_builder.workers.registry import WorkerRegistry, create_default_registry

logger = logging.getLogger(__name__)


def enumerate_entries(icons: IconMapping) -> list[IconEntry]:
    """Pair every icon name with its definition, in mapping order."""
    return [(name, icons[name]) for name in icons]


def invoke_worker(
    worker: SourceBuilderWorker,
    entries: list[IconEntry],
    options: Mapping[str, object] | None = None,
) -> WorkerHandle:
    """Hand all entries to ``worker`` in one call.

    Raises
    ------
    WorkerError
        If the worker raises a non-build error while starting.
    """
    try:
        return worker.worker(entries, dict(options or {}))
    except IconBuildError:
        raise
    except Exception as exc:
        raise WorkerError(f"Worker '{worker.name}' failed to start: {exc}") from exc


async def build_icon_sources_async(
    *,
    icons: IconMapping,
    worker: SourceBuilderWorker,
    sink: OutputSink,
    options: Mapping[str, object] | None = None,
) -> BuildResult:
    """Use-case: feed icon entries to a worker and write its output to ``sink``.

    Only an ``on_next`` listener is attached. A stream error therefore
    propagates out of this coroutine.
    """
    entries = enumerate_entries(icons)
    logger.debug("invoking worker '%s' with %d entries", worker.name, len(entries))
    handle = invoke_worker(worker, entries, options)

    written = 0

    def _write(event: OutputEvent) -> None:
        nonlocal written
        sink.write(str(event))
        written += 1

    handle.ports.output.subscribe(_write)
    await handle.run()
    logger.debug("worker '%s' finished after %d events", worker.name, written)
    return BuildResult(
        worker=worker.name,
        entry_count=len(entries),
        event_count=written,
        completed=handle.ports.output.closed,
    )


def build_icon_sources(
    *,
    icons: IconMapping,
    worker: SourceBuilderWorker,
    sink: OutputSink,
    options: Mapping[str, object] | None = None,
) -> BuildResult:
    """Run ``build_icon_sources_async`` on a fresh event loop."""
    return asyncio.run(
        build_icon_sources_async(icons=icons, worker=worker, sink=sink, options=options)
    )


def run_build(
    *,
    icons: str,
    sink: OutputSink,
    worker_name: str = "echo",
    worker_modules: Iterable[str] | None = None,
    options: Mapping[str, object] | None = None,
    loader: IconSourceLoader | None = None,
    registry: WorkerRegistry | None = None,
) -> BuildResult:
    """Use-case: resolve icon source and worker, then build."""
    try:
        config = BuildConfig(
            icons=icons,
            worker_name=worker_name,
            worker_modules=list(worker_modules or []),
            options=dict(options or {}),
        )
    except ValidationError as exc:
        raise PluginError(f"Invalid build parameters: {exc}") from exc

    loader = loader or load_icon_source
    if registry is None:
        registry = create_default_registry(extra_modules=config.worker_modules)
    else:
        for module in config.worker_modules:
            registry.load_module(module)

    icon_map = loader(config.icons)
    worker = registry.get(config.worker_name)
    return build_icon_sources(
        icons=icon_map,
        worker=worker,
        sink=sink,
        options=config.options,
    )
