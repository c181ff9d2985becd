"""Worker protocol and the handle returned by worker invocation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from icon_source_builder.errors import IconBuildError, WorkerError
from icon_source_builder.streams import OutputStream
from icon_source_builder.types import IconEntry, OutputEvent

logger = logging.getLogger(__name__)

WorkerOptions = Mapping[str, Any]
WorkerJob = Callable[[OutputStream], Awaitable[None]]


@dataclass(frozen=True)
class WorkerPorts:
    """Streams exposed by a running worker."""

    output: OutputStream = field(default_factory=OutputStream)


@dataclass(frozen=True)
class WorkerHandle:
    """Result of invoking a worker.

    The job does not start until ``run`` is awaited, so listeners subscribed
    right after invocation see every event.
    """

    job: WorkerJob
    ports: WorkerPorts = field(default_factory=WorkerPorts)

    async def run(self) -> None:
        """Drive the worker job and close the output stream when it returns.

        Raises
        ------
        WorkerError
            If the job fails and no subscriber handles the stream error.
        Exception
            Whatever a listener raised while handling an event, unchanged.
        """
        output = self.ports.output
        try:
            await self.job(output)
        except Exception as exc:
            logger.debug("worker job failed: %s", exc)
            if output.closed:
                raise
            error = exc if isinstance(exc, IconBuildError) else WorkerError(str(exc))
            if error is not exc:
                error.__cause__ = exc
            output.fail(error)
            return
        if not output.closed:
            output.complete()


@runtime_checkable
class SourceBuilderWorker(Protocol):
    """Protocol implemented by source-builder workers."""

    name: str

    def worker(
        self,
        entries: Sequence[IconEntry],
        options: WorkerOptions,
    ) -> WorkerHandle:
        """Start building sources for ``entries``.

        Parameters
        ----------
        entries : Sequence[tuple[str, object]]
            Ordered ``(name, definition)`` pairs.
        options : Mapping[str, Any]
            Raw worker options.

        Returns
        -------
        WorkerHandle
            Handle whose ``ports.output`` emits the built sources.
        """


def emit_all(events: Iterable[OutputEvent]) -> WorkerJob:
    """Build a job that emits ``events`` one per event-loop turn."""

    async def _job(output: OutputStream) -> None:
        for event in events:
            output.emit(event)
            await asyncio.sleep(0)

    return _job
