"""Source-builder worker interfaces and registry."""

from .base import SourceBuilderWorker, WorkerHandle, WorkerPorts
from .registry import WorkerRegistry, create_default_registry

__all__ = [
    "SourceBuilderWorker",
    "WorkerHandle",
    "WorkerPorts",
    "WorkerRegistry",
    "create_default_registry",
]
