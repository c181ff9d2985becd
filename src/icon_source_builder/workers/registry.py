"""Worker registry and discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
import logging
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from icon_source_builder.errors import PluginError
from icon_source_builder.workers.base import SourceBuilderWorker
from icon_source_builder.workers.builtins import EchoWorker, PythonModuleWorker, SvgWorker

logger = logging.getLogger(__name__)


class WorkerRegistry:
    """Registry for source-builder workers."""

    def __init__(self) -> None:
        self._workers: dict[str, SourceBuilderWorker] = {}

    def register(self, worker: SourceBuilderWorker) -> None:
        """Register worker instance by unique name.

        Parameters
        ----------
        worker : SourceBuilderWorker
            Worker instance to register. A later registration with the same
            name replaces the earlier one.

        Raises
        ------
        PluginError
            If worker does not provide a valid name or a ``worker`` callable.
        """
        name = getattr(worker, "name", "")
        if not isinstance(name, str) or not name.strip():
            raise PluginError("Worker must define a non-empty 'name'.")
        if not callable(getattr(worker, "worker", None)):
            raise PluginError(f"Worker '{name}' must define a callable 'worker'.")
        self._workers[name.strip()] = worker

    def names(self) -> list[str]:
        """Return registered worker names, sorted."""
        return sorted(self._workers.keys())

    def get(self, name: str) -> SourceBuilderWorker:
        """Get worker by name.

        Raises
        ------
        PluginError
            If worker name is not registered.
        """
        try:
            return self._workers[name]
        except KeyError as exc:
            raise PluginError(
                f"Unknown worker '{name}'. Available workers: {', '.join(self.names())}"
            ) from exc

    def load_module(self, module_or_path: str) -> None:
        """Load workers from module name or file path.

        .. warning::
            This method executes code from the specified module. Only load
            workers from trusted sources.
        """
        module = import_module_or_path(module_or_path)
        _register_from_module(module, self)
        logger.debug("loaded worker module %s", module_or_path)


def import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    .. warning::
        This function executes arbitrary Python code from the specified module
        or file. Only use it with explicit user intent.

    Parameters
    ----------
    module_or_path : str
        Python module path or local file path.

    Returns
    -------
    ModuleType
        Imported module object.

    Raises
    ------
    PluginError
        If import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.is_file():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise PluginError(f"Unable to load module from {candidate}.")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise PluginError(f"Unable to import module '{module_or_path}': {exc}") from exc


def _register_from_module(module: ModuleType, registry: WorkerRegistry) -> None:
    """Register worker definitions found in module."""
    if hasattr(module, "register_workers"):
        module.register_workers(registry)
        return

    workers_obj = getattr(module, "WORKERS", None)
    if workers_obj is not None:
        for worker in workers_obj:
            registry.register(worker)
        return

    worker_obj = getattr(module, "WORKER", None)
    if worker_obj is not None:
        registry.register(worker_obj)
        return

    raise PluginError(
        "Worker module must expose register_workers(registry), WORKERS, or WORKER."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> WorkerRegistry:
    """Create registry with built-in workers plus any ``extra_modules``."""
    registry = WorkerRegistry()
    registry.register(EchoWorker())
    registry.register(SvgWorker())
    registry.register(PythonModuleWorker())
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
