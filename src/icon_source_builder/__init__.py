"""Top-level API for building sources from icon metadata mappings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from icon_source_builder.application.ports import OutputSink
from icon_source_builder.application.results import BuildResult

__version__ = "0.1.0"


def build_icon_sources(
    icons: str,
    worker_name: str = "echo",
    worker_modules: Iterable[str] | None = None,
    options: Mapping[str, object] | None = None,
    sink: OutputSink | None = None,
) -> BuildResult:
    """Feed an icon mapping to a source-builder worker and print its output.

    Parameters
    ----------
    icons : str
        Reference to the icon mapping, ``package.module:attribute`` or
        ``path/to/file.py:attribute``. The attribute defaults to ``icons``.
    worker_name : str, default="echo"
        Registered worker to invoke.
    worker_modules : Iterable[str], optional
        Extra modules (import path or file path) that register workers.
    options : Mapping[str, object], optional
        Raw worker options.
    sink : OutputSink, optional
        Destination for emitted events. Defaults to standard output.

    Returns
    -------
    BuildResult
        Entry and event counts for the run.
    """
    from .api import build_icon_sources_from_reference as _impl

    return _impl(
        icons=icons,
        worker_name=worker_name,
        worker_modules=worker_modules,
        options=options,
        sink=sink,
    )


def collect_icon_sources(
    icons: str,
    worker_name: str = "echo",
    worker_modules: Iterable[str] | None = None,
    options: Mapping[str, object] | None = None,
) -> list[str]:
    """Build sources and return emitted lines.

    Parameters
    ----------
    icons : str
        Reference to the icon mapping.
    worker_name : str, default="echo"
        Registered worker to invoke.

    Returns
    -------
    list[str]
        One string per emitted event, in delivery order.
    """
    from .api import collect_icon_sources as _impl

    return _impl(
        icons=icons,
        worker_name=worker_name,
        worker_modules=worker_modules,
        options=options,
    )


__all__ = [
    "BuildResult",
    "build_icon_sources",
    "collect_icon_sources",
]
