#!/usr/bin/env python3
"""Example worker that emits one React component module per icon.

Usage::

    icon-source-builder build examples/feather_subset.py:icons \
        --worker-module examples/react_worker.py --worker react
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from icon_source_builder.errors import WorkerError
from icon_source_builder.workers.base import WorkerHandle, emit_all


def _component_name(icon_name: str) -> str:
    return "".join(part.capitalize() for part in icon_name.split("-")) + "Icon"


class ReactWorker:
    """Render icons as React function components."""

    name = "react"

    def worker(
        self,
        entries: Sequence[tuple[str, object]],
        options: Mapping[str, object],
    ) -> WorkerHandle:
        del options
        return WorkerHandle(job=emit_all(self._components(entries)))

    def _components(self, entries: Sequence[tuple[str, object]]) -> Iterator[str]:
        for name, definition in entries:
            contents = (
                definition.get("contents") if isinstance(definition, Mapping) else definition
            )
            if not isinstance(contents, str):
                raise WorkerError(f"Icon '{name}' has no markup contents.")
            yield (
                f"export const {_component_name(name)} = (props) => ("
                f'<svg viewBox="0 0 24 24" {{...props}}>{contents}</svg>);'
            )


WORKER = ReactWorker()
