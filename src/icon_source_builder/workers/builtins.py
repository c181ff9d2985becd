"""Built-in source-builder workers."""

from __future__ import annotations

import html
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from icon_source_builder.errors import PluginError, WorkerError
from icon_source_builder.schemas import PythonModuleWorkerOptions, SvgWorkerOptions
from icon_source_builder.types import IconDefinition, IconEntry
from icon_source_builder.workers.base import WorkerHandle, emit_all

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

_OptionsT = TypeVar("_OptionsT", bound=BaseModel)


def _parse_options(
    schema: type[_OptionsT], worker_name: str, options: Mapping[str, Any]
) -> _OptionsT:
    try:
        return schema.model_validate(dict(options))
    except ValidationError as exc:
        raise PluginError(f"Invalid {worker_name} worker options: {exc}") from exc


class EchoWorker:
    """Emit each icon name unchanged."""

    name = "echo"

    def worker(
        self,
        entries: Sequence[IconEntry],
        options: Mapping[str, Any],
    ) -> WorkerHandle:
        del options
        return WorkerHandle(job=emit_all(name for name, _ in entries))


class SvgWorker:
    """Emit one standalone SVG document per icon.

    Definitions may be a markup string, a mapping with ``contents`` and an
    optional ``attrs`` mapping, or an object exposing the same attributes.
    """

    name = "svg"

    def worker(
        self,
        entries: Sequence[IconEntry],
        options: Mapping[str, Any],
    ) -> WorkerHandle:
        """Validate options and return a handle that renders lazily.

        Raises
        ------
        PluginError
            If worker options are invalid.
        """
        parsed = _parse_options(SvgWorkerOptions, self.name, options)
        return WorkerHandle(job=emit_all(self._render(entries, parsed)))

    def _render(
        self, entries: Sequence[IconEntry], options: SvgWorkerOptions
    ) -> Iterator[str]:
        for name, definition in entries:
            contents, extra_attrs = _split_definition(name, definition)
            attrs = {
                "xmlns": SVG_NAMESPACE,
                "width": str(options.width),
                "height": str(options.height),
                "viewBox": f"0 0 {options.width} {options.height}",
                "fill": "none",
                "stroke": "currentColor",
                "stroke-width": str(options.stroke_width),
                "stroke-linecap": "round",
                "stroke-linejoin": "round",
                "class": f"{options.class_prefix} {options.class_prefix}-{name}",
            }
            attrs.update(extra_attrs)
            attrs.update(options.attrs or {})
            rendered = " ".join(
                f'{key}="{html.escape(value, quote=True)}"' for key, value in attrs.items()
            )
            yield f"<svg {rendered}>{contents}</svg>"


def _split_definition(
    name: str, definition: IconDefinition
) -> tuple[str, dict[str, str]]:
    if isinstance(definition, str):
        return definition, {}
    if isinstance(definition, Mapping):
        contents = definition.get("contents")
        attrs = definition.get("attrs") or {}
    else:
        contents = getattr(definition, "contents", None)
        attrs = getattr(definition, "attrs", None) or {}
    if not isinstance(contents, str):
        raise WorkerError(f"Icon '{name}' has no markup contents.")
    if not isinstance(attrs, Mapping):
        raise WorkerError(f"Icon '{name}' attrs must be a mapping.")
    return contents, {str(key): str(value) for key, value in attrs.items()}


class PythonModuleWorker:
    """Emit the lines of a Python module holding the icons as a dict."""

    name = "python-module"

    def worker(
        self,
        entries: Sequence[IconEntry],
        options: Mapping[str, Any],
    ) -> WorkerHandle:
        parsed = _parse_options(PythonModuleWorkerOptions, self.name, options)
        return WorkerHandle(job=emit_all(self._lines(entries, parsed)))

    def _lines(
        self, entries: Sequence[IconEntry], options: PythonModuleWorkerOptions
    ) -> Iterator[str]:
        if options.docstring:
            yield f'"""{options.docstring}"""'
            yield ""
        yield f"{options.variable} = {{"
        for name, definition in entries:
            yield f"    {name!r}: {definition!r},"
        yield "}"
