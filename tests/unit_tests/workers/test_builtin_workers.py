"""Unit tests for built-in source-builder workers."""

from __future__ import annotations

import asyncio
import types

import pytest

from icon_source_builder.errors import PluginError, WorkerError
from icon_source_builder.workers.base import WorkerHandle
from icon_source_builder.workers.builtins import EchoWorker, PythonModuleWorker, SvgWorker


def _collect(handle: WorkerHandle) -> list[object]:
    seen: list[object] = []
    handle.ports.output.subscribe(seen.append)
    asyncio.run(handle.run())
    return seen


def test_echo_worker_emits_names_in_order() -> None:
    """Emit each icon name once, in entry order."""
    handle = EchoWorker().worker([("b", 1), ("a", 2)], {})
    assert _collect(handle) == ["b", "a"]
    assert handle.ports.output.closed


def test_handle_does_not_emit_before_run() -> None:
    """Start emitting only when the handle is run."""
    handle = EchoWorker().worker([("a", 1)], {})
    seen: list[object] = []
    handle.ports.output.subscribe(seen.append)
    assert seen == []


def test_svg_worker_wraps_string_definition_with_defaults() -> None:
    """Render a Feather-style SVG document around markup contents."""
    [svg] = _collect(SvgWorker().worker([("home", "<path/>")], {}))

    assert svg == (
        '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" '
        'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
        'stroke-linecap="round" stroke-linejoin="round" '
        'class="feather feather-home"><path/></svg>'
    )


def test_svg_worker_accepts_mapping_and_object_definitions() -> None:
    """Read contents and attrs from mappings or attribute-style objects."""
    entries = [
        ("map", {"contents": "<circle/>", "attrs": {"fill": "red"}}),
        ("obj", types.SimpleNamespace(contents="<line/>", attrs=None)),
    ]

    mapped, obj = _collect(SvgWorker().worker(entries, {}))

    assert 'fill="red"' in mapped
    assert 'fill="none"' not in mapped
    assert mapped.endswith("><circle/></svg>")
    assert 'class="feather feather-obj"' in obj
    assert obj.endswith("><line/></svg>")


def test_svg_worker_applies_options_and_escapes_attrs() -> None:
    """Honor size and stroke options and escape attribute values."""
    options = {
        "width": 32,
        "height": 32,
        "stroke_width": 1.5,
        "class_prefix": "icon",
        "attrs": {"data-label": 'say "hi"'},
    }

    [svg] = _collect(SvgWorker().worker([("x", "")], options))

    assert 'width="32"' in svg
    assert 'viewBox="0 0 32 32"' in svg
    assert 'stroke-width="1.5"' in svg
    assert 'class="icon icon-x"' in svg
    assert 'data-label="say &quot;hi&quot;"' in svg


def test_svg_worker_rejects_invalid_options_on_invocation() -> None:
    """Raise PluginError synchronously for bad options."""
    with pytest.raises(PluginError, match="Invalid svg worker options"):
        SvgWorker().worker([("x", "")], {"width": 0})


def test_svg_worker_reports_missing_contents_on_stream() -> None:
    """Fail the output stream when a definition has no markup."""
    handle = SvgWorker().worker([("ok", "<p/>"), ("bad", {"attrs": {}})], {})
    seen: list[object] = []
    handle.ports.output.subscribe(seen.append)

    with pytest.raises(WorkerError, match="Icon 'bad' has no markup contents"):
        asyncio.run(handle.run())

    assert len(seen) == 1


def test_svg_worker_error_can_be_handled_by_subscriber() -> None:
    """Deliver stream errors to on_error instead of raising."""
    handle = SvgWorker().worker([("bad", 42)], {})
    errors: list[BaseException] = []
    handle.ports.output.subscribe(lambda _event: None, on_error=errors.append)

    asyncio.run(handle.run())

    assert len(errors) == 1
    assert isinstance(errors[0], WorkerError)


def test_python_module_worker_emits_importable_source() -> None:
    """Emit lines that evaluate back to the original mapping."""
    icons = {"home": "<path/>", "star": {"contents": "<polygon/>"}}
    handle = PythonModuleWorker().worker(list(icons.items()), {"variable": "FEATHER"})

    lines = _collect(handle)
    namespace: dict[str, object] = {}
    exec("\n".join(str(line) for line in lines), namespace)

    assert lines[0] == '"""Generated icon definitions."""'
    assert lines[2] == "FEATHER = {"
    assert lines[-1] == "}"
    assert namespace["FEATHER"] == icons


def test_python_module_worker_without_docstring_or_entries() -> None:
    """Emit an empty dict literal when there are no entries."""
    handle = PythonModuleWorker().worker([], {"docstring": None})
    assert _collect(handle) == ["ICONS = {", "}"]


def test_python_module_worker_rejects_bad_variable() -> None:
    """Require the variable option to be a Python identifier."""
    with pytest.raises(PluginError, match="Invalid python-module worker options"):
        PythonModuleWorker().worker([], {"variable": "not valid"})
