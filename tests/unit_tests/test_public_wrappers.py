"""Unit tests for the top-level convenience wrappers."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

import icon_source_builder
from icon_source_builder import api as api_module
from icon_source_builder.application import build_icon_sources as app_build_icon_sources
from icon_source_builder.application import run_build as app_run_build
from icon_source_builder.infrastructure.sinks import ConsoleSink, MemorySink
from icon_source_builder.workers.builtins import EchoWorker


def test_build_icon_sources_writes_to_given_sink(
    write_module: Callable[[str, str], Path],
) -> None:
    """Send events to an explicit sink and report counts."""
    path = write_module("wrapper_icons", "icons = {'home': 1, 'star': 2}\n")
    sink = MemorySink()

    result = icon_source_builder.build_icon_sources(f"{path}:icons", sink=sink)

    assert sink.lines == ["home", "star"]
    assert (result.entry_count, result.event_count) == (2, 2)


def test_build_icon_sources_defaults_to_console(
    write_module: Callable[[str, str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    """Print to stdout when no sink is given."""
    path = write_module("console_icons", "icons = {'x': 1}\n")
    api_module.build_icon_sources_from_reference(str(path))
    assert capsys.readouterr().out == "x\n"


def test_collect_icon_sources_returns_lines(
    write_module: Callable[[str, str], Path],
) -> None:
    """Return emitted lines instead of printing them."""
    path = write_module("collect_icons", "icons = {'a': '<p/>'}\n")
    lines = icon_source_builder.collect_icon_sources(
        str(path), worker_name="python-module", options={"docstring": None}
    )
    assert lines == ["ICONS = {", "    'a': '<p/>',", "}"]


def test_application_lazy_wrappers_delegate() -> None:
    """Route application-level wrappers to the use-cases."""
    sink = MemorySink()
    result = app_build_icon_sources(icons={"a": 1}, worker=EchoWorker(), sink=sink)
    assert sink.lines == ["a"]
    assert result.worker == "echo"

    other = MemorySink()
    app_run_build(icons="ignored", sink=other, loader=lambda _ref: {"b": 2})
    assert other.lines == ["b"]


def test_console_sink_writes_lines_to_stream(tmp_path: Path) -> None:
    """Write one line per call to the configured stream."""
    target = tmp_path / "out.txt"
    with target.open("w", encoding="utf-8") as handle:
        sink = ConsoleSink(stream=handle)
        sink.write("first")
        sink.write("second")
    assert target.read_text(encoding="utf-8") == "first\nsecond\n"
