"""Shared pytest configuration, marker assignment and module-writing fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

ModuleWriter = Callable[[str, str], Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def write_module(tmp_path: Path) -> ModuleWriter:
    """Write a throwaway Python module under ``tmp_path`` and return its path."""

    def _write(name: str, source: str) -> Path:
        path = tmp_path / f"{name}.py"
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def built_worker_source() -> str:
    """Source of a worker module that emits ``built:<name>`` per entry."""
    return (
        "from icon_source_builder.workers.base import WorkerHandle, emit_all\n"
        "\n"
        "class Builder:\n"
        "    name = 'built'\n"
        "    def worker(self, entries, options):\n"
        "        return WorkerHandle(job=emit_all(f'built:{n}' for n, _ in entries))\n"
        "\n"
        "WORKER = Builder()\n"
    )
