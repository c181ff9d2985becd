#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/icon_source_builder"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    for path in (PACKAGE / "application").glob("*.py"):
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "icon_source_builder.cli",
                "icon_source_builder.infrastructure",
            ],
        )

    for path in (PACKAGE / "workers").glob("*.py"):
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "icon_source_builder.application",
                "icon_source_builder.cli",
            ],
        )

    _assert_no_imports(PACKAGE / "streams.py", ["import asyncio", "import typer"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
