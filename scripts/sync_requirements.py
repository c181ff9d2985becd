#!/usr/bin/env python3
"""Keep requirements.txt in step with the dependencies in pyproject.toml.

Without arguments the file is rewritten. ``--check`` only compares and exits
non-zero when the two disagree, which is what CI runs.
"""

from __future__ import annotations

import argparse
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SYNC_EXTRAS = ("test",)
REQUIREMENTS = "requirements.txt"


def expected_requirements(root: Path = ROOT) -> list[str]:
    """Return base dependencies plus the synced extras, sorted."""
    pyproject = tomllib.loads((root / "pyproject.toml").read_text(encoding="utf-8"))
    project = pyproject["project"]
    deps = set(project.get("dependencies", []))
    optional = project.get("optional-dependencies", {})
    for extra in SYNC_EXTRAS:
        deps.update(optional.get(extra, []))
    return sorted(dep.strip() for dep in deps if dep.strip())


def actual_requirements(root: Path = ROOT) -> set[str]:
    """Return the requirement lines of requirements.txt, comments removed."""
    path = root / REQUIREMENTS
    if not path.exists():
        return set()
    reqs: set[str] = set()
    for line in path.read_text(encoding="utf-8").splitlines():
        entry = line.split("#", 1)[0].strip()
        if entry:
            reqs.add(entry)
    return reqs


def render_requirements(root: Path = ROOT) -> str:
    """Render requirements.txt contents for ``root``."""
    header = [
        f"# Generated from pyproject.toml (base + extras: {','.join(SYNC_EXTRAS)})",
        "# Do not edit manually; run: python scripts/sync_requirements.py",
        "",
    ]
    return "\n".join(header + expected_requirements(root)) + "\n"


def diff_requirements(root: Path = ROOT) -> list[str]:
    """Describe how requirements.txt drifts from pyproject.toml.

    Returns an empty list when the two agree.
    """
    expected = set(expected_requirements(root))
    actual = actual_requirements(root)
    missing = sorted(expected - actual)
    unexpected = sorted(actual - expected)
    report: list[str] = []
    if missing:
        report.append("Missing from requirements.txt:")
        report.extend(f"- {entry}" for entry in missing)
    if unexpected:
        report.append("Unexpected in requirements.txt:")
        report.extend(f"- {entry}" for entry in unexpected)
    return report


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--check", action="store_true", help="fail instead of rewriting on drift"
    )
    parser.add_argument("--root", type=Path, default=ROOT, help=argparse.SUPPRESS)
    args = parser.parse_args(argv)

    if args.check:
        report = diff_requirements(args.root)
        if report:
            raise SystemExit(
                "\n".join(
                    [
                        "requirements.txt is out of sync with pyproject.toml.",
                        "Run: python scripts/sync_requirements.py",
                        *report,
                    ]
                )
            )
        print("Dependency sync check passed.")
        return

    (args.root / REQUIREMENTS).write_text(render_requirements(args.root), encoding="utf-8")
    print(f"Wrote {len(expected_requirements(args.root))} requirements to {REQUIREMENTS}")


if __name__ == "__main__":
    main()
