#!/usr/bin/env python3
"""
icon_source_builder.cli.cli

Typer-based CLI that feeds an icon metadata mapping to a source-builder worker
and prints every event the worker emits, one per line.

Examples
--------
Print the icon names of a mapping:

    icon-source-builder build my_icons:icons

Render SVG documents with a wider stroke:

    icon-source-builder build my_icons.py:ICONS --worker svg --option stroke_width=1.5

Use a third-party worker:

    icon-source-builder build my_icons --worker-module acme_workers --worker react
"""

from __future__ import annotations

import logging
import traceback

import typer

from icon_source_builder.errors import IconBuildError

app = typer.Typer(
    name="icon-source-builder",
    help="Build sources from an icon metadata mapping with a pluggable worker.",
    no_args_is_help=True,
)

LOG_LEVEL_ENV = "ICON_SOURCE_BUILDER_LOG_LEVEL"
WORKER_MODULE_HELP = "Worker module import path or file path (repeatable)."


def _print_build_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly build error.

    Parameters
    ----------
    exc : Exception
        Exception raised during the build.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _coerce_option_value(raw: str) -> object:
    """Best-effort coercion for CLI key/value options."""
    lowered = raw.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    try:
        if "." in raw:
            return float(raw)
        return int(raw)
    except ValueError:
        return raw


def _parse_worker_options(option_items: list[str] | None) -> dict[str, object]:
    """Parse repeatable KEY=VALUE options for the selected worker."""
    parsed: dict[str, object] = {}
    for item in option_items or []:
        if "=" not in item:
            raise typer.BadParameter(
                f"Invalid option entry '{item}'. Use KEY=VALUE format."
            )
        key, raw_value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter("Option key cannot be empty.")
        parsed[key] = _coerce_option_value(raw_value)
    return parsed


def _configure_logging(level: str) -> None:
    """Route log records to stderr at ``level``."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level '{level}'.")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar=LOG_LEVEL_ENV,
        help=f"Logging level for stderr diagnostics (env: {LOG_LEVEL_ENV}).",
    ),
) -> None:
    """Initialize shared CLI state."""
    _configure_logging(log_level)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("build")
def build_cmd(
    ctx: typer.Context,
    icons: str = typer.Argument(
        ...,
        help="Icon mapping reference: package.module:attribute or file.py:attribute.",
    ),
    worker: str = typer.Option("echo", "--worker", help="Registered worker name."),
    worker_module: list[str] | None = typer.Option(
        None, "--worker-module", help=WORKER_MODULE_HELP
    ),
    option: list[str] | None = typer.Option(
        None,
        "--option",
        help="Worker option KEY=VALUE (repeatable).",
    ),
) -> None:
    """Feed every icon entry to WORKER and print each emitted event.

    Notes
    -----
    - Output goes to stdout, one line per event. Diagnostics go to stderr.
    - Any failure prints a one-line error and exits non-zero.
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    option_payload = _parse_worker_options(option)

    try:
        from icon_source_builder.api import build_icon_sources_from_reference

        build_icon_sources_from_reference(
            icons=icons,
            worker_name=worker,
            worker_modules=worker_module,
            options=option_payload,
        )
    except Exception as exc:
        raise typer.Exit(code=_print_build_error(exc, debug))


@app.command("workers")
def workers_cmd(
    ctx: typer.Context,
    worker_module: list[str] | None = typer.Option(
        None, "--worker-module", help=WORKER_MODULE_HELP
    ),
) -> None:
    """List registered worker names."""
    debug: bool = bool(ctx.obj.get("debug", False))
    try:
        from icon_source_builder.workers.registry import create_default_registry

        registry = create_default_registry(extra_modules=worker_module)
    except IconBuildError as exc:
        raise typer.Exit(code=_print_build_error(exc, debug))
    for name in registry.names():
        typer.echo(name)


def main() -> None:
    """Console-script entrypoint."""
    app()


if __name__ == "__main__":
    main()
