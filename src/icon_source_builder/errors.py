"""Exception hierarchy for icon source builds."""

from __future__ import annotations


class IconBuildError(Exception):
    """Base error for build failures surfaced to callers and the CLI."""

    exit_code: int = 1


class IconSourceError(IconBuildError):
    """Raised when the icon metadata source cannot be resolved."""

    exit_code = 2


class PluginError(IconBuildError):
    """Raised for worker registry and worker module problems."""


class WorkerError(IconBuildError):
    """Raised when a worker fails to start or reports a stream error."""


class StreamClosedError(IconBuildError):
    """Raised when emitting on a stream that already completed or failed."""
