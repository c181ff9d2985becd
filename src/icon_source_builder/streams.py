"""Single-threaded observable stream used for worker output ports."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Literal, cast

from icon_source_builder.errors import StreamClosedError
from icon_source_builder.types import (
    CompleteListener,
    ErrorListener,
    Listener,
    OutputEvent,
)

logger = logging.getLogger(__name__)

_SignalKind = Literal["next", "error", "complete"]


@dataclass(frozen=True)
class _Observer:
    on_next: Listener
    on_error: ErrorListener | None = None
    on_complete: CompleteListener | None = None


class Subscription:
    """Handle returned by ``OutputStream.subscribe``."""

    def __init__(self, stream: OutputStream, observer: _Observer) -> None:
        self._stream = stream
        self._observer = observer
        self._disposed = False

    @property
    def disposed(self) -> bool:
        """Whether this subscription no longer receives signals."""
        return self._disposed

    def dispose(self) -> None:
        """Stop delivering signals to this subscription's listeners."""
        if self._disposed:
            return
        self._disposed = True
        self._stream._detach(self._observer)


class OutputStream:
    """Ordered event stream with at most one callback running at a time.

    Signals raised from inside a listener are queued and delivered after the
    running callback returns, so delivery order always matches emission order.
    An error signal reaching a subscriber without ``on_error`` is re-raised to
    whoever emitted it. A listener that raises closes the stream, drops any
    queued signals and its exception reaches the emitter unchanged.
    """

    def __init__(self, name: str = "output") -> None:
        self.name = name
        self._observers: list[_Observer] = []
        self._pending: deque[tuple[_SignalKind, object]] = deque()
        self._delivering = False
        self._closed = False
        self._completed = False

    @property
    def closed(self) -> bool:
        """Whether the stream has completed or failed."""
        return self._closed

    def subscribe(
        self,
        on_next: Listener,
        on_error: ErrorListener | None = None,
        on_complete: CompleteListener | None = None,
    ) -> Subscription:
        """Attach listeners for subsequent signals.

        Parameters
        ----------
        on_next : Callable[[object], None]
            Called once per emitted event.
        on_error : Callable[[BaseException], None] | None, default=None
            Called when the stream fails. Without it the error is re-raised.
        on_complete : Callable[[], None] | None, default=None
            Called once when the stream completes.

        Returns
        -------
        Subscription
            Handle that can detach the listeners.
        """
        observer = _Observer(on_next=on_next, on_error=on_error, on_complete=on_complete)
        subscription = Subscription(self, observer)
        if self._closed:
            if self._completed and on_complete is not None:
                on_complete()
            subscription._disposed = True
            return subscription
        self._observers.append(observer)
        return subscription

    def emit(self, value: OutputEvent) -> None:
        """Deliver ``value`` to every subscriber."""
        self._ensure_open()
        self._pending.append(("next", value))
        self._drain()

    def fail(self, error: BaseException) -> None:
        """Close the stream with ``error``."""
        self._ensure_open()
        self._closed = True
        self._pending.append(("error", error))
        self._drain()

    def complete(self) -> None:
        """Close the stream normally."""
        self._ensure_open()
        self._closed = True
        self._completed = True
        self._pending.append(("complete", None))
        self._drain()

    def _ensure_open(self) -> None:
        if self._closed:
            raise StreamClosedError(f"Stream '{self.name}' is already closed.")

    def _detach(self, observer: _Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _drain(self) -> None:
        if self._delivering:
            return
        self._delivering = True
        try:
            while self._pending:
                kind, payload = self._pending.popleft()
                self._dispatch(kind, payload)
        except BaseException:
            self._pending.clear()
            raise
        finally:
            self._delivering = False

    def _dispatch(self, kind: _SignalKind, payload: object) -> None:
        observers = list(self._observers)
        if kind == "next":
            try:
                for observer in observers:
                    observer.on_next(payload)
            except Exception:
                self._closed = True
                self._observers.clear()
                raise
            return

        self._observers.clear()
        if kind == "complete":
            logger.debug("stream '%s' completed", self.name)
            for observer in observers:
                if observer.on_complete is not None:
                    observer.on_complete()
            return

        error = cast(BaseException, payload)
        logger.debug("stream '%s' failed: %s", self.name, error)
        unhandled = False
        for observer in observers:
            if observer.on_error is None:
                unhandled = True
            else:
                observer.on_error(error)
        if unhandled or not observers:
            raise error
