"""Cooperative cancellation token.

A token is shared between the party that may cancel (usually the consumer of
a stream) and the code doing the work, which polls it between steps. Tokens
can be chained: cancelling a parent cancels every child linked to it.
"""

from __future__ import annotations

from threading import Event, Lock
from typing import Callable, List, Optional

from .cancelled_error import CancelledError
from .state import State


class CancellationToken:
    """Thread-safe cooperative cancellation flag with parent cascading."""

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._event = Event()
        self._children: List[CancellationToken] = []
        self._callbacks: List[Callable[[Optional[str]], None]] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:
        return self._state.cancelled

    @property
    def reason(self) -> str | None:
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation; later calls are no-ops.

        Registered callbacks run once, outside the lock, then children are
        cancelled with the same reason.
        """
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            children = list(self._children)
            callbacks = list(self._callbacks)
            self._callbacks.clear()
        self._event.set()
        for callback in callbacks:
            callback(reason)
        for child in children:
            child.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link ``token`` so it is cancelled with this one (returns ``token``)."""
        with self._lock:
            self._children.append(token)
            already = self._state.cancelled
            reason = self._state.reason
        if already:
            token.cancel(reason)
        return token

    def unlink_child(self, token: "CancellationToken") -> None:
        """Stop cascading to ``token``; a no-op if it is not linked."""
        with self._lock:
            if token in self._children:
                self._children.remove(token)

    def child(self) -> "CancellationToken":
        return CancellationToken(parent=self)

    def on_cancel(self, callback: Callable[[Optional[str]], None]) -> None:
        """Run ``callback(reason)`` on cancellation, immediately if already cancelled."""
        with self._lock:
            if not self._state.cancelled:
                self._callbacks.append(callback)
                return
            reason = self._state.reason
        callback(reason)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or ``timeout`` elapses; return the flag."""
        return self._event.wait(timeout)

    def raise_if_cancelled(self) -> None:
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken"]
