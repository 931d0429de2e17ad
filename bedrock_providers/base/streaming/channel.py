"""Bounded producer/consumer channel for network streams.

A network stream is pulled on a worker thread and its items are handed to the
consumer through a bounded queue. The consumer side is an ordinary generator:
when it is closed early (``break``, ``close()``, garbage collection) the
channel cancels its :class:`CancellationToken`, which stops the producer at
its next hand-off and fires any ``on_cancel`` callbacks registered by the
source (typically closing the underlying HTTP response).

Ordering: items reach the consumer in exactly the order the source produced
them; at most ``capacity`` items are buffered.
"""

from __future__ import annotations

import contextlib
import queue
import threading
from typing import Callable, Generator, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from ..cancellation import CancellationToken, CancelledError

T = TypeVar("T")

DEFAULT_CAPACITY = 16
_PUT_POLL_SECONDS = 0.05

_ITEM = "item"
_ERROR = "error"
_DONE = "done"


class StreamChannel(Generic[T]):
    """Bounded hand-off between one producer thread and one consumer.

    The producer calls :meth:`put` per item and then exactly one of
    :meth:`finish` or :meth:`fail`. The consumer iterates the channel.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, token: Optional[CancellationToken] = None) -> None:
        if capacity < 1:
            raise ValueError("channel capacity must be positive")
        self._queue: "queue.Queue[Tuple[str, object]]" = queue.Queue(maxsize=capacity)
        self.token = token or CancellationToken()
        self.settled = False

    def _offer(self, kind: str, payload: object) -> None:
        while True:
            self.token.raise_if_cancelled()
            try:
                self._queue.put((kind, payload), timeout=_PUT_POLL_SECONDS)
                return
            except queue.Full:
                continue

    def put(self, item: T) -> None:
        """Block until ``item`` is buffered; raise ``CancelledError`` once the consumer left."""
        self._offer(_ITEM, item)

    def finish(self) -> None:
        self._offer(_DONE, None)

    def fail(self, exc: BaseException) -> None:
        self._offer(_ERROR, exc)

    def close(self, reason: str = "consumer closed stream") -> None:
        """Abandon the channel from the consumer side and release the producer."""
        self.token.cancel(reason)
        with contextlib.suppress(queue.Empty):
            while True:
                self._queue.get_nowait()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                kind, payload = self._queue.get(timeout=_PUT_POLL_SECONDS)
            except queue.Empty:
                # Cancelled by a third party while nothing is buffered.
                self.token.raise_if_cancelled()
                continue
            if kind == _ITEM:
                yield payload  # type: ignore[misc]
                continue
            self.settled = True
            if kind == _ERROR:
                raise payload  # type: ignore[misc]
            return


def iterate_in_background(
    source: Callable[[], Iterable[T]],
    *,
    capacity: int = DEFAULT_CAPACITY,
    token: Optional[CancellationToken] = None,
    name: str = "stream-producer",
    on_abandon: Optional[Callable[[], None]] = None,
) -> Generator[T, None, None]:
    """Pull ``source()`` on a worker thread and yield its items lazily.

    Nothing runs until the first ``next()``. Exceptions raised by the source
    are re-raised to the consumer unchanged. If the consumer stops early the
    token is cancelled, ``on_abandon`` is called and the source iterator is
    closed by the worker as it exits.
    """
    channel: StreamChannel[T] = StreamChannel(capacity, token)

    def _produce() -> None:
        try:
            items = iter(source())
            try:
                for item in items:
                    channel.put(item)
            finally:
                close = getattr(items, "close", None)
                if callable(close):
                    close()
        except CancelledError:
            return
        except Exception as exc:
            with contextlib.suppress(CancelledError):
                channel.fail(exc)
            return
        with contextlib.suppress(CancelledError):
            channel.finish()

    worker = threading.Thread(target=_produce, name=name, daemon=True)
    worker.start()
    try:
        yield from channel
    finally:
        if channel.settled:
            worker.join()
        else:
            channel.close()
            if on_abandon is not None:
                on_abandon()


__all__ = ["StreamChannel", "iterate_in_background", "DEFAULT_CAPACITY"]
