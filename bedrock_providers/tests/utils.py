"""Shared doubles and frame builders for the adapter tests.

Exports:
    - ``CREDENTIALS_TEXT``: profile store with ``default`` then ``bedrock``
    - ``delta_frame`` / ``event_frame`` / ``HELLO_FRAMES``: stream frames
    - ``FakeFrames`` / ``FakeTransport``: in-memory transport
"""

from __future__ import annotations

import json
import threading
from typing import Iterable, Iterator, List, Optional

from bedrock_providers.bedrock.transport import TransportRequest

CREDENTIALS_TEXT = """\
[default]
aws_access_key_id = DEFAULTKEY
aws_secret_access_key = defaultsecret

[bedrock]
aws_access_key_id = BEDROCKKEY
aws_secret_access_key = bedrocksecret
aws_session_token = tok/en==
"""


def delta_frame(text: str) -> bytes:
    """Encode a ``content_block_delta`` stream event."""
    return json.dumps(
        {"type": "content_block_delta", "index": 0, "delta": {"type": "text_delta", "text": text}}
    ).encode("utf-8")


def event_frame(kind: str) -> bytes:
    """Encode a stream event that carries no text."""
    return json.dumps({"type": kind}).encode("utf-8")


HELLO_FRAMES = [
    event_frame("message_start"),
    delta_frame("Hel"),
    delta_frame("lo"),
    event_frame("message_stop"),
]


class FakeFrames:
    """Frame iterator with an observable ``close``.

    ``endless`` keeps yielding ``frames[0]`` until closed, standing in for a
    long generation the consumer walks away from.
    """

    def __init__(
        self,
        frames: Iterable[bytes],
        *,
        error: Optional[BaseException] = None,
        endless: bool = False,
    ) -> None:
        self._frames = list(frames)
        self._error = error
        self._endless = endless
        self.closed = threading.Event()
        self.close_calls = 0

    def __iter__(self) -> Iterator[bytes]:
        if self._endless:
            while not self.closed.is_set():
                yield self._frames[0]
            return
        yield from self._frames
        if self._error is not None:
            raise self._error

    def close(self) -> None:
        self.close_calls += 1
        self.closed.set()


class FakeTransport:
    """Transport double; ``send`` returns a fresh :class:`FakeFrames` per call."""

    def __init__(
        self,
        frames: Iterable[bytes] = HELLO_FRAMES,
        *,
        error: Optional[BaseException] = None,
        send_error: Optional[BaseException] = None,
        endless: bool = False,
    ) -> None:
        self.frames = list(frames)
        self.error = error
        self.send_error = send_error
        self.endless = endless
        self.requests: List[TransportRequest] = []
        self.streams: List[FakeFrames] = []

    def send(self, request: TransportRequest) -> FakeFrames:
        self.requests.append(request)
        if self.send_error is not None:
            raise self.send_error
        stream = FakeFrames(self.frames, error=self.error, endless=self.endless)
        self.streams.append(stream)
        return stream

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].body.decode("utf-8"))
