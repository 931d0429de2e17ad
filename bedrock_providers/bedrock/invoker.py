"""Streaming invocation of a Bedrock model.

``StreamingInvoker.invoke`` issues exactly one transport call and returns a
lazy iterator of text deltas. Frames are pulled and decoded on a producer
thread and handed over through a bounded channel; the consumer sees deltas in
frame order and any producer failure re-raised unchanged. When the consumer
stops early the call's token is cancelled and the transport stream is closed.
The call token is a child of the caller's token for the lifetime of the
stream only; a caller token that is already cancelled sends no request.
"""

from __future__ import annotations

from typing import Generator, Iterable, Iterator, Optional, Sequence, Union

from ..base.cancellation import CancellationToken
from ..base.models import CompletionOptions, CredentialProfile
from ..base.streaming import iterate_in_background
from ..config.defaults import STREAM_CHANNEL_CAPACITY
from .stream_helpers import iter_deltas
from .transport import Transport, TransportRequest
from .wire import WireMessage, build_request_body


def _close_frames(frames: Iterable[bytes]) -> None:
    close = getattr(frames, "close", None)
    if callable(close):
        close()


class StreamingInvoker:
    """Runs one streaming call per ``invoke`` against an injected transport."""

    def __init__(self, transport: Transport, capacity: int = STREAM_CHANNEL_CAPACITY) -> None:
        self._transport = transport
        self._capacity = capacity

    @property
    def transport(self) -> Transport:
        return self._transport

    def build_request(
        self,
        messages: Sequence[Union[WireMessage, dict]],
        system: Optional[str],
        options: CompletionOptions,
        credentials: CredentialProfile,
    ) -> TransportRequest:
        if not options.model or not options.region:
            raise ValueError("options.model and options.region must be set before invoking")
        body = build_request_body(messages, system, options).to_json_bytes()
        return TransportRequest(
            model_id=options.model,
            region=options.region,
            body=body,
            credentials=credentials,
        )

    def invoke(
        self,
        messages: Sequence[Union[WireMessage, dict]],
        system: Optional[str],
        options: CompletionOptions,
        credentials: CredentialProfile,
        *,
        token: Optional[CancellationToken] = None,
    ) -> Generator[str, None, None]:
        """Stream the text deltas of one model invocation.

        Parameters:
            messages: Translated conversation (no system turns).
            system: Top-level system instruction, if any.
            options: Fully defaulted options; ``model`` and ``region`` route the call.
            credentials: Selected profile used to sign the request.
            token: Optional caller token; cancelling it stops the stream.

        Returns:
            A lazy generator. The transport is not contacted until the first
            ``next()``.
        """
        request = self.build_request(messages, system, options, credentials)

        def _deltas(call_token: CancellationToken) -> Iterator[str]:
            # No request once the caller has cancelled.
            call_token.raise_if_cancelled()
            frames = self._transport.send(request)
            # Unblocks a producer stuck waiting on the network.
            call_token.on_cancel(lambda _reason: _close_frames(frames))
            try:
                yield from iter_deltas(frames, model=request.model_id)
            finally:
                _close_frames(frames)

        def _stream() -> Generator[str, None, None]:
            call_token = token.child() if token is not None else CancellationToken()
            try:
                yield from iterate_in_background(
                    lambda: _deltas(call_token),
                    capacity=self._capacity,
                    token=call_token,
                    name=f"bedrock-stream-{request.model_id}",
                )
            finally:
                # A reused caller token keeps no link to finished calls.
                if token is not None:
                    token.unlink_child(call_token)

        return _stream()


__all__ = ["StreamingInvoker"]
