"""Streaming event primitives.

Kept apart from the request/response DTOs so streaming concerns do not leak
into the plain data model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from ..models import ChatResponse, ProviderMetadata, TextPart


@dataclass
class ChatStreamEvent:
    """One event of a normalized stream.

    Fields:
      provider: canonical provider name
      model: model id the call was routed to
      delta: text fragment, ``None`` for the terminal event
      finish: True only on the terminal event
      error: ``"<error_code>: <message>"`` when the stream failed
    """

    provider: str
    model: str
    delta: str | None
    finish: bool = False
    error: str | None = None

    def is_error(self) -> bool:
        return self.error is not None


def accumulate_events(events: Iterable[ChatStreamEvent]) -> ChatResponse:
    """Fold a stream of events into a :class:`ChatResponse`.

    Deltas are concatenated in order. An error event turns the result into a
    failed response with ``text=None`` and ``meta.extra["stream_error"]`` set.
    """
    collected: List[ChatStreamEvent] = list(events)
    if not collected:
        meta = ProviderMetadata(provider_name="unknown", model_name="unknown")
        return ChatResponse(text="", parts=None, meta=meta)

    provider = collected[0].provider
    model = collected[0].model
    if failed := next((e for e in collected if e.error), None):
        meta = ProviderMetadata(
            provider_name=provider,
            model_name=model,
            extra={"stream_error": failed.error},
        )
        return ChatResponse(text=None, parts=None, meta=meta)

    text = "".join(e.delta for e in collected if e.delta)
    meta = ProviderMetadata(
        provider_name=provider,
        model_name=model,
        extra={"stream_events": len(collected)},
    )
    parts = [TextPart(text=text)] if text else None
    return ChatResponse(text=text, parts=parts, meta=meta)


__all__ = ["ChatStreamEvent", "accumulate_events"]
