"""Bedrock helpers module.

Purpose:
- Hold the streaming flow behind ``BedrockProvider`` so ``client.py`` only
  carries construction, properties and delegation.

Flow of one ``stream_chat`` call:
    read credential store -> parse -> select profile -> translate messages ->
    invoke (one transport call) -> yield one assistant ``Message`` per delta.

Logging and metrics:
- ``stream.start`` when the call begins, then exactly one of ``stream.end``,
  ``stream.error`` or ``stream.cancelled``.
- Counters record the start, every delta and the outcome. Errors are
  classified for logs and counters only; the original exception is re-raised.
"""

from __future__ import annotations

import logging
import time
from typing import Iterator, Optional, Sequence

from ..base.cancellation import CancellationToken, CancelledError
from ..base.errors import classify_exception
from ..base.logging import LogContext, normalized_log_event
from ..base.models import ChatRequest, CompletionOptions, Message
from ..base.streaming import ChatStreamEvent
from ..base.utils.messages import extract_system
from .translator import translate_messages


def _elapsed_ms(t0: float) -> int:
    return int((time.perf_counter() - t0) * 1000)


def stream_chat_impl(
    provider,
    messages: Sequence[Message],
    options: Optional[CompletionOptions],
    token: Optional[CancellationToken] = None,
) -> Iterator[Message]:
    """Streaming implementation used by ``BedrockProvider.stream_chat``.

    Parameters:
        provider: The adapter, exposing ``_logger``, ``_counters``,
            ``_invoker``, ``resolve_options``, ``resolve_credentials`` and
            ``system_message``.
        messages: Caller-owned conversation; never modified.
        options: Per-call options, merged over the adapter defaults.
        token: Optional caller cancellation token.

    Yields:
        Message: ``role="assistant"`` with one text delta as content.
    """
    opts = provider.resolve_options(options)
    ctx = LogContext(provider=provider.provider_name, model=opts.model, region=opts.region)
    logger = provider._logger
    normalized_log_event(
        logger,
        "stream.start",
        ctx,
        phase="start",
        max_tokens=opts.max_tokens,
        messages=len(messages),
    )
    provider._counters.record_start()
    t0 = time.perf_counter()
    emitted = 0
    deltas = None
    try:
        credentials = provider.resolve_credentials(ctx)
        wire_messages = translate_messages(messages)
        system = provider.system_message or extract_system(messages)
        deltas = provider._invoker.invoke(wire_messages, system, opts, credentials, token=token)
        for delta in deltas:
            emitted += 1
            provider._counters.record_delta()
            yield Message(role="assistant", content=delta)
    except GeneratorExit:
        provider._counters.record_cancelled()
        normalized_log_event(
            logger,
            "stream.cancelled",
            ctx,
            phase="finalize",
            emitted=emitted,
            reason="consumer closed stream",
        )
        raise
    except CancelledError as e:
        provider._counters.record_cancelled()
        normalized_log_event(
            logger,
            "stream.cancelled",
            ctx,
            phase="finalize",
            emitted=emitted,
            reason=str(e),
        )
        raise
    except Exception as e:
        code = classify_exception(e)
        provider._counters.record_failure(code.value)
        normalized_log_event(
            logger,
            "stream.error",
            ctx,
            phase="finalize",
            level=logging.ERROR,
            error_code=code.value,
            emitted=emitted,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise
    else:
        latency_ms = _elapsed_ms(t0)
        provider._counters.record_success(latency_ms)
        normalized_log_event(
            logger,
            "stream.end",
            ctx,
            phase="finalize",
            emitted=emitted,
            latency_ms=latency_ms,
        )
    finally:
        if deltas is not None:
            deltas.close()


def stream_events_impl(provider, request: ChatRequest) -> Iterator[ChatStreamEvent]:
    """Normalized event stream: deltas, then exactly one terminal event.

    Failures do not raise; they become the terminal event's ``error`` as
    ``"<error_code>: <message>"``.
    """
    model = request.options.model or provider.default_model()
    name = provider.provider_name
    messages = provider.stream_chat(request.messages, request.options)
    try:
        for message in messages:
            yield ChatStreamEvent(provider=name, model=model, delta=message.content)
    except Exception as e:
        code = classify_exception(e)
        detail = getattr(e, "message", None) or str(e)
        yield ChatStreamEvent(
            provider=name,
            model=model,
            delta=None,
            finish=True,
            error=f"{code.value}: {detail}",
        )
        return
    finally:
        messages.close()
    yield ChatStreamEvent(provider=name, model=model, delta=None, finish=True)


__all__ = ["stream_chat_impl", "stream_events_impl"]
