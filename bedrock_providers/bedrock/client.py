"""BedrockProvider adapter.

Streams Anthropic Claude completions from AWS Bedrock Runtime
(``InvokeModelWithResponseStream``) behind the package's provider-agnostic
surface.

Key behaviors / architecture notes:
* Credentials are read from the injected ``CredentialSource`` on every call
  (default: the shared ``~/.aws/credentials`` store) and never cached.
* The system instruction is the configured ``system_message`` when set,
  otherwise the joined system-role messages of the conversation.
* Transport failures propagate unchanged from ``stream_chat`` /
  ``stream_complete``; ``stream_events`` / ``chat`` encode them instead.
* Streaming runs on a producer thread with a bounded channel; closing the
  returned generator releases the network stream.
"""

from __future__ import annotations

import time
from dataclasses import fields
from typing import Iterator, Optional, Sequence

from ..base.cancellation import CancellationToken
from ..base.interfaces import CredentialSource, HasDefaultModel, LLMProvider, SupportsStreaming
from ..base.logging import LogContext, get_logger, log_event
from ..base.metrics import ProviderInvocationCounters
from ..base.models import ChatRequest, ChatResponse, CompletionOptions, CredentialProfile, Message
from ..base.streaming import ChatStreamEvent, accumulate_events
from ..base.utils.messages import strip_images
from ..config import get_provider_config
from ..config.defaults import (
    BEDROCK_DEFAULT_CONTEXT_LENGTH,
    BEDROCK_DEFAULT_MAX_TOKENS,
    BEDROCK_DEFAULT_MODEL,
    BEDROCK_DEFAULT_REGION,
    BEDROCK_ENDPOINT_TEMPLATE,
    STREAM_CHANNEL_CAPACITY,
)
from .credentials import FileCredentialProvider, parse_credentials_file, select_named_profile
from .helpers import stream_chat_impl as _stream_chat_impl
from .helpers import stream_events_impl as _stream_events_impl
from .invoker import StreamingInvoker
from .transport import Boto3Transport, Transport


class BedrockProvider(LLMProvider, SupportsStreaming, HasDefaultModel):
    """Adapter for Anthropic models served by AWS Bedrock.

    Responsibilities:
    * Resolve credentials per call from the injected credential source
    * Translate messages and stream deltas through the injected transport
    * Expose both the raw streaming surface and the normalized event/chat one
    * Keep invocation counters and emit normalized log events

    Parameters:
        model: Bedrock model id; defaults to configuration.
        region: Service region; defaults to configuration.
        system_message: Fixed system instruction overriding system messages.
        credential_provider: Source of profile store text.
        transport: Performs the streaming call; defaults to ``Boto3Transport``.
        options: Adapter-level option defaults applied under per-call options.
    """

    def __init__(
        self,
        model: Optional[str] = None,
        region: Optional[str] = None,
        system_message: Optional[str] = None,
        credential_provider: Optional[CredentialSource] = None,
        transport: Optional[Transport] = None,
        options: Optional[CompletionOptions] = None,
    ) -> None:
        cfg = get_provider_config("bedrock")
        self._model = model or cfg.get("model") or BEDROCK_DEFAULT_MODEL
        self._region = region or cfg.get("region") or BEDROCK_DEFAULT_REGION
        self._system_message = system_message if system_message is not None else cfg.get("system_message")
        self._context_length = int(cfg.get("context_length") or BEDROCK_DEFAULT_CONTEXT_LENGTH)
        self._max_tokens = int(cfg.get("max_tokens") or BEDROCK_DEFAULT_MAX_TOKENS)
        self._default_options = options or CompletionOptions()
        self._credential_provider = credential_provider or FileCredentialProvider()
        capacity = int(cfg.get("stream_capacity") or STREAM_CHANNEL_CAPACITY)
        self._invoker = StreamingInvoker(transport or Boto3Transport(), capacity=capacity)
        self._logger = get_logger("providers.bedrock")
        self._counters = ProviderInvocationCounters(provider="bedrock")

    @property
    def provider_name(self) -> str:
        return "bedrock"

    def default_model(self) -> Optional[str]:
        return self._model

    @property
    def region(self) -> str:
        return self._region

    @property
    def api_base(self) -> str:
        """Regional runtime endpoint, e.g. ``https://bedrock-runtime.us-east-1.amazonaws.com``."""
        return BEDROCK_ENDPOINT_TEMPLATE.format(region=self._region)

    @property
    def context_length(self) -> int:
        return self._context_length

    @property
    def system_message(self) -> Optional[str]:
        return self._system_message

    def resolve_options(self, options: Optional[CompletionOptions] = None) -> CompletionOptions:
        """Merge per-call options over adapter defaults and configuration.

        Returns a new instance; neither ``options`` nor the defaults change.
        """
        base = self._default_options
        merged = (options or CompletionOptions()).with_defaults(
            **{f.name: getattr(base, f.name) for f in fields(base)}
        )
        return merged.with_defaults(model=self._model, region=self._region, max_tokens=self._max_tokens)

    def resolve_credentials(self, ctx: Optional[LogContext] = None) -> CredentialProfile:
        """Read, parse and select credentials for one call (``bedrock`` then ``default``)."""
        store = parse_credentials_file(self._credential_provider.read())
        name, profile = select_named_profile(store)
        log_event(self._logger, "credentials.resolved", ctx, profile=name)
        return profile

    # ---- Streaming ----
    def stream_chat(
        self,
        messages: Sequence[Message],
        options: Optional[CompletionOptions] = None,
        *,
        token: Optional[CancellationToken] = None,
    ) -> Iterator[Message]:
        """Yield one assistant ``Message`` per text delta, in arrival order."""
        yield from _stream_chat_impl(self, messages, options, token)

    def stream_complete(
        self,
        prompt: str,
        options: Optional[CompletionOptions] = None,
        *,
        token: Optional[CancellationToken] = None,
    ) -> Iterator[str]:
        """Stream a single user prompt as plain-text deltas."""
        stream = self.stream_chat([Message(role="user", content=prompt)], options, token=token)
        try:
            for message in stream:
                yield strip_images(message.content)
        finally:
            stream.close()

    def complete(self, prompt: str, options: Optional[CompletionOptions] = None) -> str:
        return "".join(self.stream_complete(prompt, options))

    def stream_events(self, request: ChatRequest) -> Iterator[ChatStreamEvent]:
        """Normalized stream of ``ChatStreamEvent`` ending in one terminal event."""
        yield from _stream_events_impl(self, request)

    def chat(self, request: ChatRequest) -> ChatResponse:
        """Run ``request`` to completion; failures land in ``meta.extra["stream_error"]``."""
        t0 = time.perf_counter()
        response = accumulate_events(self.stream_events(request))
        response.meta.latency_ms = (time.perf_counter() - t0) * 1000
        return response

    # -------------------- Invocation Counters Introspection --------------------
    def counters_snapshot(self, reset: bool = False):
        """Return snapshot of invocation counters for the Bedrock provider.

        Args:
            reset: Whether to reset internal state after snapshot.
        """
        return self._counters.snapshot(reset=reset)


__all__ = ["BedrockProvider"]
