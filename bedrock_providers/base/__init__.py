"""
Adapter base package.

Provider-agnostic building blocks shared by concrete adapters:
- Interfaces: library surface and injectable capabilities
- Models (DTOs): messages, content parts, options, credentials, responses
- Errors: classified failure taxonomy
- Streaming: stream events and the background producer channel
- Cancellation, logging and invocation counters
"""

from .cancellation import CancellationToken, CancelledError
from .errors import (
    CredentialFileMissingError,
    ErrorCode,
    MalformedStreamFrameError,
    MissingCredentialsError,
    ProviderError,
    UnsupportedContentError,
    classify_exception,
)
from .interfaces import CredentialSource, HasDefaultModel, LLMProvider, SupportsStreaming
from .metrics import ProviderCountersSnapshot, ProviderInvocationCounters
from .models import (
    ChatRequest,
    ChatResponse,
    CompletionOptions,
    ContentPart,
    ContentPartType,
    CredentialProfile,
    CredentialStore,
    ImagePart,
    Message,
    ProviderMetadata,
    Role,
    TextPart,
)
from .streaming import ChatStreamEvent, StreamChannel, accumulate_events, iterate_in_background

__all__ = [
    "CancellationToken",
    "CancelledError",
    "CredentialFileMissingError",
    "ErrorCode",
    "MalformedStreamFrameError",
    "MissingCredentialsError",
    "ProviderError",
    "UnsupportedContentError",
    "classify_exception",
    "CredentialSource",
    "HasDefaultModel",
    "LLMProvider",
    "SupportsStreaming",
    "ProviderCountersSnapshot",
    "ProviderInvocationCounters",
    "ChatRequest",
    "ChatResponse",
    "CompletionOptions",
    "ContentPart",
    "ContentPartType",
    "CredentialProfile",
    "CredentialStore",
    "ImagePart",
    "Message",
    "ProviderMetadata",
    "Role",
    "TextPart",
    "ChatStreamEvent",
    "StreamChannel",
    "accumulate_events",
    "iterate_in_background",
]
