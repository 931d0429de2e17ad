"""bedrock_providers package

Streaming chat adapter for Anthropic Claude models on AWS Bedrock, built on a
small provider-agnostic base layer.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode` and the
      credential / content errors derived from it
    - DTOs: :class:`Message`, :class:`TextPart`, :class:`ImagePart`,
      :class:`CompletionOptions`, :class:`ChatRequest`, :class:`ChatResponse`
    - Adapter: :class:`BedrockProvider`

Logging goes to the ``providers`` logger hierarchy; call
``bedrock_providers.base.logging.configure_logger`` to change level or add a
rotating file handler.
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import (
    CredentialFileMissingError,
    ErrorCode,
    MalformedStreamFrameError,
    MissingCredentialsError,
    ProviderError,
    UnsupportedContentError,
)
from .base.models import (
    ChatRequest,
    ChatResponse,
    CompletionOptions,
    ImagePart,
    Message,
    TextPart,
)
from .bedrock import BedrockProvider, FileCredentialProvider, StaticCredentialProvider

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ProviderError",
    "ErrorCode",
    "CredentialFileMissingError",
    "MissingCredentialsError",
    "MalformedStreamFrameError",
    "UnsupportedContentError",
    "CancellationToken",
    "CancelledError",
    "ChatRequest",
    "ChatResponse",
    "CompletionOptions",
    "ImagePart",
    "Message",
    "TextPart",
    "BedrockProvider",
    "FileCredentialProvider",
    "StaticCredentialProvider",
]
