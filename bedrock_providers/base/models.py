"""
Provider-agnostic domain models (DTOs) public surface.

Re-exports the one-class-per-file implementations under
``bedrock_providers.base.models_parts``.
"""

from .models_parts.content_part import ContentPart, ContentPartType, ImagePart, TextPart
from .models_parts.message import Message, Role
from .models_parts.completion_options import CompletionOptions
from .models_parts.credential_profile import CredentialProfile, CredentialStore
from .models_parts.provider_metadata import ProviderMetadata
from .models_parts.chat_request import ChatRequest
from .models_parts.chat_response import ChatResponse

__all__ = [
    "ContentPart",
    "ContentPartType",
    "ImagePart",
    "TextPart",
    "Message",
    "Role",
    "CompletionOptions",
    "CredentialProfile",
    "CredentialStore",
    "ProviderMetadata",
    "ChatRequest",
    "ChatResponse",
]
