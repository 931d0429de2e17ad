"""Individual DTO modules re-exported by ``bedrock_providers.base.models``."""

from .content_part import ContentPart, ContentPartType, ImagePart, TextPart
from .message import Message, Role
from .completion_options import CompletionOptions
from .credential_profile import CredentialProfile, CredentialStore
from .provider_metadata import ProviderMetadata
from .chat_request import ChatRequest
from .chat_response import ChatResponse

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
