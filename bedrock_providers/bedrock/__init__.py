"""AWS Bedrock adapter for Anthropic Claude models.

Public pieces:
    - :class:`BedrockProvider`: the adapter itself
    - Credential sources: :class:`FileCredentialProvider`, :class:`StaticCredentialProvider`
    - Transports: :class:`Boto3Transport` and the :class:`Transport` protocol
"""

from .client import BedrockProvider
from .credentials import (
    FileCredentialProvider,
    StaticCredentialProvider,
    parse_credentials_file,
    select_named_profile,
    select_profile,
    serialize_credentials,
)
from .invoker import StreamingInvoker
from .transport import Boto3Transport, Transport, TransportRequest
from .translator import translate, translate_messages

__all__ = [
    "BedrockProvider",
    "FileCredentialProvider",
    "StaticCredentialProvider",
    "parse_credentials_file",
    "select_named_profile",
    "select_profile",
    "serialize_credentials",
    "StreamingInvoker",
    "Boto3Transport",
    "Transport",
    "TransportRequest",
    "translate",
    "translate_messages",
]
