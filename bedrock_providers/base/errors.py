"""Adapter error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``bedrock_providers.base.errors_parts``.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.credential_errors import CredentialFileMissingError, MissingCredentialsError
from .errors_parts.content_errors import MalformedStreamFrameError, UnsupportedContentError
from .errors_parts.classification import classify_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "CredentialFileMissingError",
    "MissingCredentialsError",
    "MalformedStreamFrameError",
    "UnsupportedContentError",
    "classify_exception",
]
