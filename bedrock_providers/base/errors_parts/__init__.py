"""Errors parts package.

Prefer importing from `bedrock_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .credential_errors import CredentialFileMissingError, MissingCredentialsError
from .content_errors import MalformedStreamFrameError, UnsupportedContentError
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "CredentialFileMissingError",
    "MissingCredentialsError",
    "MalformedStreamFrameError",
    "UnsupportedContentError",
    "classify_exception",
]
