"""
Credential resolution failures.

Both errors classify as :attr:`ErrorCode.AUTH`. They are raised before any
network call is attempted, so a caller seeing one knows nothing was sent.
"""
from __future__ import annotations

from typing import Optional, Sequence

from .error_code import ErrorCode
from .provider_error import ProviderError


class CredentialFileMissingError(ProviderError):
    """The local credential profile store could not be read.

    Attributes:
        path: Location that was attempted.
    """

    def __init__(self, path: str, *, provider: str, raw: Optional[BaseException] = None) -> None:
        super().__init__(
            code=ErrorCode.AUTH,
            message=f"credential file not readable: {path}",
            provider=provider,
            raw=raw,
        )
        self.path = path


class MissingCredentialsError(ProviderError):
    """No usable credential profile was found in the parsed store.

    Attributes:
        wanted: Profile names that were looked up, in preference order.
        available: Profile names present in the store.
    """

    def __init__(
        self,
        message: str,
        *,
        provider: str,
        wanted: Sequence[str] = (),
        available: Sequence[str] = (),
    ) -> None:
        super().__init__(code=ErrorCode.AUTH, message=message, provider=provider)
        self.wanted = tuple(wanted)
        self.available = tuple(available)


__all__ = ["CredentialFileMissingError", "MissingCredentialsError"]
