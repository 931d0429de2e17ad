"""
Payload shape failures on either side of the wire.

`MalformedStreamFrameError` fails an in-flight stream when a frame cannot be
decoded; there is no partial recovery. `UnsupportedContentError` rejects
request content the adapter has no wire mapping for.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class MalformedStreamFrameError(ProviderError):
    """A response frame was not UTF-8 encoded JSON.

    Attributes:
        frame: The offending raw bytes.
        index: Zero-based position of the frame in the stream.
    """

    def __init__(
        self,
        message: str,
        *,
        provider: str,
        model: Optional[str] = None,
        frame: bytes = b"",
        index: int = -1,
        raw: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )
        self.frame = frame
        self.index = index


class UnsupportedContentError(ProviderError):
    """Message content that cannot be expressed in the provider wire schema."""

    def __init__(self, message: str, *, provider: str) -> None:
        super().__init__(code=ErrorCode.UNSUPPORTED, message=message, provider=provider)


__all__ = ["MalformedStreamFrameError", "UnsupportedContentError"]
