"""
Structured adapter error exception type.

`ProviderError` is the root of the adapter error taxonomy. Concrete failure
kinds (credentials, stream frames, unsupported content) subclass it and pin
their `ErrorCode` so callers can branch on either the class or the code.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """A classified adapter failure.

    Attributes:
        code: Normalized :class:`ErrorCode` for the failure.
        message: Human-readable description, safe to log.
        provider: Provider key where the error originated (e.g. ``"mock"``).
        model: Model identifier involved in the failing call, when known.
        raw: Original exception, kept for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
