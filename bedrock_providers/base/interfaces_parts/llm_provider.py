"""LLMProvider Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import ChatRequest, ChatResponse


@runtime_checkable
class LLMProvider(Protocol):
    """Minimal non-streaming chat contract.

    ``chat`` reports provider failures in ``ChatResponse.meta.extra`` instead
    of raising; exceptions are reserved for programmer errors.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"mock"``."""
        ...

    def chat(self, request: ChatRequest) -> ChatResponse:
        ...
