"""
Provider-agnostic interfaces (Protocols) for the adapter layer.

Re-exports the single-class modules under
``bedrock_providers.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import (
    CredentialSource,
    HasDefaultModel,
    LLMProvider,
    SupportsStreaming,
)

__all__ = [
    "CredentialSource",
    "HasDefaultModel",
    "LLMProvider",
    "SupportsStreaming",
]
