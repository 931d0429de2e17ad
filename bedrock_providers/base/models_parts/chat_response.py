"""
ChatResponse DTO returned by non-streaming adapter calls.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .content_part import ContentPart
from .provider_metadata import ProviderMetadata


@dataclass
class ChatResponse:
    """Normalized chat result.

    ``text`` is ``None`` when the call failed; the reason is then recorded in
    ``meta.extra``.
    """

    text: Optional[str]
    parts: Optional[List[ContentPart]]
    meta: ProviderMetadata


__all__ = ["ChatResponse"]
