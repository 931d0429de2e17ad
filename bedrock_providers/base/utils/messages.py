"""Message content helpers shared across adapters.

Helpers here are pure functions over the provider-agnostic DTOs.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Union

from ..models import ContentPart, Message, TextPart


def strip_images(content: Union[str, Sequence[ContentPart]]) -> str:
    """Reduce message content to plain text.

    A string is returned unchanged. For a list of parts, only text parts are
    kept and joined with newlines; images and any other part kinds are dropped.
    """
    if isinstance(content, str):
        return content
    return "\n".join(p.text for p in content if isinstance(p, TextPart))


def extract_system(messages: Sequence[Message]) -> Optional[str]:
    """Return the joined text of all system messages, or ``None`` if there are none.

    Multiple system messages are joined with blank lines in conversation order.
    """
    segments: List[str] = [strip_images(m.content) for m in messages if m.role == "system"]
    segments = [s for s in segments if s.strip()]
    return "\n\n".join(segments) if segments else None


__all__ = ["strip_images", "extract_system"]
