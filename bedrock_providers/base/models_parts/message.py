"""
Message DTO used across adapters.

Content is either a plain string or an ordered list of content parts. The
order of parts, like the order of messages in a conversation, is meaningful
and must be preserved by every translation step.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Union

from .content_part import ContentPart


Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class Message:
    """A single chat message.

    Attributes:
        role: ``"system"``, ``"user"`` or ``"assistant"``.
        content: Plain text, or a list of :class:`TextPart` / :class:`ImagePart`.
    """

    role: Role
    content: Union[str, List[ContentPart]]


__all__ = [
    "Message",
    "Role",
]
