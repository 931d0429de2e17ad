"""Translate generic chat messages into Bedrock Anthropic wire messages.

System-role messages are dropped here; the system instruction is sent as the
top-level ``system`` field of the request body instead. Everything else keeps
its role, its position and the order of its parts.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Union

from ..base.errors import UnsupportedContentError
from ..base.models import ContentPart, ImagePart, Message, TextPart
from .wire import Base64ImageSource, ContentBlock, ImageBlock, TextBlock, WireMessage

PROVIDER_NAME = "bedrock"


def image_payload(source_url: str) -> str:
    """Return the base64 payload of an inline ``data:`` URL (text after the first comma)."""
    _, sep, payload = source_url.partition(",")
    if not sep:
        raise UnsupportedContentError(
            "image source is not an inline data URL; only data:<mime>;base64,<payload> is supported",
            provider=PROVIDER_NAME,
        )
    return payload


def translate_part(part: ContentPart) -> ContentBlock:
    if isinstance(part, TextPart):
        return TextBlock(text=part.text)
    if isinstance(part, ImagePart):
        return ImageBlock(source=Base64ImageSource(data=image_payload(part.source_url)))
    raise UnsupportedContentError(
        f"unsupported content part: {type(part).__name__}", provider=PROVIDER_NAME
    )


def translate_content(content: Union[str, Sequence[ContentPart]]) -> Union[str, List[ContentBlock]]:
    if isinstance(content, str):
        return content
    return [translate_part(p) for p in content]


def translate_message(message: Message) -> WireMessage:
    return WireMessage(role=message.role, content=translate_content(message.content))


def translate_messages(messages: Sequence[Message]) -> List[WireMessage]:
    """Translate a conversation, skipping system turns."""
    return [translate_message(m) for m in messages if m.role != "system"]


def translate(messages: Sequence[Message]) -> List[Dict[str, Any]]:
    """Translate a conversation to plain JSON-ready dictionaries."""
    return [m.model_dump() for m in translate_messages(messages)]


__all__ = [
    "image_payload",
    "translate_part",
    "translate_content",
    "translate_message",
    "translate_messages",
    "translate",
]
