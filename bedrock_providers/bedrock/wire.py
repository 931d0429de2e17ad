"""Wire schema for the Bedrock Anthropic Messages request body.

The models mirror the JSON accepted by ``InvokeModelWithResponseStream`` for
Anthropic models. Unset optional fields are left out of the serialized body
rather than sent as ``null``.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, Field

from ..base.models import CompletionOptions
from ..config.defaults import BEDROCK_ANTHROPIC_VERSION, BEDROCK_IMAGE_MEDIA_TYPE


class TextBlock(BaseModel):
    type: Literal["text"] = "text"
    text: str


class Base64ImageSource(BaseModel):
    type: Literal["base64"] = "base64"
    media_type: str = BEDROCK_IMAGE_MEDIA_TYPE
    data: str


class ImageBlock(BaseModel):
    type: Literal["image"] = "image"
    source: Base64ImageSource


ContentBlock = Union[TextBlock, ImageBlock]


class WireMessage(BaseModel):
    """One conversation turn; system turns never appear on the wire."""

    role: Literal["user", "assistant"]
    content: Union[str, List[ContentBlock]]


class InvokeRequestBody(BaseModel):
    """Request body for a streaming invocation.

    Field order matches the serialized JSON.
    """

    anthropic_version: str = BEDROCK_ANTHROPIC_VERSION
    max_tokens: Optional[int] = None
    system: Optional[str] = None
    messages: List[WireMessage] = Field(default_factory=list)
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    top_k: Optional[int] = None
    stop_sequences: Optional[List[str]] = None

    def to_json_bytes(self) -> bytes:
        return self.model_dump_json(exclude_none=True).encode("utf-8")


def build_request_body(
    messages: Sequence[Union[WireMessage, dict]],
    system: Optional[str],
    options: CompletionOptions,
) -> InvokeRequestBody:
    """Assemble the request body from translated messages and caller options.

    ``options`` is read, never modified; ``options.stop`` becomes
    ``stop_sequences``.
    """
    return InvokeRequestBody(
        max_tokens=options.max_tokens,
        system=system,
        messages=list(messages),
        temperature=options.temperature,
        top_p=options.top_p,
        top_k=options.top_k,
        stop_sequences=list(options.stop) if options.stop is not None else None,
    )


__all__ = [
    "TextBlock",
    "Base64ImageSource",
    "ImageBlock",
    "ContentBlock",
    "WireMessage",
    "InvokeRequestBody",
    "build_request_body",
]
