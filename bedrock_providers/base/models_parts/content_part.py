"""
Structured message content parts.

A multi-part message is an ordered list of parts. Each part is one of a closed
set of frozen dataclasses so adapters can dispatch on the concrete class
instead of probing untyped dictionaries.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal, Union


ContentPartType = Literal["text", "image"]


@dataclass(frozen=True)
class TextPart:
    """Plain text segment of a message."""

    text: str

    @property
    def type(self) -> ContentPartType:
        return "text"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, **asdict(self)}


@dataclass(frozen=True)
class ImagePart:
    """Image attached to a message.

    Attributes:
        source_url: Reference to the image. Adapters in this package only
            accept inline ``data:<mime>;base64,<payload>`` URLs.
    """

    source_url: str

    @property
    def type(self) -> ContentPartType:
        return "image"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, **asdict(self)}


ContentPart = Union[TextPart, ImagePart]


__all__ = [
    "ContentPart",
    "ContentPartType",
    "TextPart",
    "ImagePart",
]
