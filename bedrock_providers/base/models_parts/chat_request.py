"""
ChatRequest DTO: a conversation plus the options to run it with.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .completion_options import CompletionOptions
from .message import Message


@dataclass
class ChatRequest:
    """Normalized chat request handed to adapters.

    Attributes:
        messages: Ordered conversation, system messages included.
        options: Sampling and routing options; unset fields fall back to the
            adapter defaults.
    """

    messages: List[Message]
    options: CompletionOptions = field(default_factory=CompletionOptions)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable view of the request."""
        return {
            "messages": [
                {
                    "role": m.role,
                    "content": (
                        m.content
                        if isinstance(m.content, str)
                        else [p.to_dict() for p in m.content]
                    ),
                }
                for m in self.messages
            ],
            "options": {
                "model": self.options.model,
                "max_tokens": self.options.max_tokens,
                "temperature": self.options.temperature,
                "top_p": self.options.top_p,
                "top_k": self.options.top_k,
                "stop": list(self.options.stop) if self.options.stop is not None else None,
                "region": self.options.region,
            },
        }


__all__ = ["ChatRequest"]
