"""SupportsStreaming Protocol (single-class module)."""

from __future__ import annotations

from typing import Iterator, Optional, Protocol, Sequence, runtime_checkable

from ..models import CompletionOptions, Message


@runtime_checkable
class SupportsStreaming(Protocol):
    """Library surface consumed by host frameworks.

    Both operations are lazy: nothing is read or sent until the first item is
    requested, and items arrive as the provider produces them.
    """

    def stream_chat(
        self, messages: Sequence[Message], options: Optional[CompletionOptions] = None
    ) -> Iterator[Message]:
        """Yield assistant messages, one per text delta."""
        ...

    def stream_complete(self, prompt: str, options: Optional[CompletionOptions] = None) -> Iterator[str]:
        """Yield plain-text deltas for a single user prompt."""
        ...
