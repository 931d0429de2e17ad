"""Frame decoding for Bedrock response streams.

Each frame is the UTF-8 JSON of one Anthropic stream event. Only
``content_block_delta`` style events carry ``delta.text``; every other event
(``message_start``, ``message_delta``, ``message_stop`` ...) yields nothing.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Iterator, Optional

from ..base.errors import MalformedStreamFrameError

PROVIDER_NAME = "bedrock"


def _delta_text(event: Any) -> Optional[str]:
    if not isinstance(event, dict):
        return None
    delta = event.get("delta")
    if not isinstance(delta, dict):
        return None
    text = delta.get("text")
    return text if isinstance(text, str) and text else None


def decode_frame(frame: bytes, *, index: int = -1, model: Optional[str] = None) -> Optional[str]:
    """Return the text delta carried by ``frame``, or ``None``.

    Raises:
        MalformedStreamFrameError: The frame is not UTF-8 or not JSON.
    """
    try:
        event = json.loads(frame.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise MalformedStreamFrameError(
            f"undecodable stream frame #{index}: {e}",
            provider=PROVIDER_NAME,
            model=model,
            frame=frame,
            index=index,
            raw=e,
        ) from e
    return _delta_text(event)


def iter_deltas(frames: Iterable[bytes], *, model: Optional[str] = None) -> Iterator[str]:
    """Yield non-empty text deltas in frame order; fail on the first bad frame."""
    for index, frame in enumerate(frames):
        text = decode_frame(frame, index=index, model=model)
        if text is not None:
            yield text


__all__ = ["decode_frame", "iter_deltas"]
