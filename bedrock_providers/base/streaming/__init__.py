"""Streaming package: stream events and the background producer channel."""

from .streaming import ChatStreamEvent, accumulate_events
from .channel import DEFAULT_CAPACITY, StreamChannel, iterate_in_background

__all__ = [
    "ChatStreamEvent",
    "accumulate_events",
    "StreamChannel",
    "iterate_in_background",
    "DEFAULT_CAPACITY",
]
