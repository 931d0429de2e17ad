"""Cooperative cancellation primitives (public surface).

``CancellationToken`` lets a stream consumer tell the producer side to stop;
``CancelledError`` is what the producer raises when it notices.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
