"""Cancellation error type."""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised by an operation that observed a cancellation request.

    Kept distinct from other runtime failures so stream producers can stop
    quietly instead of reporting an error to a consumer that already left.
    """


__all__ = ["CancelledError"]
