"""
Sampling and routing options for a single completion call.

`CompletionOptions` is an immutable bag owned by the caller. Adapters copy its
fields onto the wire request without modifying it; defaults supplied by the
host or by configuration are merged into a new instance.
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class CompletionOptions:
    """Per-call completion options.

    Attributes:
        model: Provider model identifier.
        max_tokens: Upper bound on generated tokens.
        temperature: Sampling temperature.
        top_p: Nucleus sampling mass.
        top_k: Top-k sampling cutoff.
        stop: Stop sequences, in order.
        region: Service region the call is routed to.
    """

    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    top_k: Optional[int] = None
    stop: Optional[Tuple[str, ...]] = None
    region: Optional[str] = None

    def __post_init__(self) -> None:
        # Lists are accepted for convenience and frozen to keep the bag immutable.
        if self.stop is not None and not isinstance(self.stop, tuple):
            object.__setattr__(self, "stop", tuple(self.stop))

    def with_defaults(self, **defaults: Any) -> "CompletionOptions":
        """Return a copy where unset (``None``) fields take values from ``defaults``.

        Unknown keys in ``defaults`` are ignored.
        """
        names = {f.name for f in fields(self)}
        missing = {
            k: v
            for k, v in defaults.items()
            if k in names and v is not None and getattr(self, k) is None
        }
        return replace(self, **missing) if missing else self


__all__ = ["CompletionOptions"]
