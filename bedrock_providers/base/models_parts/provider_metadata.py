"""
Metadata attached to normalized chat responses.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ProviderMetadata:
    """Provider-side facts about one chat invocation.

    Attributes:
        provider_name: Canonical provider key.
        model_name: Model the call was routed to.
        latency_ms: Wall-clock duration of the call, when it completed.
        extra: Adapter-specific details such as ``stream_events`` or
            ``stream_error``.
    """

    provider_name: str
    model_name: str
    latency_ms: Optional[float] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ProviderMetadata"]
