"""Correlation context attached to every structured adapter log event."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Provider/model/region correlation fields for structured log events.

    ``extra`` is flattened into the payload; ``None`` values are pruned.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    region: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", None) or {}
        data.update(extra)
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
