"""Point-in-time view of an adapter's invocation counters."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ProviderCountersSnapshot:
    """Immutable copy of :class:`ProviderInvocationCounters` state.

    Attributes:
        provider: Provider key the counters belong to.
        total: Invocations started.
        success: Invocations whose stream ended normally.
        failure: Invocations that raised; broken down in ``failure_by_code``.
        cancelled: Invocations abandoned by their consumer before the end.
        in_flight: Invocations started but not yet settled.
        deltas: Text deltas delivered across all invocations.
        latency_min_ms: Fastest successful invocation, if any.
        latency_max_ms: Slowest successful invocation, if any.
        latency_avg_ms: Mean successful latency, if any.
    """

    provider: str
    total: int
    success: int
    failure: int
    cancelled: int
    in_flight: int
    deltas: int
    failure_by_code: Dict[str, int]
    latency_min_ms: Optional[int]
    latency_max_ms: Optional[int]
    latency_avg_ms: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ProviderCountersSnapshot"]
