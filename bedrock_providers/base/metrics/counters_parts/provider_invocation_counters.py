"""Thread-safe in-memory counters for adapter invocations.

Every streaming call settles exactly once as a success, a failure or a
cancellation. Stream producers run on worker threads, so every mutation is
taken under a re-entrant lock.
"""

from __future__ import annotations

import time
from threading import RLock
from typing import Dict, Optional

from .provider_counters_snapshot import ProviderCountersSnapshot


class ProviderInvocationCounters:
    """Lifecycle counters for one provider."""

    __slots__ = (
        "_provider",
        "_lock",
        "_total",
        "_success",
        "_failure",
        "_cancelled",
        "_in_flight",
        "_deltas",
        "_failure_by_code",
        "_latency_count",
        "_latency_total",
        "_latency_min",
        "_latency_max",
    )

    def __init__(self, provider: str):
        self._provider = provider
        self._lock = RLock()
        self._reset()
        self._in_flight = 0

    def _reset(self) -> None:
        self._total = 0
        self._success = 0
        self._failure = 0
        self._cancelled = 0
        self._deltas = 0
        self._failure_by_code: Dict[str, int] = {}
        self._latency_count = 0
        self._latency_total = 0
        self._latency_min: Optional[int] = None
        self._latency_max: Optional[int] = None

    @staticmethod
    def monotonic_ms() -> int:
        return int(time.monotonic() * 1000)

    def record_start(self) -> None:
        with self._lock:
            self._total += 1
            self._in_flight += 1

    def record_delta(self) -> None:
        with self._lock:
            self._deltas += 1

    def record_success(self, latency_ms: int) -> None:
        with self._lock:
            self._success += 1
            self._in_flight = max(0, self._in_flight - 1)
            if latency_ms >= 0:
                self._latency_count += 1
                self._latency_total += latency_ms
                if self._latency_min is None or latency_ms < self._latency_min:
                    self._latency_min = latency_ms
                if self._latency_max is None or latency_ms > self._latency_max:
                    self._latency_max = latency_ms

    def record_failure(self, error_code: str) -> None:
        with self._lock:
            self._failure += 1
            self._failure_by_code[error_code] = self._failure_by_code.get(error_code, 0) + 1
            self._in_flight = max(0, self._in_flight - 1)

    def record_cancelled(self) -> None:
        with self._lock:
            self._cancelled += 1
            self._in_flight = max(0, self._in_flight - 1)

    def snapshot(self, reset: bool = False) -> ProviderCountersSnapshot:
        """Return a snapshot; ``reset`` zeroes everything except ``in_flight``."""
        with self._lock:
            avg = self._latency_total / self._latency_count if self._latency_count else None
            snap = ProviderCountersSnapshot(
                provider=self._provider,
                total=self._total,
                success=self._success,
                failure=self._failure,
                cancelled=self._cancelled,
                in_flight=self._in_flight,
                deltas=self._deltas,
                failure_by_code=dict(self._failure_by_code),
                latency_min_ms=self._latency_min,
                latency_max_ms=self._latency_max,
                latency_avg_ms=avg,
            )
            if reset:
                self._reset()
            return snap


__all__ = ["ProviderInvocationCounters"]
