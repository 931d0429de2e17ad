"""Adapter metrics package: in-process invocation counters."""

from .counters_parts import ProviderCountersSnapshot, ProviderInvocationCounters

__all__ = ["ProviderInvocationCounters", "ProviderCountersSnapshot"]
