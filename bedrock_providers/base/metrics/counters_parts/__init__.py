"""Counter implementation modules; import from ``base.metrics``."""

from .provider_counters_snapshot import ProviderCountersSnapshot
from .provider_invocation_counters import ProviderInvocationCounters

__all__ = ["ProviderCountersSnapshot", "ProviderInvocationCounters"]
