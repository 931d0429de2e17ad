"""HasDefaultModel Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HasDefaultModel(Protocol):
    """Providers that know which model to use when a call names none."""

    def default_model(self) -> Optional[str]:  # pragma: no cover - trivial
        return None
