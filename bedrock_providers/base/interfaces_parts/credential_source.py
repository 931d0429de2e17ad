"""CredentialSource Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CredentialSource(Protocol):
    """Supplies the raw text of a credential profile store.

    Implementations are called once per invocation and must not cache, so a
    rotated credential file is picked up by the next call.
    """

    def read(self) -> str:
        ...
