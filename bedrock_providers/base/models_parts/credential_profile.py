"""
Named credential sets read from a local profile store.

A `CredentialStore` maps profile names to `CredentialProfile` values in the
order each name first appeared in the source text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class CredentialProfile:
    """Static access credentials.

    Fields are optional while parsing; adapters validate the ones they need
    when a profile is selected.
    """

    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    session_token: Optional[str] = None

    def __repr__(self) -> str:
        # Never render secrets.
        key = f"{self.access_key_id[:4]}****" if self.access_key_id else None
        secret = "***" if self.secret_access_key else None
        token = "***" if self.session_token else None
        return (
            f"CredentialProfile(access_key_id={key!r}, "
            f"secret_access_key={secret!r}, session_token={token!r})"
        )


CredentialStore = Dict[str, CredentialProfile]


__all__ = ["CredentialProfile", "CredentialStore"]
