"""Bedrock credential resolution.

Purpose:
- Parse the shared credential profile store (``~/.aws/credentials`` format)
  into named :class:`CredentialProfile` values.
- Select the profile the adapter authenticates with: ``bedrock`` first,
  then ``default``.
- Provide :class:`CredentialSource` implementations so the adapter can be
  given the raw text by injection instead of reading the home directory.

Parsing rules:
- A trimmed line ``[name]`` opens section ``name``; repeating a header
  reopens the same section, so earlier assignments survive unless reassigned.
- ``key=value`` lines split on the first ``=`` with both sides trimmed, so
  values may themselves contain ``=``.
- Only ``aws_access_key_id``, ``aws_secret_access_key`` and
  ``aws_session_token`` are recognized; the last assignment wins.
- Lines before the first section, lines without ``=`` and unknown keys are
  ignored.

The store is re-read and re-parsed on every call; nothing is cached.
"""

from __future__ import annotations

from dataclasses import fields, replace
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from ..base.errors import CredentialFileMissingError, MissingCredentialsError
from ..base.models import CredentialProfile, CredentialStore
from ..config.defaults import BEDROCK_FALLBACK_PROFILE, BEDROCK_PREFERRED_PROFILE
from ..config.env import credentials_file_path

PROVIDER_NAME = "bedrock"

# File key -> CredentialProfile field
KEY_FIELDS: Mapping[str, str] = {
    "aws_access_key_id": "access_key_id",
    "aws_secret_access_key": "secret_access_key",
    "aws_session_token": "session_token",
}
_FIELD_KEYS = {v: k for k, v in KEY_FIELDS.items()}


def parse_credentials_file(raw_text: str) -> CredentialStore:
    """Parse profile store text into a mapping of profile name to credentials.

    Parameters:
        raw_text: Full contents of the profile store.

    Returns:
        Profiles keyed by section name, in order of first appearance.
    """
    sections: Dict[str, Dict[str, str]] = {}
    current: Optional[str] = None
    for line in raw_text.splitlines():
        trimmed = line.strip()
        if len(trimmed) >= 2 and trimmed.startswith("[") and trimmed.endswith("]"):
            current = trimmed[1:-1]
            sections.setdefault(current, {})
            continue
        if current is None or "=" not in trimmed:
            continue
        key, _, value = trimmed.partition("=")
        field_name = KEY_FIELDS.get(key.strip())
        if field_name is not None:
            sections[current][field_name] = value.strip()
    return {name: CredentialProfile(**values) for name, values in sections.items()}


def serialize_credentials(store: Mapping[str, CredentialProfile]) -> str:
    """Render ``store`` in profile store format.

    Unset fields are omitted. Parsing the result yields an equal store as long
    as no value contains a line break.
    """
    blocks: List[str] = []
    for name, profile in store.items():
        lines = [f"[{name}]"]
        for f in fields(profile):
            value = getattr(profile, f.name)
            if value is not None:
                lines.append(f"{_FIELD_KEYS[f.name]} = {value}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + ("\n" if blocks else "")


def select_named_profile(
    store: Mapping[str, CredentialProfile],
    preferred: str = BEDROCK_PREFERRED_PROFILE,
    fallback: str = BEDROCK_FALLBACK_PROFILE,
) -> Tuple[str, CredentialProfile]:
    """Pick the profile to authenticate with.

    Returns:
        ``(profile_name, profile)`` where the session token defaults to ``""``.

    Raises:
        MissingCredentialsError: Neither profile exists, or the chosen one has
            no access key id or secret access key.
    """
    for name in (preferred, fallback):
        if name in store:
            profile = store[name]
            break
    else:
        raise MissingCredentialsError(
            f"no '{preferred}' or '{fallback}' profile in credential store",
            provider=PROVIDER_NAME,
            wanted=(preferred, fallback),
            available=tuple(store),
        )
    missing = [f for f in ("access_key_id", "secret_access_key") if not getattr(profile, f)]
    if missing:
        detail = f"profile '{name}' is missing {', '.join(_FIELD_KEYS[f] for f in missing)}"
        if name != fallback:
            detail += f"; '{fallback}' is not tried when '{name}' exists"
        raise MissingCredentialsError(
            detail,
            provider=PROVIDER_NAME,
            wanted=(name,),
            available=tuple(store),
        )
    return name, replace(profile, session_token=profile.session_token or "")


def select_profile(
    store: Mapping[str, CredentialProfile],
    preferred: str = BEDROCK_PREFERRED_PROFILE,
    fallback: str = BEDROCK_FALLBACK_PROFILE,
) -> CredentialProfile:
    """Like :func:`select_named_profile` but returns only the profile."""
    return select_named_profile(store, preferred, fallback)[1]


class FileCredentialProvider:
    """Reads the profile store from disk on every call.

    Parameters:
        path: Explicit store location. When omitted the location is resolved
            per call via ``config.env.credentials_file_path`` so changes to
            ``AWS_SHARED_CREDENTIALS_FILE`` or ``HOME`` take effect immediately.
    """

    def __init__(self, path: Optional[Path | str] = None) -> None:
        self._path = Path(path).expanduser() if path is not None else None

    @property
    def path(self) -> Path:
        return self._path if self._path is not None else credentials_file_path()

    def read(self) -> str:
        path = self.path
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise CredentialFileMissingError(str(path), provider=PROVIDER_NAME, raw=e) from e


class StaticCredentialProvider:
    """Serves fixed profile store text (tests, embedding hosts)."""

    def __init__(self, text: str) -> None:
        self._text = text

    @classmethod
    def from_store(cls, store: Mapping[str, CredentialProfile]) -> "StaticCredentialProvider":
        return cls(serialize_credentials(store))

    def read(self) -> str:
        return self._text


# Short names used by callers that think in resolve/select/serialize steps.
resolve = parse_credentials_file
select = select_profile
serialize = serialize_credentials


__all__ = [
    "KEY_FIELDS",
    "resolve",
    "select",
    "serialize",
    "parse_credentials_file",
    "serialize_credentials",
    "select_named_profile",
    "select_profile",
    "FileCredentialProvider",
    "StaticCredentialProvider",
]
