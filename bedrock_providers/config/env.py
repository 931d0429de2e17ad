"""bedrock_providers.config.env
=============================

Environment lookups for credentials and configuration.

The credential store location follows the AWS CLI convention:
``$AWS_SHARED_CREDENTIALS_FILE`` when set, otherwise ``~/.aws/credentials``
under ``$HOME`` (falling back to the platform home directory).

Helpers never raise for unset variables; callers decide how to proceed.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .defaults import CREDENTIALS_RELATIVE_PATH

CREDENTIALS_FILE_ENV = "AWS_SHARED_CREDENTIALS_FILE"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder rather than a real value.

    Matches ``placeholder``, ``changeme`` or ``example`` anywhere, or a
    ``test_`` prefix, case-insensitively.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def home_dir() -> Path:
    """Return ``$HOME`` when set and non-empty, else the platform home directory."""
    home = os.environ.get("HOME")
    return Path(home) if home else Path.home()


def credentials_file_path() -> Path:
    """Return the path of the shared credential profile store."""
    override = os.environ.get(CREDENTIALS_FILE_ENV)
    if override and override.strip():
        return Path(override.strip()).expanduser()
    return home_dir().joinpath(*CREDENTIALS_RELATIVE_PATH)


__all__ = [
    "CREDENTIALS_FILE_ENV",
    "is_placeholder",
    "home_dir",
    "credentials_file_path",
]
