"""Unified configuration layer for adapters.

Sources are merged in a fixed order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional external config file named by ``PROVIDERS_CONFIG_FILE``
       (JSON, or YAML when the JSON parse fails)
    3. Environment variables ``<PROVIDER>_<FIELD>``
    4. In-code overrides passed to ``get_provider_config``

Environment variable conventions
--------------------------------
BEDROCK_MODEL, BEDROCK_REGION, BEDROCK_SYSTEM_MESSAGE, BEDROCK_MAX_TOKENS,
BEDROCK_CONTEXT_LENGTH.

External config file example
----------------------------
```
bedrock:
  model: anthropic.claude-3-haiku-20240307-v1:0
  region: eu-central-1
  system_message: "You are helpful."
```

Unlike credentials, configuration is read once per process and cached;
``reset_config_cache()`` drops the cache (tests use it after changing env).
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    BEDROCK_DEFAULT_CONTEXT_LENGTH,
    BEDROCK_DEFAULT_MAX_TOKENS,
    BEDROCK_DEFAULT_MODEL,
    BEDROCK_DEFAULT_REGION,
)
from .env import is_placeholder

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "bedrock": {
        "model": BEDROCK_DEFAULT_MODEL,
        "region": BEDROCK_DEFAULT_REGION,
        "context_length": BEDROCK_DEFAULT_CONTEXT_LENGTH,
        "max_tokens": BEDROCK_DEFAULT_MAX_TOKENS,
    },
}

# Field name -> (env suffix, coercion)
ENV_FIELD_MAP = {
    "model": ("MODEL", str),
    "region": ("REGION", str),
    "system_message": ("SYSTEM_MESSAGE", str),
    "max_tokens": ("MAX_TOKENS", int),
    "context_length": ("CONTEXT_LENGTH", int),
}

_FILE_CACHE: Optional[Dict[str, Any]] = None


def reset_config_cache() -> None:
    global _FILE_CACHE
    _FILE_CACHE = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    data: Any = {}
    path = os.getenv("PROVIDERS_CONFIG_FILE")
    if path and Path(path).is_file():
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except ValueError:
            data = yaml.safe_load(text) or {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, (suffix, coerce) in ENV_FIELD_MAP.items():
        raw = os.getenv(f"{prefix}_{suffix}")
        if raw is None or not raw.strip() or is_placeholder(raw):
            continue
        try:
            out[field] = coerce(raw.strip())
        except ValueError:
            continue
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for ``provider`` (see module docstring for order)."""
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = dict(DEFAULTS.get(name, {}))

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]
