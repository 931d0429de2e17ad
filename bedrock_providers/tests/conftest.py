"""Pytest configuration for the adapter test suite.

Fixtures:
- ``fake_transport``: in-memory transport recording every request.
- ``static_credentials``: credential source with a ``bedrock`` and a
  ``default`` profile.
- ``provider``: ``BedrockProvider`` wired to both of the above.
- ``log_messages``: JSON payloads emitted on the ``providers`` logger.

An autouse fixture clears adapter environment variables and the config cache
so tests never depend on the developer's shell.
"""

from __future__ import annotations

import json
import logging
from typing import Iterator, List

import pytest

from bedrock_providers.bedrock import BedrockProvider, StaticCredentialProvider
from bedrock_providers.config import reset_config_cache
from bedrock_providers.tests.utils import CREDENTIALS_TEXT, FakeTransport

_ENV_VARS = (
    "BEDROCK_MODEL",
    "BEDROCK_REGION",
    "BEDROCK_SYSTEM_MESSAGE",
    "BEDROCK_MAX_TOKENS",
    "BEDROCK_CONTEXT_LENGTH",
    "PROVIDERS_CONFIG_FILE",
    "PROVIDERS_LOG_LEVEL",
    "AWS_SHARED_CREDENTIALS_FILE",
)


class _JsonCollector(logging.Handler):
    """Capture log records as decoded JSON payloads."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.payloads: List[dict] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.payloads.append(json.loads(record.getMessage()))
        except ValueError:
            self.payloads.append({"msg": record.getMessage()})


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def static_credentials() -> StaticCredentialProvider:
    return StaticCredentialProvider(CREDENTIALS_TEXT)


@pytest.fixture()
def provider(fake_transport: FakeTransport, static_credentials: StaticCredentialProvider) -> BedrockProvider:
    return BedrockProvider(credential_provider=static_credentials, transport=fake_transport)


@pytest.fixture()
def log_messages() -> Iterator[List[dict]]:
    """Collect JSON payloads logged anywhere under the ``providers`` logger."""
    from bedrock_providers.base.logging import get_logger

    base = get_logger()
    handler = _JsonCollector()
    base.addHandler(handler)
    try:
        yield handler.payloads
    finally:
        base.removeHandler(handler)
