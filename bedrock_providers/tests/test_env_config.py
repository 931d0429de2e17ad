from __future__ import annotations

import json
from pathlib import Path

from bedrock_providers.bedrock import BedrockProvider, StaticCredentialProvider
from bedrock_providers.config import get_model, get_provider_config, reset_config_cache
from bedrock_providers.config.env import credentials_file_path, home_dir, is_placeholder
from bedrock_providers.tests.utils import FakeTransport


def test_defaults_without_env_or_file():
    cfg = get_provider_config("bedrock")
    assert cfg["region"] == "us-east-1"  # nosec B101
    assert cfg["model"] == "anthropic.claude-3-sonnet-20240229-v1:0"  # nosec B101
    assert cfg["context_length"] == 200000 and cfg["max_tokens"] == 4096  # nosec B101
    assert get_model("bedrock") == cfg["model"]  # nosec B101


def test_unknown_provider_has_empty_config():
    assert get_provider_config("nope") == {}  # nosec B101


def test_env_overrides_defaults_and_is_coerced(monkeypatch):
    monkeypatch.setenv("BEDROCK_REGION", "eu-central-1")
    monkeypatch.setenv("BEDROCK_MAX_TOKENS", "1024")
    monkeypatch.setenv("BEDROCK_CONTEXT_LENGTH", "not-a-number")
    cfg = get_provider_config("bedrock")
    assert cfg["region"] == "eu-central-1"  # nosec B101
    assert cfg["max_tokens"] == 1024  # nosec B101
    assert cfg["context_length"] == 200000  # nosec B101


def test_placeholder_env_values_are_ignored(monkeypatch):
    monkeypatch.setenv("BEDROCK_MODEL", "changeme")
    assert get_provider_config("bedrock")["model"] == "anthropic.claude-3-sonnet-20240229-v1:0"  # nosec B101


def test_yaml_file_then_env_then_overrides(tmp_path, monkeypatch):
    cfg_file = tmp_path / "providers.yaml"
    cfg_file.write_text(
        "bedrock:\n  region: ap-southeast-2\n  model: file-model\n  system_message: From file.\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(cfg_file))
    monkeypatch.setenv("BEDROCK_MODEL", "env-model")
    reset_config_cache()
    cfg = get_provider_config("bedrock", overrides={"region": "us-west-2", "model": None})
    assert cfg["model"] == "env-model"  # nosec B101
    assert cfg["region"] == "us-west-2"  # nosec B101
    assert cfg["system_message"] == "From file."  # nosec B101


def test_json_config_file_is_accepted(tmp_path, monkeypatch):
    cfg_file = tmp_path / "providers.json"
    cfg_file.write_text(json.dumps({"bedrock": {"context_length": 100000}}), encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(cfg_file))
    reset_config_cache()
    assert get_provider_config("bedrock")["context_length"] == 100000  # nosec B101


def test_provider_picks_up_configuration(monkeypatch):
    monkeypatch.setenv("BEDROCK_REGION", "eu-west-3")
    monkeypatch.setenv("BEDROCK_SYSTEM_MESSAGE", "Answer in French.")
    transport = FakeTransport()
    provider = BedrockProvider(
        credential_provider=StaticCredentialProvider("[default]\naws_access_key_id=K\naws_secret_access_key=S\n"),
        transport=transport,
    )
    assert provider.api_base == "https://bedrock-runtime.eu-west-3.amazonaws.com"  # nosec B101
    provider.complete("Bonjour")
    assert transport.last_body["system"] == "Answer in French."  # nosec B101
    assert transport.requests[0].region == "eu-west-3"  # nosec B101


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")  # nosec B101
    assert is_placeholder("ChangeMe123")  # nosec B101
    assert is_placeholder("example-key")  # nosec B101
    assert is_placeholder("test_token")  # nosec B101
    assert not is_placeholder("real-value")  # nosec B101
    assert not is_placeholder(None)  # nosec B101


def test_credentials_path_uses_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert home_dir() == tmp_path  # nosec B101
    assert credentials_file_path() == tmp_path / ".aws" / "credentials"  # nosec B101


def test_credentials_path_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "alt"))
    assert credentials_file_path() == Path(tmp_path / "alt")  # nosec B101
