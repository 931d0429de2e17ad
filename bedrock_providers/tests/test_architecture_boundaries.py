"""Architecture boundary guardrails for the base layer.

Provider-specific names and SDK imports must not leak into
``bedrock_providers/base``; everything vendor specific lives in the adapter
sub-package.
"""

from __future__ import annotations

import re
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
BASE_DIR = PACKAGE_ROOT / "base"

_VENDOR_TOKENS = ["bedrock", "aws", "boto3", "botocore", "anthropic", "claude"]


def _vendor_regex() -> re.Pattern[str]:
    # word-ish boundary so the package name ``bedrock_providers`` is not a hit
    escaped = [re.escape(p) for p in _VENDOR_TOKENS]
    pattern = r"(?:^|[^a-z0-9_])(?:" + "|".join(escaped) + r")(?:[^a-z0-9_]|$)"
    return re.compile(pattern, re.IGNORECASE)


def _iter_py_files(root: Path) -> list[Path]:
    return [p for p in root.rglob("*.py") if "__pycache__" not in p.parts]


def test_base_layer_exists():
    assert _iter_py_files(BASE_DIR), "base layer not found"  # nosec B101


def test_no_vendor_names_in_base_paths():
    rx = _vendor_regex()
    violations = [str(p) for p in _iter_py_files(BASE_DIR) if rx.search(str(p.relative_to(PACKAGE_ROOT)))]
    assert violations == []  # nosec B101


def test_no_vendor_mentions_in_base_file_contents():
    rx = _vendor_regex()
    violations: list[str] = []
    for py in _iter_py_files(BASE_DIR):
        text = py.read_text(encoding="utf-8")
        match = rx.search(text)
        if match:
            start = max(0, match.start() - 30)
            snippet = text[start : match.end() + 30].replace("\n", " ")
            violations.append(f"{py.name}: …{snippet}…")
    assert violations == [], "; ".join(violations)  # nosec B101


def test_base_does_not_import_adapter_or_config_layers():
    rx = re.compile(r"^\s*from\s+\.\.+(bedrock|config)\b", re.MULTILINE)
    offenders = [py.name for py in _iter_py_files(BASE_DIR) if rx.search(py.read_text(encoding="utf-8"))]
    assert offenders == []  # nosec B101
