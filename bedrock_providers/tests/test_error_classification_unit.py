from __future__ import annotations

import types

from bedrock_providers.base.cancellation import CancelledError
from bedrock_providers.base.errors import (
    ErrorCode,
    MalformedStreamFrameError,
    ProviderError,
    classify_exception,
)


class _ServiceError(Exception):
    """Mimics a botocore ``ClientError`` carrying a parsed error response."""

    def __init__(self, code: str, status: int) -> None:
        super().__init__(f"An error occurred ({code})")
        self.response = {"Error": {"Code": code}, "ResponseMetadata": {"HTTPStatusCode": status}}


def test_classify_provider_error_passthrough():
    e = ProviderError(code=ErrorCode.AUTH, message="nope", provider="x")
    assert classify_exception(e) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests
    frame_err = MalformedStreamFrameError("bad", provider="x")
    assert classify_exception(frame_err) is ErrorCode.VALIDATION  # nosec B101


def test_classify_cancellation_and_timeouts():
    assert classify_exception(CancelledError("stop")) is ErrorCode.CANCELLED  # nosec B101
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101


def test_classify_service_error_codes():
    assert classify_exception(_ServiceError("ThrottlingException", 429)) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(_ServiceError("AccessDeniedException", 403)) is ErrorCode.AUTH  # nosec B101
    assert classify_exception(_ServiceError("ModelNotReadyException", 429)) is ErrorCode.UNAVAILABLE  # nosec B101


def test_classify_falls_back_to_http_status():
    assert classify_exception(_ServiceError("SomethingNew", 503)) is ErrorCode.UNAVAILABLE  # nosec B101
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(Exception("unsupported parameter")) is ErrorCode.UNSUPPORTED  # nosec B101
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101


def test_provider_error_str_includes_code_and_model():
    e = ProviderError(code=ErrorCode.TIMEOUT, message="slow", provider="p", model="m")
    assert str(e) == "p:m timeout: slow"  # nosec B101
