"""
Map arbitrary exceptions onto :class:`ErrorCode`.

Transport errors are propagated to callers unchanged; this module only derives
a code for logging and counters. Sources are tried in order: the adapter's own
taxonomy, cancellation, timeouts, an HTTP status, a service error code name and finally
message substrings.
"""
from __future__ import annotations

import asyncio
from typing import Any, Dict, Mapping, Optional

from ..cancellation_parts.cancelled_error import CancelledError
from .error_code import ErrorCode
from .provider_error import ProviderError


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    422: ErrorCode.VALIDATION,
    424: ErrorCode.SERVER_ERROR,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.UNAVAILABLE,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

# Service error names as reported in ``response["Error"]["Code"]``.
_SERVICE_CODE_MAP: Dict[str, ErrorCode] = {
    "AccessDeniedException": ErrorCode.AUTH,
    "UnrecognizedClientException": ErrorCode.AUTH,
    "ExpiredTokenException": ErrorCode.AUTH,
    "InvalidSignatureException": ErrorCode.AUTH,
    "ThrottlingException": ErrorCode.RATE_LIMIT,
    "ServiceQuotaExceededException": ErrorCode.RATE_LIMIT,
    "ModelTimeoutException": ErrorCode.TIMEOUT,
    "ValidationException": ErrorCode.VALIDATION,
    "ResourceNotFoundException": ErrorCode.NOT_FOUND,
    "ModelNotReadyException": ErrorCode.UNAVAILABLE,
    "ServiceUnavailableException": ErrorCode.UNAVAILABLE,
    "InternalServerException": ErrorCode.SERVER_ERROR,
    "ModelStreamErrorException": ErrorCode.SERVER_ERROR,
    "ModelErrorException": ErrorCode.SERVER_ERROR,
}

_MESSAGE_PATTERNS = (
    (ErrorCode.TIMEOUT, ("timed out", "timeout")),
    (ErrorCode.AUTH, ("unauthorized", "forbidden", "access denied", "security token")),
    (ErrorCode.RATE_LIMIT, ("rate limit", "throttl", "too many requests")),
    (ErrorCode.UNSUPPORTED, ("unsupported", "not supported")),
    (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
    (ErrorCode.UNAVAILABLE, ("unavailable",)),
    (ErrorCode.VALIDATION, ("validation", "invalid", "malformed")),
)


def _error_response(exc: BaseException) -> Optional[Mapping[str, Any]]:
    resp = getattr(exc, "response", None)
    return resp if isinstance(resp, Mapping) else None


def _extract_status(exc: BaseException) -> Optional[int]:
    """Return an HTTP status attached to ``exc`` if one can be found.

    Checks ``exc.status_code``, ``exc.status``, an object-style
    ``exc.response.status_code`` and a dict-style
    ``exc.response["ResponseMetadata"]["HTTPStatusCode"]``.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is None:
        return None
    if isinstance(resp, Mapping):
        val = (resp.get("ResponseMetadata") or {}).get("HTTPStatusCode")
    else:
        val = getattr(resp, "status_code", None)
    if isinstance(val, int) and 100 <= val < 600:
        return val
    return None


def _extract_service_code(exc: BaseException) -> Optional[str]:
    resp = _error_response(exc)
    if resp is not None:
        code = (resp.get("Error") or {}).get("Code")
        if isinstance(code, str) and code:
            return code
    name = type(exc).__name__
    return name if name in _SERVICE_CODE_MAP else None


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    for code, patterns in _MESSAGE_PATTERNS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify ``exc`` into an :class:`ErrorCode` (``UNKNOWN`` when nothing matches)."""
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, CancelledError):
        return ErrorCode.CANCELLED
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    service_code = _extract_service_code(exc)
    if service_code in _SERVICE_CODE_MAP:
        return _SERVICE_CODE_MAP[service_code]
    status = _extract_status(exc)
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


__all__ = ["classify_exception"]
