"""Transport seam for Bedrock streaming calls.

``Transport.send`` performs one ``InvokeModelWithResponseStream`` call and
returns an iterator over the raw payload bytes of each stream chunk. The
default implementation uses ``boto3``; tests and embedding hosts inject their
own transport instead.

Errors raised by a transport (while sending or while iterating) propagate to
the adapter's caller unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Protocol, runtime_checkable

try:
    import boto3  # type: ignore
except Exception:  # pragma: no cover
    boto3 = None  # type: ignore

from ..base.errors import ErrorCode, ProviderError
from ..base.models import CredentialProfile
from ..config.defaults import BEDROCK_ENDPOINT_TEMPLATE

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class TransportRequest:
    """Everything a transport needs for one streaming invocation."""

    model_id: str
    region: str
    body: bytes
    credentials: CredentialProfile
    content_type: str = JSON_CONTENT_TYPE
    accept: str = JSON_CONTENT_TYPE

    @property
    def endpoint(self) -> str:
        return BEDROCK_ENDPOINT_TEMPLATE.format(region=self.region)


@runtime_checkable
class Transport(Protocol):
    def send(self, request: TransportRequest) -> Iterable[bytes]:
        """Start the call and return the response frames in arrival order.

        The returned iterable may expose ``close()``; it is called when the
        consumer abandons the stream.
        """
        ...


class EventStreamFrames:
    """Adapt a boto3 ``EventStream`` to an iterator of chunk payloads.

    Events without a ``chunk`` (none are expected for successful calls) are
    skipped. Modeled stream exceptions are raised by botocore while iterating.
    """

    def __init__(self, stream: Any) -> None:
        self._stream = stream

    def __iter__(self) -> Iterator[bytes]:
        for event in self._stream:
            chunk = event.get("chunk") if isinstance(event, dict) else None
            if chunk and "bytes" in chunk:
                yield chunk["bytes"]

    def close(self) -> None:
        close = getattr(self._stream, "close", None)
        if callable(close):
            close()


class Boto3Transport:
    """Default transport backed by ``boto3``'s ``bedrock-runtime`` client.

    A fresh session is built per call from the resolved profile, matching the
    adapter's rule that credentials are never cached.

    Parameters:
        endpoint_url: Optional endpoint override (VPC endpoints, local stubs).
            When omitted boto3 derives the regional endpoint itself.
    """

    def __init__(self, endpoint_url: Optional[str] = None) -> None:
        self._endpoint_url = endpoint_url

    def _create_client(self, request: TransportRequest):
        if boto3 is None:
            raise ProviderError(
                code=ErrorCode.UNAVAILABLE,
                message="boto3 is not installed",
                provider="bedrock",
                model=request.model_id,
            )
        creds = request.credentials
        session = boto3.Session(
            aws_access_key_id=creds.access_key_id,
            aws_secret_access_key=creds.secret_access_key,
            aws_session_token=creds.session_token or None,
            region_name=request.region,
        )
        return session.client("bedrock-runtime", endpoint_url=self._endpoint_url)

    def send(self, request: TransportRequest) -> EventStreamFrames:
        client = self._create_client(request)
        response = client.invoke_model_with_response_stream(
            modelId=request.model_id,
            body=request.body,
            contentType=request.content_type,
            accept=request.accept,
        )
        return EventStreamFrames(response["body"])


__all__ = [
    "TransportRequest",
    "Transport",
    "EventStreamFrames",
    "Boto3Transport",
    "JSON_CONTENT_TYPE",
]
