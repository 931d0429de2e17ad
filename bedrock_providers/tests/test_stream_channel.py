"""Bounded producer/consumer channel behaviour."""

from __future__ import annotations

import threading

import pytest

from bedrock_providers.base.cancellation import CancellationToken, CancelledError
from bedrock_providers.base.streaming import StreamChannel, iterate_in_background


def test_items_arrive_in_order_across_the_thread_boundary():
    out = list(iterate_in_background(lambda: range(100), capacity=4))
    assert out == list(range(100))  # nosec B101


def test_source_is_not_started_before_first_pull():
    started = threading.Event()

    def source():
        started.set()
        return ["a"]

    stream = iterate_in_background(source)
    assert not started.is_set()  # nosec B101
    assert list(stream) == ["a"]  # nosec B101
    assert started.is_set()  # nosec B101


def test_producer_error_is_reraised_unchanged_after_buffered_items():
    boom = KeyError("boom")

    def source():
        yield 1
        yield 2
        raise boom

    stream = iterate_in_background(source)
    assert next(stream) == 1  # nosec B101
    assert next(stream) == 2  # nosec B101
    with pytest.raises(KeyError) as info:
        next(stream)
    assert info.value is boom  # nosec B101


def test_abandoning_consumer_cancels_token_and_calls_hook():
    token = CancellationToken()
    released = threading.Event()
    abandoned = []

    def source():
        try:
            n = 0
            while True:
                n += 1
                yield n
        finally:
            released.set()

    stream = iterate_in_background(
        source, capacity=2, token=token, on_abandon=lambda: abandoned.append(True)
    )
    assert next(stream) == 1  # nosec B101
    stream.close()

    assert token.cancelled  # nosec B101
    assert abandoned == [True]  # nosec B101
    assert released.wait(2.0), "producer did not release the source"  # nosec B101


def test_external_cancel_surfaces_cancelled_error_to_consumer():
    token = CancellationToken()
    gate = threading.Event()

    def source():
        yield "first"
        gate.wait(2.0)
        yield "never"

    stream = iterate_in_background(source, token=token)
    assert next(stream) == "first"  # nosec B101
    token.cancel("caller stop")
    with pytest.raises(CancelledError):
        next(stream)
    gate.set()


def test_channel_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        StreamChannel(capacity=0)


def test_put_after_close_raises_cancelled():
    channel = StreamChannel(capacity=1)
    channel.close()
    with pytest.raises(CancelledError):
        channel.put("x")
