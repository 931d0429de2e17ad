"""Frame decoding into text deltas."""

from __future__ import annotations

import pytest

from bedrock_providers.base.errors import ErrorCode, MalformedStreamFrameError
from bedrock_providers.bedrock.stream_helpers import decode_frame, iter_deltas
from bedrock_providers.tests.utils import HELLO_FRAMES, delta_frame, event_frame


def test_hello_frames_decode_to_two_deltas():
    assert list(iter_deltas(HELLO_FRAMES)) == ["Hel", "lo"]  # nosec B101


@pytest.mark.parametrize(
    "frame",
    [
        event_frame("message_stop"),
        b'{"delta": {"type": "text_delta", "text": ""}}',
        b'{"delta": {"stop_reason": "end_turn"}}',
        b'{"delta": "text"}',
        b"[1, 2, 3]",
    ],
)
def test_frames_without_text_yield_nothing(frame):
    assert decode_frame(frame) is None  # nosec B101


def test_non_ascii_text_is_preserved():
    assert decode_frame(delta_frame("héllo ✓")) == "héllo ✓"  # nosec B101


def test_invalid_json_fails_with_frame_position():
    frames = [delta_frame("ok"), b"{not json"]
    deltas = iter_deltas(frames, model="m")
    assert next(deltas) == "ok"  # nosec B101
    with pytest.raises(MalformedStreamFrameError) as info:
        next(deltas)
    assert info.value.index == 1  # nosec B101
    assert info.value.frame == b"{not json"  # nosec B101
    assert info.value.code is ErrorCode.VALIDATION  # nosec B101


def test_invalid_utf8_is_malformed():
    with pytest.raises(MalformedStreamFrameError):
        decode_frame(b"\xff\xfe{}")
