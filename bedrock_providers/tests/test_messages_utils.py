from __future__ import annotations

from bedrock_providers.base.models import ChatRequest, CompletionOptions, ImagePart, Message, TextPart
from bedrock_providers.base.utils.messages import extract_system, strip_images


def test_strip_images_keeps_text_parts_joined_by_newline():
    content = [TextPart("a"), ImagePart("data:image/png;base64,AAA"), TextPart("b")]
    assert strip_images(content) == "a\nb"  # nosec B101
    assert strip_images("plain") == "plain"  # nosec B101
    assert strip_images([ImagePart("data:x;base64,Y")]) == ""  # nosec B101


def test_extract_system_joins_non_blank_system_messages():
    messages = [
        Message("system", "one"),
        Message("user", "hi"),
        Message("system", "   "),
        Message("system", [TextPart("two")]),
    ]
    assert extract_system(messages) == "one\n\ntwo"  # nosec B101
    assert extract_system([Message("user", "hi")]) is None  # nosec B101


def test_completion_options_with_defaults_fills_only_unset():
    opts = CompletionOptions(model="m", stop=["x"])
    merged = opts.with_defaults(model="other", max_tokens=5, unknown=1)
    assert merged.model == "m" and merged.max_tokens == 5  # nosec B101
    assert merged.stop == ("x",) and opts.max_tokens is None  # nosec B101
    assert opts.with_defaults() is opts  # nosec B101


def test_chat_request_to_dict_is_json_ready():
    req = ChatRequest(messages=[Message("user", [TextPart("hi")])], options=CompletionOptions(stop=("s",)))
    data = req.to_dict()
    assert data["messages"] == [{"role": "user", "content": [{"type": "text", "text": "hi"}]}]  # nosec B101
    assert data["options"]["stop"] == ["s"]  # nosec B101
