"""Unit tests for cooperative cancellation primitives.

Covers idempotent cancel, cascade to children, late link of child after
parent cancel, callbacks and raise_if_cancelled behavior.
"""
from __future__ import annotations

import pytest

from bedrock_providers.base.cancellation import (
    CancellationToken,
    CancelledError,
)


def test_cancel_cascades_to_children_and_is_idempotent():
    parent = CancellationToken()
    child1 = parent.child()
    child2 = parent.child()

    parent.cancel(reason="stop")
    # idempotent second call
    parent.cancel(reason="ignored")

    assert parent.cancelled is True and parent.reason == "stop"  # nosec B101 - pytest assert in tests
    assert child1.cancelled is True and child1.reason == "stop"  # nosec B101 - pytest assert in tests
    assert child2.cancelled is True and child2.reason == "stop"  # nosec B101 - pytest assert in tests


def test_cancelling_child_leaves_parent_running():
    parent = CancellationToken()
    child = parent.child()
    child.cancel("abandoned")
    assert child.cancelled and not parent.cancelled  # nosec B101


def test_link_child_after_parent_cancel_immediately_cancels_child():
    parent = CancellationToken()
    parent.cancel("done")
    late_child = CancellationToken(parent=parent)
    assert late_child.cancelled is True and late_child.reason == "done"  # nosec B101 - pytest assert in tests


def test_on_cancel_runs_once_and_immediately_when_late():
    token = CancellationToken()
    seen: list = []
    token.on_cancel(seen.append)
    token.cancel("first")
    token.cancel("second")
    token.on_cancel(lambda reason: seen.append(f"late:{reason}"))
    assert seen == ["first", "late:first"]  # nosec B101


def test_wait_reports_state():
    token = CancellationToken()
    assert token.wait(0.01) is False  # nosec B101
    token.cancel()
    assert token.wait(0.01) is True  # nosec B101


def test_raise_if_cancelled_raises_custom_error():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel("terminate")
    with pytest.raises(CancelledError, match="terminate"):
        token.raise_if_cancelled()


def test_unlinked_child_is_not_cancelled_with_parent():
    parent = CancellationToken()
    kept = parent.child()
    dropped = parent.child()
    parent.unlink_child(dropped)
    parent.unlink_child(dropped)  # second unlink is a no-op
    parent.cancel("stop")
    assert kept.cancelled and not dropped.cancelled  # nosec B101
