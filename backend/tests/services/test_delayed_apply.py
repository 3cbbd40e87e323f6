"""Latest-Only Invoker — verifies last-request-wins scheduling.

Invariants:
    - A newer run cancels the pending one; the older caller sees SUPERSEDED
    - Action errors reach the caller that scheduled them
    - Cancelling the waiting caller cancels its action

Design Decisions:
    - Short real delays (50ms) with asyncio.sleep(0) to let the first run reach
      its wait point; no clock patching
"""

import asyncio

import pytest

from pursuit.services.delayed_apply import (
    InvocationOutcome, LatestOnlyInvoker, random_delay_seconds,
)


async def test_run_completes_action():
    calls = []

    async def action():
        calls.append("done")

    invoker = LatestOnlyInvoker()
    outcome = await invoker.run(action, 0)

    assert outcome is InvocationOutcome.COMPLETED
    assert calls == ["done"]
    assert not invoker.is_pending


async def test_newer_run_supersedes_pending_one():
    calls = []

    async def record(label):
        calls.append(label)

    invoker = LatestOnlyInvoker()
    first = asyncio.create_task(invoker.run(lambda: record("first"), 0.05))
    await asyncio.sleep(0)

    second = await invoker.run(lambda: record("second"), 0)

    assert second is InvocationOutcome.COMPLETED
    assert await first is InvocationOutcome.SUPERSEDED
    assert calls == ["second"]


async def test_action_error_propagates():
    async def boom():
        raise ValueError("boom")

    invoker = LatestOnlyInvoker()
    with pytest.raises(ValueError, match="boom"):
        await invoker.run(boom, 0)
    assert not invoker.is_pending


async def test_cancel_without_pending_returns_false():
    assert LatestOnlyInvoker().cancel() is False


async def test_cancelling_caller_cancels_action():
    calls = []

    async def action():
        calls.append("ran")

    invoker = LatestOnlyInvoker()
    caller = asyncio.create_task(invoker.run(action, 0.05))
    await asyncio.sleep(0)
    caller.cancel()

    with pytest.raises(asyncio.CancelledError):
        await caller
    await asyncio.sleep(0.1)
    assert calls == []
    assert not invoker.is_pending


def test_random_delay_within_bounds():
    for _ in range(50):
        assert 0.3 <= random_delay_seconds(300, 600) <= 0.6


def test_random_delay_degenerate_bounds():
    assert random_delay_seconds(0, 0) == 0
    assert random_delay_seconds(250, 250) == 0.25
