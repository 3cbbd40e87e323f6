"""Latest-Only Invoker — cancellable delayed invocation where the last request wins.

Invariants:
    - At most one pending action at a time; scheduling a new one cancels the previous
    - A superseded caller gets InvocationOutcome.SUPERSEDED, never an exception
    - Cancelling the awaiting caller cancels its own pending action too
    - Errors raised by the action propagate to the caller that scheduled it

Design Decisions:
    - asyncio.wait over awaiting the task directly: a cancelled inner task does not
      raise into the caller, so "superseded" and "caller cancelled" stay distinguishable
    - Jittered delay drawn by the caller (random_delay_seconds): invoker stays deterministic in tests
"""

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from enum import Enum

logger = logging.getLogger(__name__)


class InvocationOutcome(str, Enum):
    COMPLETED = "completed"
    SUPERSEDED = "superseded"


def random_delay_seconds(min_ms: int, max_ms: int) -> float:
    """Uniform delay in seconds within [min_ms, max_ms]."""
    if max_ms <= min_ms:
        return min_ms / 1000
    return random.uniform(min_ms, max_ms) / 1000


class LatestOnlyInvoker:
    """Runs one delayed async action at a time; newer requests cancel older ones."""

    def __init__(self) -> None:
        self._pending: asyncio.Task | None = None

    @property
    def is_pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def cancel(self) -> bool:
        """Cancel the pending action, if any. True when something was cancelled."""
        if not self.is_pending:
            return False
        self._pending.cancel()
        return True

    async def _delayed(
        self, action: Callable[[], Awaitable[None]], delay_seconds: float,
    ) -> None:
        if delay_seconds > 0:
            await asyncio.sleep(delay_seconds)
        await action()

    async def run(
        self, action: Callable[[], Awaitable[None]], delay_seconds: float,
    ) -> InvocationOutcome:
        """Schedule action after delay_seconds and wait for it or its replacement."""
        if self.cancel():
            logger.info("Pending apply superseded by a newer request")
        task = asyncio.create_task(self._delayed(action, delay_seconds))
        self._pending = task
        try:
            await asyncio.wait({task})
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            if self._pending is task:
                self._pending = None

        if task.cancelled():
            return InvocationOutcome.SUPERSEDED
        task.result()
        return InvocationOutcome.COMPLETED
