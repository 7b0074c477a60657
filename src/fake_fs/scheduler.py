"""Deferred invocation of completion callbacks."""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import Any, Callable, Deque, Optional, Protocol, Tuple, runtime_checkable

log = logging.getLogger(__name__)

Callback = Callable[..., Any]


@runtime_checkable
class Scheduler(Protocol):
    def call_soon(self, callback: Callback, *args: Any) -> None:
        ...

    def run_pending(self) -> int:
        ...


class DeferredQueue:
    """FIFO of callbacks that run only when :meth:`run_pending` is called."""

    def __init__(self) -> None:
        self._pending: Deque[Tuple[Callback, Tuple[Any, ...]]] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def call_soon(self, callback: Callback, *args: Any) -> None:
        self._pending.append((callback, args))

    def run_pending(self) -> int:
        ran = 0
        while self._pending:
            callback, args = self._pending.popleft()
            callback(*args)
            ran += 1
        return ran

    def move_to(self, loop: asyncio.AbstractEventLoop) -> int:
        """Hand every queued callback to ``loop`` in FIFO order."""
        moved = 0
        while self._pending:
            callback, args = self._pending.popleft()
            loop.call_soon(callback, *args)
            moved += 1
        return moved


class EventLoopScheduler:
    """Hand callbacks to the running asyncio loop.

    Outside of a running loop the callbacks wait in a :class:`DeferredQueue`
    until :meth:`run_pending` drains it or the next callback scheduled from a
    running loop moves them onto that loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop
        self._fallback = DeferredQueue()

    def __len__(self) -> int:
        return len(self._fallback)

    def _current_loop(self) -> Optional[asyncio.AbstractEventLoop]:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None

    def call_soon(self, callback: Callback, *args: Any) -> None:
        loop = self._current_loop()
        if loop is None:
            log.debug("No running event loop, queueing %r", callback)
            self._fallback.call_soon(callback, *args)
            return
        if self._fallback.move_to(loop):
            log.debug("Moved callbacks queued before the event loop started")
        loop.call_soon(callback, *args)

    def run_pending(self) -> int:
        return self._fallback.run_pending()
