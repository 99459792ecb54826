"""Debounce helper built on the asyncio event loop."""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable


class Debouncer:
    """
    Delay-and-collapse wrapper around a callable.

    Every call cancels the pending invocation and schedules a new one
    ``wait_ms`` later with the latest arguments, so a burst of calls runs
    ``fn`` once, after the burst goes quiet.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        wait_ms: float,
        loop: asyncio.AbstractEventLoop | None = None,
    ):
        if wait_ms < 0:
            raise ValueError("wait_ms must be >= 0")
        self.fn = fn
        self.wait_ms = wait_ms
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}
        self._tasks: set[asyncio.Task] = set()

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.cancel()
        self._args = args
        self._kwargs = kwargs
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self.wait_ms / 1000, self._fire)

    @property
    def pending(self) -> bool:
        """Whether an invocation is scheduled."""
        return self._handle is not None

    def cancel(self) -> None:
        """Drop the pending invocation, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def flush(self) -> None:
        """Run the pending invocation now instead of waiting."""
        if self._handle is None:
            return
        self.cancel()
        self._fire()

    def _fire(self) -> None:
        self._handle = None
        args, kwargs = self._args, self._kwargs
        self._args, self._kwargs = (), {}
        result = self.fn(*args, **kwargs)
        if inspect.isawaitable(result):
            loop = self._loop or asyncio.get_running_loop()
            task = loop.create_task(result)
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)


def debounce(
    fn: Callable[..., Any],
    wait_ms: float,
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> Debouncer:
    """Wrap ``fn`` so rapid successive calls collapse into one delayed call."""
    return Debouncer(fn, wait_ms, loop=loop)
