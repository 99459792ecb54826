import asyncio

import pytest

from feedsearch.search.debounce import debounce


class FakeTimerHandle:
    def __init__(self, when: float, callback):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeLoop:
    """Virtual clock in milliseconds with a call_later API."""

    def __init__(self):
        self.now_ms = 0.0
        self.handles: list[FakeTimerHandle] = []

    def call_later(self, delay: float, callback):
        handle = FakeTimerHandle(self.now_ms + delay * 1000, callback)
        self.handles.append(handle)
        return handle

    def advance_to(self, t_ms: float) -> None:
        while True:
            due = [h for h in self.handles if not h.cancelled and h.when <= t_ms]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.handles.remove(handle)
            self.now_ms = handle.when
            handle.callback()
        self.now_ms = t_ms

    def pending(self) -> list[FakeTimerHandle]:
        return [h for h in self.handles if not h.cancelled]


def test_burst_collapses_into_one_call_with_latest_args() -> None:
    loop = FakeLoop()
    fired: list[tuple[float, str]] = []
    wrapped = debounce(lambda value: fired.append((loop.now_ms, value)), 300, loop=loop)

    wrapped("r")
    loop.advance_to(50)
    wrapped("ru")
    loop.advance_to(100)
    wrapped("rust")
    assert len(loop.pending()) == 1

    loop.advance_to(399)
    assert fired == []

    loop.advance_to(1000)
    assert fired == [(400, "rust")]
    assert wrapped.pending is False


def test_separate_bursts_fire_separately() -> None:
    loop = FakeLoop()
    fired: list[str] = []
    wrapped = debounce(fired.append, 100, loop=loop)

    wrapped("a")
    loop.advance_to(150)
    wrapped("b")
    loop.advance_to(300)

    assert fired == ["a", "b"]


def test_cancel_drops_pending_call() -> None:
    loop = FakeLoop()
    fired: list[str] = []
    wrapped = debounce(fired.append, 100, loop=loop)

    wrapped("a")
    assert wrapped.pending is True
    wrapped.cancel()
    loop.advance_to(500)

    assert fired == []
    assert wrapped.pending is False


def test_flush_runs_pending_call_immediately() -> None:
    loop = FakeLoop()
    fired: list[str] = []
    wrapped = debounce(fired.append, 100, loop=loop)

    wrapped("now")
    wrapped.flush()
    loop.advance_to(500)

    assert fired == ["now"]


def test_negative_wait_rejected() -> None:
    with pytest.raises(ValueError):
        debounce(lambda: None, -1)


@pytest.mark.asyncio
async def test_debounce_on_running_loop_supports_coroutines() -> None:
    seen: list[str] = []
    done = asyncio.Event()

    async def handler(value: str) -> None:
        seen.append(value)
        done.set()

    wrapped = debounce(handler, 20)
    wrapped("first")
    wrapped("second")

    await asyncio.wait_for(done.wait(), timeout=2.0)
    await asyncio.sleep(0.05)

    assert seen == ["second"]
