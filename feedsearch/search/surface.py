"""Input and output collaborators of the search controller."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable, Protocol

from feedsearch.search.render import RenderedLine

InputListener = Callable[[str], None]


class InputSource(Protocol):
    """A text input: its current value plus change notifications."""

    @property
    def value(self) -> str: ...

    def subscribe(self, listener: InputListener) -> Callable[[], None]: ...


class ResultSurface(Protocol):
    """A list container whose contents are replaced on every render."""

    def replace(self, lines: Sequence[RenderedLine]) -> None: ...


class TextInput:
    """In-memory text input that notifies listeners on every change."""

    def __init__(self, value: str = ""):
        self._value = value
        self._listeners: list[InputListener] = []

    @property
    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        """Set the value and emit an input event."""
        self._value = value
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, listener: InputListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


class ResultList:
    """In-memory result container."""

    def __init__(self) -> None:
        self.lines: list[RenderedLine] = []
        self.render_count = 0

    def replace(self, lines: Sequence[RenderedLine]) -> None:
        self.lines = list(lines)
        self.render_count += 1

    @property
    def html(self) -> str:
        return "".join(line.to_html() for line in self.lines)
