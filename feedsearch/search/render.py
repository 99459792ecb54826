"""Pure rendering of search state into result-list lines."""

from __future__ import annotations

import html
from dataclasses import dataclass
from enum import Enum

from feedsearch.config.schema import MessagesConfig
from feedsearch.search.highlight import highlight
from feedsearch.search.models import QueryStatus, SearchOutcome

ELLIPSIS = "..."


class SearchState(str, Enum):
    """Lifecycle of a search controller."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    DEGRADED = "degraded"


@dataclass(slots=True, frozen=True)
class TipLine:
    """Informational line: empty query, too short, or no results."""

    message: str
    css_class: str = "search-tip"

    def to_html(self) -> str:
        return f'<li class="{self.css_class}">{html.escape(self.message, quote=False)}</li>'


@dataclass(slots=True, frozen=True)
class ErrorLine:
    """Shown when the feed could not be loaded."""

    message: str
    css_class: str = "search-error"

    def to_html(self) -> str:
        return f'<li class="{self.css_class}">{html.escape(self.message, quote=False)}</li>'


@dataclass(slots=True, frozen=True)
class ResultLine:
    """One matching document. ``title`` and ``snippet`` are escaped and highlighted."""

    url: str
    title: str
    snippet: str
    css_class: str = "search-result-item"

    def to_html(self) -> str:
        return (
            f'<li class="{self.css_class}">'
            f'<a href="{html.escape(self.url)}">'
            f"<h4>{self.title}</h4>"
            f"<p>{self.snippet}{ELLIPSIS}</p>"
            "</a></li>"
        )


RenderedLine = TipLine | ErrorLine | ResultLine


def render(
    state: SearchState,
    outcome: SearchOutcome,
    messages: MessagesConfig | None = None,
) -> list[RenderedLine]:
    """Map controller state and a search outcome to the lines to display."""
    messages = messages or MessagesConfig()

    if state == SearchState.DEGRADED:
        return [ErrorLine(messages.error)]
    if outcome.status == QueryStatus.EMPTY_QUERY:
        return [TipLine(messages.empty_query)]
    if outcome.status == QueryStatus.TOO_SHORT:
        return [TipLine(messages.too_short)]
    if not outcome.matches:
        return [TipLine(messages.no_results)]

    return [
        ResultLine(
            url=match.document.url,
            title=highlight(match.document.title, outcome.query, escape=True),
            snippet=highlight(match.snippet, outcome.query, escape=True),
        )
        for match in outcome.matches
    ]
