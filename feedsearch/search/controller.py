"""Search controller: load the feed once, then answer debounced queries."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

from loguru import logger as default_logger

from feedsearch.config.schema import SearchConfig
from feedsearch.search.debounce import Debouncer, debounce
from feedsearch.search.loader import FeedLoader
from feedsearch.search.matcher import normalize_query, search
from feedsearch.search.models import Document, QueryStatus, SearchOutcome
from feedsearch.search.render import SearchState, render
from feedsearch.search.surface import InputSource, ResultSurface


class SearchController:
    """
    Owns the search lifecycle for one input and one result surface.

    It:
    1. Binds input events through a debouncer
    2. Loads the feed exactly once (LOADING -> READY or DEGRADED)
    3. Runs matcher + highlighter for each settled query
    4. Replaces the result surface with the rendered lines
    """

    def __init__(
        self,
        input_source: InputSource,
        surface: ResultSurface,
        feed_url: str | None = None,
        config: SearchConfig | None = None,
        loader: FeedLoader | None = None,
        logger: Any | None = None,
    ):
        self.config = config or SearchConfig()
        self.input = input_source
        self.surface = surface
        self.feed_url = feed_url or self.config.feed_url
        self.loader = loader or FeedLoader(
            base_url=self.config.base_url,
            timeout=self.config.fetch_timeout_s,
        )
        self.logger = logger or default_logger.bind(component="search")

        self.state = SearchState.UNINITIALIZED
        self.documents: list[Document] = []
        self._pending_query: str | None = None
        self._debounced: Debouncer | None = None
        self._unsubscribe: Callable[[], None] | None = None

    async def start(self) -> None:
        """Bind the input and load the feed. Later calls do nothing."""
        if self.state != SearchState.UNINITIALIZED:
            return

        self._bind()
        self.state = SearchState.LOADING
        self.logger.info("Loading search feed from {}", self.feed_url)

        documents = await self.loader.load(self.feed_url)
        if self.loader.last_error is not None:
            self.state = SearchState.DEGRADED
            self.logger.error("Search unavailable: {}", self.loader.last_error)
            outcome = SearchOutcome(query="", status=QueryStatus.EMPTY_QUERY)
            self.surface.replace(render(self.state, outcome, self.config.messages))
            return

        self.documents = documents
        self.state = SearchState.READY
        self.logger.info("Search feed loaded, {} documents", len(documents))

        if self._pending_query is not None:
            query, self._pending_query = self._pending_query, None
            self.handle_query(query)

    def handle_query(self, raw: str | None = None) -> SearchOutcome:
        """Run one search for ``raw`` (or the input's current value) and render it."""
        if raw is None:
            raw = self.input.value
        if self.state == SearchState.LOADING:
            self._pending_query = raw

        outcome = search(
            self.documents,
            normalize_query(raw),
            min_length=self.config.min_query_length,
            snippet_length=self.config.snippet_length,
        )
        self.logger.debug(
            "Search executed: query={!r} status={} results={} documents={}",
            outcome.query,
            outcome.status.value,
            len(outcome.matches),
            len(self.documents),
        )
        self.surface.replace(render(self.state, outcome, self.config.messages))
        return outcome

    def close(self) -> None:
        """Cancel any pending query and stop listening to the input."""
        if self._debounced is not None:
            self._debounced.cancel()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _bind(self) -> None:
        self._debounced = debounce(
            self._on_input,
            self.config.debounce_ms,
            loop=asyncio.get_running_loop(),
        )
        self._unsubscribe = self.input.subscribe(self._debounced)

    def _on_input(self, value: str) -> None:
        self.logger.debug("Search input: {!r}", value)
        self.handle_query(value)
