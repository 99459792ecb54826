"""Substring matching and snippet extraction over loaded documents."""

from __future__ import annotations

import re
from collections.abc import Sequence

from loguru import logger

from feedsearch.search.models import Document, MatchResult, QueryStatus, SearchOutcome
from feedsearch.utils.markup import collapse_whitespace, strip_markup

DEFAULT_MIN_QUERY_LENGTH = 2
DEFAULT_SNIPPET_LENGTH = 150


def normalize_query(raw: str | None) -> str:
    """Lower-case raw input text and collapse its whitespace."""
    return collapse_whitespace((raw or "").lower())


def search(
    documents: Sequence[Document],
    query: str | None,
    *,
    min_length: int = DEFAULT_MIN_QUERY_LENGTH,
    snippet_length: int = DEFAULT_SNIPPET_LENGTH,
) -> SearchOutcome:
    """
    Filter documents whose title or stripped content contains ``query``.

    Queries shorter than ``min_length`` are not searched; they come back as
    ``EMPTY_QUERY`` (no text) or ``TOO_SHORT``. Matches keep document order.
    """
    needle = normalize_query(query)
    if not needle:
        return SearchOutcome(query=needle, status=QueryStatus.EMPTY_QUERY)
    if len(needle) < min_length:
        return SearchOutcome(query=needle, status=QueryStatus.TOO_SHORT)

    matches: list[MatchResult] = []
    for doc in documents:
        text = collapse_whitespace(strip_markup(doc.content))
        title_match = needle in collapse_whitespace(doc.title.lower())
        content_match = needle in text.lower()
        if not (title_match or content_match):
            continue
        logger.debug("Matched document: {}", doc.title)
        matches.append(
            MatchResult(
                document=doc,
                snippet=extract_snippet(text, needle if content_match else "", snippet_length),
            )
        )

    status = QueryStatus.MATCHED if matches else QueryStatus.NO_RESULTS
    return SearchOutcome(query=needle, status=status, matches=matches)


def extract_snippet(text: str, query: str, length: int = DEFAULT_SNIPPET_LENGTH) -> str:
    """
    Take a ``length``-character window of ``text`` around the first occurrence of ``query``.

    The window is centered on the match and clamped to the text bounds. With no
    query, or no occurrence, the window is the text prefix.
    """
    if not text or length <= 0:
        return ""

    start = 0
    found = re.search(re.escape(query), text, re.IGNORECASE) if query else None
    if found:
        span = found.end() - found.start()
        if span >= length:
            start = found.start()
        else:
            center = found.start() + span // 2
            start = max(0, min(center - length // 2, len(text) - length))
    return collapse_whitespace(text[start : start + length])
