"""Feed search pipeline: loading, matching, highlighting, and rendering."""

from feedsearch.search.controller import SearchController
from feedsearch.search.debounce import Debouncer, debounce
from feedsearch.search.highlight import highlight
from feedsearch.search.loader import FeedError, FeedLoader, ParseError, TransportError
from feedsearch.search.matcher import extract_snippet, normalize_query, search
from feedsearch.search.models import Document, MatchResult, QueryStatus, SearchOutcome
from feedsearch.search.render import ErrorLine, ResultLine, SearchState, TipLine, render
from feedsearch.search.surface import InputSource, ResultList, ResultSurface, TextInput

__all__ = [
    "Debouncer",
    "Document",
    "ErrorLine",
    "FeedError",
    "FeedLoader",
    "InputSource",
    "MatchResult",
    "ParseError",
    "QueryStatus",
    "ResultLine",
    "ResultList",
    "ResultSurface",
    "SearchController",
    "SearchOutcome",
    "SearchState",
    "TextInput",
    "TipLine",
    "TransportError",
    "debounce",
    "extract_snippet",
    "highlight",
    "normalize_query",
    "render",
    "search",
]
