"""Shared search models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(slots=True, frozen=True)
class Document:
    """One feed entry, normalized."""

    title: str = ""
    url: str = ""
    content: str = ""


@dataclass(slots=True, frozen=True)
class MatchResult:
    """A matching document with its plain-text snippet."""

    document: Document
    snippet: str = ""


class QueryStatus(str, Enum):
    """Outcome of a single search call."""

    EMPTY_QUERY = "empty_query"
    TOO_SHORT = "too_short"
    NO_RESULTS = "no_results"
    MATCHED = "matched"


@dataclass(slots=True)
class SearchOutcome:
    """Result of ``search``: a status plus the matches in document order."""

    query: str
    status: QueryStatus
    matches: list[MatchResult] = field(default_factory=list)
