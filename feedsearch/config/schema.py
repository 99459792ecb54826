"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessagesConfig(Base):
    """User-visible text for the non-result states."""

    empty_query: str = "Enter a search keyword"
    too_short: str = "Enter at least 2 characters"
    no_results: str = "No matching posts found"
    error: str = "Search is temporarily unavailable"


class SearchConfig(Base):
    """Search widget configuration."""

    feed_url: str = "/search.xml"
    base_url: str = ""  # Prefix for site-relative feed URLs
    debounce_ms: int = Field(default=300, ge=0)
    min_query_length: int = Field(default=2, ge=1)
    snippet_length: int = Field(default=150, gt=0)
    fetch_timeout_s: float = Field(default=10.0, gt=0)
    messages: MessagesConfig = Field(default_factory=MessagesConfig)


class Config(Base):
    """Root configuration for feedsearch."""

    search: SearchConfig = Field(default_factory=SearchConfig)
