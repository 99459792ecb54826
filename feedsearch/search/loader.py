"""Feed fetching and normalization into search documents."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import httpx
from defusedxml import ElementTree as SafeET
from loguru import logger

from feedsearch.search.models import Document

ENTRY_TAGS = ("item", "entry")
CONTENT_TAGS = ("content", "encoded", "description", "summary")


class FeedError(Exception):
    """Raised when the feed cannot be loaded."""


class TransportError(FeedError):
    """The feed request failed or returned a non-success status."""


class ParseError(FeedError):
    """The feed body is not well-formed XML."""


class FeedLoader:
    """Fetch an RSS or Atom feed and turn its entries into documents."""

    def __init__(self, base_url: str = "", timeout: float = 10.0):
        self.base_url = base_url
        self.timeout = timeout
        self.last_error: FeedError | None = None

    async def load(self, feed_url: str) -> list[Document]:
        """
        Load the feed, returning an empty list on any failure.

        The failure is logged and kept on ``last_error``; it is never raised.
        """
        try:
            body = await self.fetch(feed_url)
            documents = self.parse(body)
        except FeedError as e:
            logger.error("Failed to load search feed {}: {}", feed_url, e)
            self.last_error = e
            return []

        self.last_error = None
        return documents

    async def fetch(self, feed_url: str) -> bytes:
        """GET the feed body, raising ``TransportError`` on failure."""
        try:
            async with httpx.AsyncClient(base_url=self.base_url, follow_redirects=True) as client:
                response = await client.get(feed_url, timeout=self.timeout)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(f"HTTP error, status: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"request failed: {e}") from e
        return response.content

    def parse(self, body: str | bytes) -> list[Document]:
        """Parse feed XML into documents, raising ``ParseError`` on malformed input."""
        if not body or not body.strip():
            raise ParseError("feed body is empty")
        try:
            root = SafeET.fromstring(body)
        except (ET.ParseError, LookupError, ValueError) as e:
            raise ParseError(f"XML parse error: {e}") from e

        entries = [node for node in root.iter() if _local_name(node.tag) in ENTRY_TAGS]
        logger.debug("Found {} feed entries", len(entries))
        return [_to_document(entry) for entry in entries]


def _local_name(tag: object) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _children(entry: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in entry if _local_name(child.tag) == name]


def _text(node: ET.Element | None) -> str:
    if node is None:
        return ""
    return "".join(node.itertext()).strip()


def _link(entry: ET.Element) -> str:
    links = _children(entry, "link")
    with_href = [node for node in links if node.get("href")]
    for node in with_href:
        if node.get("rel", "alternate") == "alternate":
            return node.get("href", "").strip()
    if with_href:
        return with_href[0].get("href", "").strip()
    return _text(links[0]) if links else ""


def _to_document(entry: ET.Element) -> Document:
    titles = _children(entry, "title")
    content = ""
    for name in CONTENT_TAGS:
        nodes = _children(entry, name)
        if nodes:
            content = _text(nodes[0])
            break
    return Document(
        title=_text(titles[0]) if titles else "",
        url=_link(entry),
        content=content,
    )
