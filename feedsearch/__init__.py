"""feedsearch - in-memory full-text search over a static site's feed."""

__version__ = "0.1.0"
