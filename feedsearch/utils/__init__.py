"""Utility functions for feedsearch."""

from feedsearch.utils.markup import collapse_whitespace, strip_markup

__all__ = ["collapse_whitespace", "strip_markup"]
