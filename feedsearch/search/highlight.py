"""Query highlighting for result titles and snippets."""

from __future__ import annotations

import html
import re

MARK_OPEN = "<mark>"
MARK_CLOSE = "</mark>"

_MARKED_SPAN_RE = re.compile(rf"{re.escape(MARK_OPEN)}[\s\S]*?{re.escape(MARK_CLOSE)}")


def highlight(text: str | None, query: str | None, *, escape: bool = False) -> str:
    """
    Wrap every case-insensitive occurrence of ``query`` in ``<mark>`` tags.

    Spans that are already marked are left alone, so applying the function
    twice never nests markers. With ``escape=True`` the surrounding text and
    the matched text are HTML-escaped, and existing ``<mark>`` spans are
    treated as plain text.

    Args:
        text: Plain text to highlight.
        query: Substring to look for. Regex metacharacters are matched literally.
        escape: HTML-escape everything except the inserted markers.

    Returns:
        The text with markers inserted, or ``text`` unchanged when ``query``
        is empty or does not occur.
    """
    if not text:
        return text or ""
    if not query:
        return html.escape(text, quote=False) if escape else text

    pattern = re.compile(re.escape(query), re.IGNORECASE)
    if escape:
        return _mark(text, pattern, escape=True)

    parts: list[str] = []
    cursor = 0
    for span in _MARKED_SPAN_RE.finditer(text):
        parts.append(_mark(text[cursor : span.start()], pattern, escape=False))
        parts.append(span.group(0))
        cursor = span.end()
    parts.append(_mark(text[cursor:], pattern, escape=False))
    return "".join(parts)


def _mark(segment: str, pattern: re.Pattern[str], *, escape: bool) -> str:
    if not segment:
        return segment

    def esc(value: str) -> str:
        return html.escape(value, quote=False) if escape else value

    pieces: list[str] = []
    cursor = 0
    for match in pattern.finditer(segment):
        if match.start() == match.end():
            continue
        pieces.append(esc(segment[cursor : match.start()]))
        pieces.append(f"{MARK_OPEN}{esc(match.group(0))}{MARK_CLOSE}")
        cursor = match.end()
    if cursor == 0:
        return esc(segment)
    pieces.append(esc(segment[cursor:]))
    return "".join(pieces)
