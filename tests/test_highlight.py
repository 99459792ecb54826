from feedsearch.search.highlight import MARK_OPEN, highlight
from feedsearch.utils.markup import collapse_whitespace, strip_markup


def _count_marks(text: str) -> int:
    return text.count(MARK_OPEN)


def test_highlight_wraps_every_occurrence_case_insensitively() -> None:
    result = highlight("Rust guide: learning rust, RUST!", "rust")

    assert result == "<mark>Rust</mark> guide: learning <mark>rust</mark>, <mark>RUST</mark>!"


def test_highlight_empty_query_returns_text_unchanged() -> None:
    for text in ["", "plain", "<b>bold</b>", "a < b & c"]:
        assert highlight(text, "") == text


def test_highlight_without_occurrence_returns_text_unchanged() -> None:
    text = "Nothing to see here"
    assert highlight(text, "rust") == text


def test_highlight_escapes_regex_metacharacters() -> None:
    assert highlight("use c++ (or c) [maybe]", "c++") == "use <mark>c++</mark> (or c) [maybe]"
    assert highlight("a.b axb", "a.b") == "<mark>a.b</mark> axb"
    assert highlight("price $5.00 ^up", "$5.") == "price <mark>$5.</mark>00 ^up"


def test_highlight_twice_does_not_double_wrap() -> None:
    text = "Rust and rust and more Rust"
    once = highlight(text, "rust")
    twice = highlight(once, "rust")

    assert twice == once
    assert _count_marks(twice) == 3


def test_highlight_twice_when_query_overlaps_marker_text() -> None:
    once = highlight("mark my words", "mark")
    twice = highlight(once, "mark")

    assert _count_marks(twice) == 1
    assert twice == "<mark>mark</mark> my words"


def test_highlight_escape_mode_escapes_surrounding_text() -> None:
    result = highlight("a <b> rust & more", "rust", escape=True)

    assert result == "a &lt;b&gt; <mark>rust</mark> &amp; more"


def test_highlight_escape_mode_with_empty_query() -> None:
    assert highlight("x < y", "", escape=True) == "x &lt; y"


def test_strip_markup_round_trip() -> None:
    samples = ["hello world", "  spaced  text  ", "line one\nline two", "unicode: 搜索 café"]
    for sample in samples:
        assert strip_markup(f"<p>{sample}</p>") == sample
        assert strip_markup(f"<div><span>{sample}</span></div>") == sample


def test_strip_markup_decodes_entities_and_handles_empty() -> None:
    assert strip_markup("Fish &amp; Chips") == "Fish & Chips"
    assert strip_markup("") == ""
    assert strip_markup(None) == ""


def test_collapse_whitespace() -> None:
    assert collapse_whitespace("  a \n\t b  ") == "a b"
