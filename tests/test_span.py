from __future__ import annotations

import pytest

from msi_names.span import TextSpan


def test_of_covers_whole_string_and_keeps_buffer() -> None:
    text = "PROGRA~1|Program Files"
    span = TextSpan.of(text)
    assert (span.start, span.end) == (0, len(text))
    assert span.buffer is text
    assert span.text is text


def test_find_is_relative_to_window_but_returns_absolute_offset() -> None:
    span = TextSpan(buffer="a|b:c|d", start=4, end=7)
    assert span.find("|") == 5
    assert span.find(":") is None


def test_head_and_tail_exclude_separator() -> None:
    span = TextSpan.of("SRCDIR|SourceDir")
    index = span.find("|")
    assert index is not None
    assert span.head(index).text == "SRCDIR"
    assert span.tail(index).text == "SourceDir"
    assert span.head(index).buffer is span.buffer


def test_matches_compares_without_slicing() -> None:
    span = TextSpan(buffer="x:.", start=2, end=3)
    assert span.matches(".")
    assert not span.matches("..")
    assert not TextSpan.of("").matches(".")
    assert TextSpan(buffer="abc", start=3, end=3).matches("")


def test_equality_is_by_text() -> None:
    assert TextSpan.of("Alpha") == TextSpan(buffer=".:Alpha", start=2, end=7)
    assert TextSpan.of("Alpha") == "Alpha"
    assert hash(TextSpan.of("Alpha")) == hash(TextSpan(buffer=".:Alpha", start=2, end=7))


@pytest.mark.parametrize("start,end", [(-1, 2), (2, 1), (0, 4)])
def test_out_of_range_offsets_are_rejected(start: int, end: int) -> None:
    with pytest.raises(ValueError, match="out of range"):
        TextSpan(buffer="abc", start=start, end=end)
