"""Tests for necl_core.chunk_utils."""

from necl_core.chunk_utils import (
    Line,
    find_outside_quotes,
    is_quoted,
    rfind_outside_quotes,
    split_top_level,
    strip_comments,
    unquote,
)


# ---------------------------------------------------------------------------
# strip_comments
# ---------------------------------------------------------------------------

def test_full_line_comment_dropped():
    assert strip_comments(["// header", "a = 1"]) == [Line(2, "a = 1")]

def test_indented_comment_dropped():
    assert strip_comments(["   // note"]) == []

def test_inline_comment_truncated():
    assert strip_comments(["a = 1 // one"]) == [Line(1, "a = 1")]

def test_comment_marker_inside_quotes_kept():
    assert strip_comments(['url = "http://example.com"']) == [
        Line(1, 'url = "http://example.com"')
    ]

def test_blank_lines_kept_with_numbers():
    lines = strip_comments(["a = 1", "", "// x", "b = 2"])
    assert [l.number for l in lines] == [1, 2, 4]


# ---------------------------------------------------------------------------
# Quoting
# ---------------------------------------------------------------------------

def test_is_quoted():
    assert is_quoted('"x"')
    assert is_quoted("'x'")
    assert not is_quoted("'x\"")
    assert not is_quoted('"')

def test_unquote_one_layer():
    assert unquote('"\'x\'"') == "'x'"
    assert unquote("plain") == "plain"

def test_find_outside_quotes():
    assert find_outside_quotes('"a:b" : c', ":") == 6
    assert find_outside_quotes('"a:b"', ":") == -1

def test_rfind_outside_quotes_with_end():
    text = "if a ? b : c"
    colon = rfind_outside_quotes(text, ":")
    assert colon == 9
    assert rfind_outside_quotes(text, "?", end=colon) == 5


# ---------------------------------------------------------------------------
# split_top_level
# ---------------------------------------------------------------------------

def test_split_simple():
    assert split_top_level(' "a", 1 ,true') == ['"a"', "1", "true"]

def test_split_keeps_quoted_commas():
    assert split_top_level('"a,b", 1') == ['"a,b"', "1"]

def test_split_keeps_nested_groups():
    assert split_top_level("[1,2], concat(a, b)") == ["[1,2]", "concat(a, b)"]

def test_split_empty():
    assert split_top_level("   ") == []

def test_split_trailing_separator():
    assert split_top_level("1, 2,") == ["1", "2", ""]
