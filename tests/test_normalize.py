import pytest

from parahash.normalize import normalize_paragraph, normalize_paragraphs


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("*hi*", "hi"),
        ("__bold__ and _it_", "bold and it"),
        ("mixed *_*runs_*_ here", "mixed runs here"),
        ("a  b", "a b"),
        ("a\t\n  b", "a b"),
        ("see [the docs](http://example.com) now", "see the docs now"),
        ("[one](a) and [two](b)", "one and two"),
    ],
)
def test_normalize_paragraph(raw, expected):
    assert normalize_paragraph(raw) == expected


def test_escaped_markers_are_stripped_too():
    assert normalize_paragraph(r"2 \* 3") == "2 \\ 3"


def test_emphasis_is_stripped_before_links_are_rewritten():
    assert normalize_paragraph("[snake_case](http://x.org/a_b)") == "snakecase"


def test_whitespace_is_collapsed_before_links_are_rewritten():
    assert normalize_paragraph("[multi\n  word](http://x.org)") == "multi word"


def test_empty_brackets_are_not_links():
    assert normalize_paragraph("[](http://x.org)") == "[](http://x.org)"


def test_normalize_paragraphs_keeps_alignment():
    paras = ["*a*", "b  c", "d"]
    out = normalize_paragraphs(paras)
    assert len(out) == len(paras)
    assert out == ["a", "b c", "d"]


@pytest.mark.parametrize("raw", ["a\xa0b", "a\x0bb", "a" + chr(0x2003) + "b", "a\x1cb"])
def test_only_ascii_layout_whitespace_is_collapsed(raw):
    assert normalize_paragraph(raw) == raw


def test_form_feed_and_carriage_return_are_collapsed():
    assert normalize_paragraph("a\f\r\n b") == "a b"
