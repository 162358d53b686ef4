from parahash.chunking import split_paragraphs


def test_splits_on_blank_lines_and_trims():
    text = "  First paragraph.\nStill first.  \n\n\tSecond.\n"
    assert split_paragraphs(text) == ["First paragraph.\nStill first.", "Second."]


def test_no_separator_yields_single_paragraph():
    assert split_paragraphs("  one line only \n") == ["one line only"]


def test_empty_and_whitespace_inputs_yield_nothing():
    assert split_paragraphs("") == []
    assert split_paragraphs("   \t ") == []
    assert split_paragraphs("\n\n\n\n\n") == []


def test_extra_blank_lines_do_not_create_empty_paragraphs():
    assert split_paragraphs("a\n\n\n\n\nb\n\n") == ["a", "b"]


def test_order_is_preserved():
    paras = [f"para {i}" for i in range(10)]
    assert split_paragraphs("\n\n".join(paras)) == paras


def test_only_literal_double_newline_is_a_boundary():
    # a line holding only spaces does not split
    assert split_paragraphs("a\n  \nb") == ["a\n  \nb"]
    assert split_paragraphs("a\r\n\r\nb") == ["a\r\n\r\nb"]


def test_unicode_spaces_are_trimmed():
    assert split_paragraphs("\xa0" + chr(0x3000) + "text\x0b\x85") == ["text"]


def test_information_separators_are_kept():
    assert split_paragraphs("\x1ctext\x1f") == ["\x1ctext\x1f"]
