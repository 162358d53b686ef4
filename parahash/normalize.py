"""Markup-insensitive view of a paragraph, used only as hash input."""

import re

# escaped \* and \_ are stripped like bare markers
_EMPHASIS = re.compile(r"[*_]+")
# only space, tab, newline, form feed and carriage return; NBSP and \v are kept
_WHITESPACE = re.compile(r"[\t\n\f\r ]+")
_LINK = re.compile(r"\[([^\]]+)\]\([^)]+\)")

def normalize_paragraph(text: str) -> str:
    text = _EMPHASIS.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    return _LINK.sub(r"\1", text)

def normalize_paragraphs(paras: list[str]) -> list[str]:
    return [normalize_paragraph(p) for p in paras]
