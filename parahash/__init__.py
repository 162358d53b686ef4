"""Hash-titled paragraph outlines for plain-text documents."""

from .chunking import split_paragraphs
from .encoding import REPRESENTATIONS, encode_digest, format_title, truncate
from .exporter import render_document, write_document
from .hashing import HashedDocument, aggregate_digest, hash_document, paragraph_digest, paragraph_digests
from .normalize import normalize_paragraph, normalize_paragraphs

__all__ = [
    "split_paragraphs",
    "normalize_paragraph",
    "normalize_paragraphs",
    "paragraph_digest",
    "paragraph_digests",
    "aggregate_digest",
    "hash_document",
    "HashedDocument",
    "REPRESENTATIONS",
    "encode_digest",
    "format_title",
    "truncate",
    "render_document",
    "write_document",
]
