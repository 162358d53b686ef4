"""Per-paragraph and whole-document SHA-256 digests."""

from __future__ import annotations

import dataclasses
import hashlib
from typing import Iterable, Tuple

from .chunking import split_paragraphs
from .normalize import normalize_paragraphs


def paragraph_digest(normalized: str) -> bytes:
    return hashlib.sha256(normalized.encode("utf-8")).digest()


def paragraph_digests(normalized: Iterable[str]) -> list[bytes]:
    return [paragraph_digest(p) for p in normalized]


def aggregate_digest(digests: Iterable[bytes]) -> bytes:
    """Hash of the raw digest bytes concatenated in paragraph order.

    With no paragraphs this is the SHA-256 of the empty byte string.
    """
    h = hashlib.sha256()
    for d in digests:
        h.update(d)
    return h.digest()


@dataclasses.dataclass(frozen=True, slots=True)
class HashedDocument:
    """Paragraphs of one document with their digests, index-aligned."""

    paragraphs: Tuple[str, ...]
    normalized: Tuple[str, ...]
    digests: Tuple[bytes, ...]
    aggregate: bytes

    def __len__(self) -> int:
        return len(self.paragraphs)

    def sections(self):
        return zip(self.paragraphs, self.digests)


def hash_document(text: str) -> HashedDocument:
    paras = split_paragraphs(text)
    normalized = normalize_paragraphs(paras)
    digests = paragraph_digests(normalized)
    return HashedDocument(
        paragraphs=tuple(paras),
        normalized=tuple(normalized),
        digests=tuple(digests),
        aggregate=aggregate_digest(digests),
    )
