"""Textual representations of digests and their truncated titles."""

from __future__ import annotations

import functools

import base58
from mnemonic import Mnemonic

from .errors import RepresentationError, TruncationError

DEFAULT_REPRESENTATION = "hex"
REPRESENTATIONS = ("hex", "base58", "bip39")


@functools.lru_cache(maxsize=1)
def _mnemonic() -> Mnemonic:
    return Mnemonic("english")


def _hex(digest: bytes) -> str:
    return digest.hex()


def _base58(digest: bytes) -> str:
    # big-integer encoding: leading zero bytes are not preserved
    value = int.from_bytes(digest, "big")
    return base58.b58encode_int(value, default_one=False).decode("ascii")


def _bip39(digest: bytes) -> str:
    return _mnemonic().to_mnemonic(digest)


_ENCODERS = {
    "hex": _hex,
    "base58": _base58,
    "bip39": _bip39,
}


def check_representation(rep: str) -> str:
    if rep not in _ENCODERS:
        raise RepresentationError(
            f"unknown representation '{rep}' (expected one of: {', '.join(REPRESENTATIONS)})"
        )
    return rep


def encode_digest(digest: bytes, rep: str = DEFAULT_REPRESENTATION) -> str:
    return _ENCODERS[check_representation(rep)](digest)


def truncate(title: str, limit: int) -> str:
    """Cut a title to ``limit`` words, or ``limit`` characters if it has no spaces.

    A limit of zero or less leaves the title unchanged. Asking for more words
    or characters than the title holds raises TruncationError.
    """
    if limit <= 0:
        return title
    if " " in title:
        words = title.split(" ")
        if limit > len(words):
            raise TruncationError(f"cannot take {limit} words from a {len(words)}-word title")
        return " ".join(words[:limit])
    if limit > len(title):
        raise TruncationError(f"cannot take {limit} characters from a {len(title)}-character title")
    return title[:limit]


def format_title(digest: bytes, rep: str, limit: int) -> str:
    return truncate(encode_digest(digest, rep), limit)
