"""
Lossless bytes <-> str mapping for fetched documents.

Bodies are decoded as UTF-8, and any byte that is not valid UTF-8 is kept as a
lone surrogate so that encoding the text again yields the original bytes.
Feeds in other charsets therefore pass through unchanged, prolog included.
"""

from __future__ import annotations

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def decode_body(data: bytes) -> str:
    return data.decode(ENCODING, errors=ERRORS)


def encode_document(text: str) -> bytes:
    return text.encode(ENCODING, errors=ERRORS)
