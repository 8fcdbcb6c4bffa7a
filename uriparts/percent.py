"""
Percent-encoding as described in `RFC 3986 section 2.1`_.

Encoding is total: every byte outside the unreserved set becomes ``%XX``
with upper-case hex digits. Decoding is permissive: a ``%`` not followed by
two hex digits is passed through untouched rather than raising.

>>> encode("a b/c")
'a%20b%2Fc'
>>> decode("a%20b%2fc")
'a b/c'
>>> decode("100%")
'100%'

.. _RFC 3986 section 2.1: https://tools.ietf.org/html/rfc3986#section-2.1
"""
from __future__ import annotations

import re

from typing_extensions import Final

from uriparts.constants import UNRESERVED_CHARACTERS

__all__ = ["encode", "decode", "encode_bytes", "decode_bytes"]

# str values are encoded as UTF-8. Lone surrogates carry undecodable bytes
# through decode() -> encode() unchanged.
TEXT_ENCODING: Final = "utf-8"
TEXT_ERRORS: Final = "surrogateescape"

_UNRESERVED_BYTES: Final = frozenset(UNRESERVED_CHARACTERS.encode("ascii"))

# Indexed by byte value
PERCENT_ENCODED: Final[tuple[str, ...]] = tuple(
    "%{0:02X}".format(byte) for byte in range(256)
)

_ENCODE_TABLE: Final[tuple[str, ...]] = tuple(
    chr(byte) if byte in _UNRESERVED_BYTES else PERCENT_ENCODED[byte]
    for byte in range(256)
)

_PCT_ENCODED: Final = re.compile(rb"%([0-9A-Fa-f]{2})")


def encode_bytes(data: bytes) -> str:
    return "".join(_ENCODE_TABLE[byte] for byte in data)


def decode_bytes(text: str | bytes) -> bytes:
    if isinstance(text, str):
        text = text.encode(TEXT_ENCODING, TEXT_ERRORS)
    return _PCT_ENCODED.sub(lambda m: bytes([int(m.group(1), 16)]), text)


def encode(text: str) -> str:
    return encode_bytes(text.encode(TEXT_ENCODING, TEXT_ERRORS))


def decode(text: str) -> str:
    return decode_bytes(text).decode(TEXT_ENCODING, TEXT_ERRORS)
