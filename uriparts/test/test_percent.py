from __future__ import annotations

import pytest

from uriparts import percent
from uriparts.constants import UNRESERVED_CHARACTERS

RESERVED_BYTES = [b for b in range(256) if chr(b) not in UNRESERVED_CHARACTERS]


def test_table_has_an_entry_per_byte() -> None:
    assert len(percent.PERCENT_ENCODED) == 256
    assert percent.PERCENT_ENCODED[0x00] == "%00"
    assert percent.PERCENT_ENCODED[0x2F] == "%2F"
    assert percent.PERCENT_ENCODED[0xFF] == "%FF"


def test_unreserved_characters_are_not_encoded() -> None:
    assert percent.encode(UNRESERVED_CHARACTERS) == UNRESERVED_CHARACTERS
    assert percent.decode(UNRESERVED_CHARACTERS) == UNRESERVED_CHARACTERS


@pytest.mark.parametrize("byte", RESERVED_BYTES)
def test_encode_byte(byte: int) -> None:
    encoded = percent.encode_bytes(bytes([byte]))
    assert encoded == "%{0:02X}".format(byte)
    assert percent.decode_bytes(encoded) == bytes([byte])


@pytest.mark.parametrize(
    "text,encoded",
    [
        ("", ""),
        ("a b", "a%20b"),
        ("user:pass", "user%3Apass"),
        ("100%", "100%25"),
        ("é", "%C3%A9"),
        ("[::1]", "%5B%3A%3A1%5D"),
    ],
)
def test_encode(text: str, encoded: str) -> None:
    assert percent.encode(text) == encoded
    assert percent.decode(encoded) == text


@pytest.mark.parametrize(
    "encoded,decoded",
    [
        ("%zz", "%zz"),
        ("100%", "100%"),
        ("%4", "%4"),
        ("%%41", "%A"),
        ("%41%", "A%"),
        ("%g1%41", "%g1A"),
        ("%2f%2F", "//"),
        ("%", "%"),
    ],
)
def test_decode_passes_malformed_escapes_through(encoded: str, decoded: str) -> None:
    assert percent.decode(encoded) == decoded


def test_decode_bytes_accepts_bytes() -> None:
    assert percent.decode_bytes(b"a%20b") == b"a b"


def test_undecodable_bytes_round_trip() -> None:
    decoded = percent.decode("%FF%FE")
    assert percent.encode(decoded) == "%FF%FE"
