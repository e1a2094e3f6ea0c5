"""Tests for base32 helpers."""

from prefixed_id.utils.base32 import ALPHABET, ZERO_SYMBOL, ascii_upper, decode_nopad, encode_nopad


def test_zero_symbol_decodes_to_zero_bits() -> None:
    assert len(ALPHABET) == 32
    assert ZERO_SYMBOL == "A"
    assert decode_nopad(ZERO_SYMBOL * 8) == bytes(5)


def test_nopad_codec() -> None:
    assert encode_nopad(b"\xff") == "74"
    assert decode_nopad("74") == b"\xff"
    assert decode_nopad("XA") == b"\xb8"


def test_ascii_upper_leaves_non_ascii_alone() -> None:
    assert ascii_upper("abc7") == "ABC7"
    assert ascii_upper("ß") == "ß"
