"""Base-32 alphabet and unpadded codec helpers."""

from __future__ import annotations

import base64
import string

ALPHABET = string.ascii_uppercase + "234567"
SYMBOL_BITS = 5
# Symbol whose value is 0; padding with it adds no bits to decoded bytes.
ZERO_SYMBOL = ALPHABET[0]
PAD_CHAR = "="

_SYMBOLS = frozenset(ALPHABET)
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def ascii_upper(text: str) -> str:
    """Uppercase ASCII letters only, leaving every other character as-is."""
    return text.translate(_ASCII_UPPER)


def is_symbol(char: str) -> bool:
    """Return True if ``char`` is an uppercase base-32 symbol."""
    return char in _SYMBOLS


def is_letter(char: str) -> bool:
    return char in string.ascii_uppercase


def encode_nopad(data: bytes) -> str:
    """Encode bytes as base-32 without trailing padding."""
    return base64.b32encode(data).decode("ascii").rstrip(PAD_CHAR)


def decode_nopad(text: str) -> bytes:
    """Decode unpadded base-32 text (uppercase symbols only)."""
    padding = -len(text) % 8
    return base64.b32decode(text + PAD_CHAR * padding)


__all__ = [
    "ALPHABET",
    "SYMBOL_BITS",
    "ZERO_SYMBOL",
    "ascii_upper",
    "is_symbol",
    "is_letter",
    "encode_nopad",
    "decode_nopad",
]
