"""Prefixed identifier generation.

An identifier is the unpadded, lowercased base-32 rendering of a 20 byte
buffer::

    payload (12 bytes)                      checksum (8 bytes)
    [decoded prefix | random bytes .....]   [sha256(payload)[:8]]

The prefix is decoded from base-32 and written over the front of the random
payload, so the encoded identifier starts with the prefix itself.
"""

from __future__ import annotations

import math
import secrets

from prefixed_id.core.errors import InvalidCharacter, InvalidFirstCharacter
from prefixed_id.core.logging import get_logger
from prefixed_id.utils.base32 import (
    SYMBOL_BITS,
    ZERO_SYMBOL,
    ascii_upper,
    decode_nopad,
    encode_nopad,
    is_letter,
    is_symbol,
)
from prefixed_id.utils.hashing import checksum

DATA_LENGTH = 12
CHECKSUM_LENGTH = 8
TOTAL_LENGTH = DATA_LENGTH + CHECKSUM_LENGTH
ENCODED_LENGTH = math.ceil(TOTAL_LENGTH * 8 / SYMBOL_BITS)
# Prefix symbols reproduced in full by every identifier.
PREFIX_CAPACITY = DATA_LENGTH * 8 // SYMBOL_BITS

logger = get_logger(__name__)


def pad_prefix(prefix: str) -> str:
    """Pad ``prefix`` with the zero symbol until its bits fill whole bytes.

    The result is always a valid unpadded base-32 length; the sub-byte tail
    the decoder drops consists of zero bits only.
    """
    remainder = len(prefix) * SYMBOL_BITS % 8
    if not remainder:
        return prefix
    missing = math.ceil((8 - remainder) / SYMBOL_BITS)
    return prefix + ZERO_SYMBOL * missing


def validate_prefix(prefix: str) -> str:
    """Validate ``prefix`` and return it uppercased and padded for decoding.

    Raises:
        InvalidCharacter: a symbol is outside ``a-z``/``2-7``.
        InvalidFirstCharacter: the prefix starts with a digit.
    """
    padded = pad_prefix(ascii_upper(prefix))
    if not all(is_symbol(char) for char in padded):
        raise InvalidCharacter(prefix)
    if prefix and not is_letter(padded[0]):
        raise InvalidFirstCharacter(prefix)
    return padded


def embedded_prefix(prefix: str) -> str:
    """Return the part of ``prefix`` every generated identifier starts with."""
    validate_prefix(prefix)
    return prefix[:PREFIX_CAPACITY].lower()


def generate(prefix: str) -> str:
    """Generate a random identifier that begins with ``prefix``.

    Prefixes longer than :data:`PREFIX_CAPACITY` symbols are truncated
    silently; the empty prefix yields a fully random identifier.
    """
    decoded = decode_nopad(validate_prefix(prefix))
    if len(decoded) > DATA_LENGTH:
        logger.debug(
            "Prefix truncated to %s bytes",
            DATA_LENGTH,
            extra={"ctx_prefix": prefix, "ctx_decoded_bytes": len(decoded)},
        )

    payload = bytearray(secrets.token_bytes(DATA_LENGTH))
    embedded = decoded[:DATA_LENGTH]
    payload[: len(embedded)] = embedded

    data = bytes(payload) + checksum(bytes(payload), CHECKSUM_LENGTH)
    return encode_nopad(data).lower()


__all__ = [
    "DATA_LENGTH",
    "CHECKSUM_LENGTH",
    "TOTAL_LENGTH",
    "ENCODED_LENGTH",
    "PREFIX_CAPACITY",
    "pad_prefix",
    "validate_prefix",
    "embedded_prefix",
    "generate",
]
