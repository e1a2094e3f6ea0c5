"""Identifier encoding components."""

from .ids import (
    CHECKSUM_LENGTH,
    DATA_LENGTH,
    ENCODED_LENGTH,
    PREFIX_CAPACITY,
    TOTAL_LENGTH,
    embedded_prefix,
    generate,
    pad_prefix,
    validate_prefix,
)

__all__ = [
    "CHECKSUM_LENGTH",
    "DATA_LENGTH",
    "ENCODED_LENGTH",
    "PREFIX_CAPACITY",
    "TOTAL_LENGTH",
    "embedded_prefix",
    "generate",
    "pad_prefix",
    "validate_prefix",
]
