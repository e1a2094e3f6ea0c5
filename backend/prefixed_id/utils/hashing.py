"""Hashing utilities."""

from __future__ import annotations

import hashlib


def checksum(data: bytes, length: int) -> bytes:
    """Return the first ``length`` bytes of the SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()[:length]


__all__ = ["checksum"]
