"""Errors raised while generating prefixed identifiers."""

from __future__ import annotations


class GenerateError(ValueError):
    """Base class for prefix validation failures."""

    message = "Invalid prefix"

    def __init__(self, prefix: str) -> None:
        super().__init__(self.message)
        self.prefix = prefix


class InvalidCharacter(GenerateError):
    message = "Prefix can include only valid base32 characters (a-z, 2-7)"


class InvalidFirstCharacter(GenerateError):
    message = "Prefix has to start with a letter"


__all__ = ["GenerateError", "InvalidCharacter", "InvalidFirstCharacter"]
