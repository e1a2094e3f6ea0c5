"""Pydantic DTOs for machine-readable CLI output."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GenerateResult(BaseModel):
    prefix: str
    ids: list[str] = Field(default_factory=list)
    error: str | None = None


class CheckResult(BaseModel):
    prefix: str
    valid: bool
    embedded: str | None = Field(default=None, description="Prefix text every ID starts with")
    error: str | None = None


__all__ = ["GenerateResult", "CheckResult"]
