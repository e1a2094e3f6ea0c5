"""Test fixtures for prefixed-id."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pytest

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture(autouse=True)
def reset_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset cached settings, logging handlers and PXID_ environment between tests."""
    for key in list(os.environ):
        if key.startswith("PXID_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HOME", str(tmp_path))

    from prefixed_id.core.config import get_settings

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(scope="session")
def long_prefix() -> str:
    return "toolongtoevenfitinthegeneratedpackageidbutwhocaresitshouldbetrimmed"
