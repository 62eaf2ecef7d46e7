"""Shared pytest fixtures for fieldrules tests."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip FIELDRULES_* variables so host settings never leak into tests."""
    for key in list(os.environ):
        if key.startswith("FIELDRULES_"):
            monkeypatch.delenv(key)
