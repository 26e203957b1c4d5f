"""Shared test fixtures."""

from __future__ import annotations

import threading

import pytest

from numkit.core import rng as rng_module
from numkit.core.rng import RandomEngine


@pytest.fixture
def engine() -> RandomEngine:
    """Deterministic engine for tests."""
    return RandomEngine(42)


@pytest.fixture
def fresh_shared_engine(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start the test with no shared or per-thread engine created yet."""
    monkeypatch.setattr(rng_module, "_shared_engine", None)
    monkeypatch.setattr(rng_module, "_thread_local", threading.local())
