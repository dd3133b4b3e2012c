"""Shared pytest fixtures for utilkit tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from utilkit.randomness import integers


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's UTILKIT_* environment out of tests."""
    monkeypatch.delenv("UTILKIT_CONFIG", raising=False)
    monkeypatch.delenv("UTILKIT_LOGGING__VERBOSE", raising=False)
    monkeypatch.delenv("UTILKIT_LOGGING__FORMAT", raising=False)
    monkeypatch.delenv("UTILKIT_RANDOM__SEED", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fixed_random_int(monkeypatch: pytest.MonkeyPatch) -> Iterator[list[Any]]:
    """Make ``random_int`` return queued values; yields the queue."""
    queue: list[Any] = []

    def fake(max: int) -> int:  # noqa: A002
        return queue.pop(0)

    monkeypatch.setattr(integers, "random_int", fake)
    yield queue
