"""Shared fixtures for the netrc tests."""

from __future__ import annotations

from pathlib import Path

import pytest

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def key_path() -> Path:
    return TESTDATA / "key.json"


@pytest.fixture
def missing_key_path(tmp_path) -> Path:
    return tmp_path / "not-a-key.json"
