"""Shared test fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from delegate_matcher import MatcherSettings, PatchScope


@pytest.fixture
def temp_dir() -> Path:
    """Temporary directory for filesystem-based tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def settings() -> MatcherSettings:
    """Default settings, independent of any config on the machine running the tests."""
    return MatcherSettings()


@pytest.fixture
def class_scope_settings() -> MatcherSettings:
    return MatcherSettings(patch_scope=PatchScope.CLASS)
