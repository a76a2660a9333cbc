"""Shared fixtures: isolate the user data directory for every test."""

import pytest

from routine_scheduler.core.catalog.registry import get_catalog


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point ROUTINE_SCHEDULER_HOME at an empty temp dir and reset the catalog cache."""
    home = tmp_path / "home"
    monkeypatch.setenv("ROUTINE_SCHEDULER_HOME", str(home))
    get_catalog.cache_clear()
    yield home
    get_catalog.cache_clear()
