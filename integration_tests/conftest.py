"""Pytest configuration for end-to-end tests against a real database file."""

import pytest


def pytest_collection_modifyitems(items):
    """Mark everything under integration_tests/ so it can be deselected with -m."""
    for item in items:
        if "integration_tests" in item.path.parts:
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the configured data directory at a throwaway folder."""
    from fitlog.core.config import settings

    monkeypatch.setattr(settings, "data_dir", tmp_path / "data")
    return settings.data_dir
