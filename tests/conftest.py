"""Shared pytest fixtures and configuration."""

import pytest


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: calls the live GitHub API (local only)")


@pytest.fixture(autouse=True)
def _isolated_log_dir(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Keep log files written during app startup out of the working tree."""
    monkeypatch.setenv("KREEATE_LOG_DIR", str(tmp_path_factory.mktemp("logs")))
