"""Shared fixtures for updater tests."""

from unittest.mock import Mock

import pytest

from updater.logging.context import clear_log_context
from updater.package_managers import PackageManager
from updater.service import ReportingService


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def deprecated_bundler():
    """Bundler v1, deprecated in favour of v2 and v3."""
    return PackageManager(
        "bundler", "1", deprecated_versions=["1"], supported_versions=["2", "3"]
    )


@pytest.fixture
def supported_bundler():
    """Bundler v2, which is still supported."""
    return PackageManager(
        "bundler", "2", deprecated_versions=["1"], supported_versions=["2", "3"]
    )


@pytest.fixture
def mock_service():
    """Reporting service double."""
    return Mock(spec=ReportingService)


@pytest.fixture
def mock_logger():
    """Logger double recording warning/error calls."""
    return Mock()


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set the environment variables required by the updater."""
    monkeypatch.setenv("DEPENDABOT_API_URL", "http://localhost:3001")
    monkeypatch.setenv("DEPENDABOT_JOB_ID", "1234")
    monkeypatch.setenv("DEPENDABOT_JOB_TOKEN", "job-token")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
