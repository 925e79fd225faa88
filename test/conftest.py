"""
Shared pytest configuration and fixtures for the confreg tests.
"""

import pytest

from confreg.config import IniConfigProvider


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without file system access")
    config.addinivalue_line("markers", "integration: tests reading and writing INI files")


@pytest.fixture
def ini_path(tmp_path):
    """Path to a not yet existing INI file inside a temporary directory."""
    return tmp_path / "settings.ini"


@pytest.fixture
def ini_provider(ini_path):
    return IniConfigProvider(ini_path)
