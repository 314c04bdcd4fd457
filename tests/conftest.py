"""Pytest configuration and shared fixtures for eitherkit tests."""

from collections.abc import Generator

import pytest

from eitherkit.config import (
    ENV_LOG_FORMAT,
    ENV_LOG_LEVEL,
    ENV_TRACE_COLLECTORS,
    LibraryConfig,
    get_config,
    set_config,
)


# Pytest configuration
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


@pytest.fixture(autouse=True)
def restore_library_config() -> Generator[None, None, None]:
    """Keep tests from leaking the active library config."""
    saved = get_config()
    yield
    set_config(saved)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every EITHERKIT_* variable from the environment."""
    for key in (ENV_LOG_LEVEL, ENV_LOG_FORMAT, ENV_TRACE_COLLECTORS):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def tracing_config() -> LibraryConfig:
    """Activate collector tracing for the duration of a test."""
    config = LibraryConfig(trace_collectors=True)
    set_config(config)
    return config
