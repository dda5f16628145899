"""Configuration for pytest."""

import pytest

from shell_split_mcp.records import Cursor


def pytest_addoption(parser):
    """Add command-line options to pytest."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests that start the server over stdio",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as starting a server subprocess")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is specified."""
    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="Integration tests need --run-integration option")

    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def cursor():
    """Return a fresh, unbound cursor."""
    return Cursor()
