"""Shared pytest configuration and fixtures for sheetrender tests."""

import pytest

from sheetrender.backend.memory import InMemoryBackend
from sheetrender.context import SheetContext


def pytest_addoption(parser):
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Include tests marked @pytest.mark.slow (e.g. live Google Sheets)",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests as slow (skipped unless --run-slow)")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-slow"):
        return
    skip = pytest.mark.skip(reason="slow test — pass --run-slow to include")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def backend() -> InMemoryBackend:
    """Local document with a "Demo" sheet (id 0) and an "Other" sheet (id 1)."""
    return InMemoryBackend({"Demo": (1000, 26), "Other": (50, 10)})


@pytest.fixture
def context(backend) -> SheetContext:
    return SheetContext("doc-123", backend)


@pytest.fixture
def project_rows() -> list:
    return [
        ["Surf Schedule App", "Lidia", 6, 750],
        ["Invoice Generator", "Lidia", 4, 520],
        ["ColorMyPie Add-on", "Lidia", 3, 380],
        ["Client Dashboard", "Lidia", 5, 640],
    ]
