"""
Pytest configuration and shared fixtures for all tests.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add src to sys.path so the package imports without installation
src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from fake_grafana import FakeGrafana  # noqa: E402
from grafana_orgs.api import GrafanaAPI  # noqa: E402


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attached so they do not outlive captured streams."""
    yield
    logger = logging.getLogger("grafana_orgs")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fake_grafana():
    """In-memory Grafana organization backend."""
    return FakeGrafana()


@pytest.fixture
def api(fake_grafana):
    """Client whose session is served by the in-memory backend."""
    client = GrafanaAPI(base_url="http://grafana.local:3000/", api_key="test-token")
    client.session.request = fake_grafana.handle
    yield client
    client.close()


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring a Grafana instance"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
