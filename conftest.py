"""Project-wide pytest configuration.

Tests marked ``e2e`` drive a real browser and are skipped unless
``--run-e2e`` is passed or ``E2E_ENABLED=true`` is set.
"""

import pytest

from src.config.browser_config import BrowserSettings
from src.utils.logging_utils import setup_logging


def pytest_addoption(parser):
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="run end-to-end tests that launch real browsers",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: drives a real browser")
    config.addinivalue_line("markers", "network: needs internet access")
    config.addinivalue_line("markers", "smoke: quick health check of a critical path")
    config.addinivalue_line("markers", "flaky(reason): known to be unstable")

    setup_logging(BrowserSettings().log_level)


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e") or BrowserSettings().run_e2e:
        return

    skip_e2e = pytest.mark.skip(reason="needs --run-e2e or E2E_ENABLED=true")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)
