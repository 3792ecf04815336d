"""Browser fixtures for end-to-end tests.

``class_browser`` gives every test class its own browser; ``shared_browser``
is launched once for the whole run. Pages and contexts taken from
``shared_browser`` must be closed by the test that opened them.
"""

from pathlib import Path
from typing import AsyncIterator

import pytest
import pytest_asyncio
from playwright.async_api import Page

from src.browser.browser_session import BrowserSession
from src.config.browser_config import BrowserSettings, Timeouts


@pytest.fixture(scope="session")
def browser_settings() -> BrowserSettings:
    return BrowserSettings()


@pytest.fixture(scope="session")
def screenshots_root(browser_settings) -> Path:
    """Root directory for screenshots, from ``E2E_SCREENSHOTS_DIR``."""
    return Path(browser_settings.screenshots_dir)


@pytest_asyncio.fixture(scope="class", loop_scope="session")
async def class_browser(browser_settings) -> AsyncIterator[BrowserSession]:
    async with BrowserSession(
        browser_settings.browser, browser_settings.launch_options()
    ) as session:
        yield session


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def shared_browser(browser_settings) -> AsyncIterator[BrowserSession]:
    async with BrowserSession(
        browser_settings.browser, browser_settings.launch_options()
    ) as session:
        yield session


@pytest_asyncio.fixture(loop_scope="session")
async def page(class_browser) -> AsyncIterator[Page]:
    page = await class_browser.new_page()
    page.set_default_timeout(Timeouts.DEFAULT_TIMEOUT)
    page.set_default_navigation_timeout(Timeouts.NAVIGATION_TIMEOUT)
    yield page
    await page.close()
