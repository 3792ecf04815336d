"""Reusable page actions for end-to-end tests.

Each helper wraps one or two Playwright calls. Apart from
``wait_for_element_visible``, errors from Playwright or the filesystem
propagate to the calling test unchanged.
"""

from datetime import datetime
from pathlib import Path
from typing import Awaitable, Callable, Union
import logging

from playwright.async_api import BrowserContext, Page, Response

from src.browser.network_interceptor import NetworkInterceptor
from src.models.browser_models import NetworkMock

logger = logging.getLogger(__name__)

SCROLL_SETTLE_MS = 500

# Served through a route, so no DNS lookup or network access happens
LOCAL_APP_URL = "https://example.test/"

_SCROLL_INTO_VIEW = """
(selector) => {
    document.querySelector(selector).scrollIntoView({
        behavior: 'smooth',
        block: 'center'
    });
}
"""


async def capture_screenshot(
    page: Page, test_name: str, root: Union[str, Path] = "screenshots"
) -> Path:
    """Save a full-page screenshot under ``root/<yyyy-MM-dd>/``.

    Args:
        page: Page to capture
        test_name: Logical test name used as the file name prefix
        root: Screenshot root directory

    Returns:
        Path of the written ``{test_name}_{HHmmss}.png`` file
    """
    now = datetime.now()
    directory = Path(root) / now.strftime("%Y-%m-%d")
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / f"{test_name}_{now.strftime('%H%M%S')}.png"
    await page.screenshot(path=str(path), full_page=True)

    logger.debug(f"Captured screenshot to {path}")
    return path


async def wait_for_element_visible(
    page: Page, selector: str, timeout_ms: int = 5000
) -> bool:
    """Wait for a selector to become visible.

    Returns:
        True if the element became visible in time, False on timeout or any
        other error (an invalid selector included)
    """
    try:
        await page.wait_for_selector(selector, state="visible", timeout=timeout_ms)
        return True
    except Exception as e:
        logger.debug(f"Element {selector} not visible within {timeout_ms}ms: {e}")
        return False


async def scroll_to_element(page: Page, selector: str) -> None:
    """Smooth-scroll the element to the viewport center, then wait 500ms."""
    await page.evaluate(_SCROLL_INTO_VIEW, selector)
    await page.wait_for_timeout(SCROLL_SETTLE_MS)


async def clear_and_fill(page: Page, selector: str, value: str) -> None:
    """Empty an input, then fill it with ``value``."""
    await page.fill(selector, "")
    await page.fill(selector, value)


async def wait_for_api_response(
    page: Page, url_pattern: str, action: Callable[[], Awaitable[object]]
) -> Response:
    """Run ``action`` and return the first response matching ``url_pattern``.

    The wait is registered before the action runs so a fast response is not
    missed.
    """
    async with page.expect_response(url_pattern) as response_info:
        await action()
    response = await response_info.value
    logger.debug(f"Received response {response.status} from {response.url}")
    return response


async def element_contains_text(page: Page, selector: str, expected_text: str) -> bool:
    """Case-insensitive check that the element's text contains ``expected_text``."""
    text = await page.text_content(selector)
    if text is None:
        return False
    return expected_text.casefold() in text.casefold()


async def wait_for_full_page_load(page: Page) -> None:
    """Wait for DOMContentLoaded, load and network idle, in that order."""
    await page.wait_for_load_state("domcontentloaded")
    await page.wait_for_load_state("load")
    await page.wait_for_load_state("networkidle")


async def serve_html(
    target: Union[Page, BrowserContext], html: str, url: str = LOCAL_APP_URL
) -> NetworkInterceptor:
    """Answer requests for ``url`` with ``html``.

    Unlike ``page.set_content`` this gives the document a real https origin,
    which relative fetches, localStorage and geolocation need.
    """
    interceptor = NetworkInterceptor()
    await interceptor.add_mock(
        target, NetworkMock(url_pattern=url, content_type="text/html", body=html)
    )
    return interceptor
