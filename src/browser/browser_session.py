"""Browser session shared by a test class or a whole test run.

A BrowserSession owns exactly one Playwright handle and one browser for its
lifetime. Pages and contexts it hands out belong to the caller, who must
close them before the session stops.
"""

from typing import Optional
import logging

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from src.models.browser_models import BrowserType, ContextOptions, LaunchOptions

logger = logging.getLogger(__name__)


class BrowserSession:
    """Own one Playwright engine and one browser.

    Example:
        async with BrowserSession(options=get_ci_launch_options()) as session:
            page = await session.new_page()
            try:
                await page.goto("https://playwright.dev")
            finally:
                await page.close()
    """

    def __init__(
        self,
        browser_type: BrowserType = BrowserType.CHROMIUM,
        options: Optional[LaunchOptions] = None,
    ):
        self.browser_type = browser_type
        self.options = options or LaunchOptions()
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None

    async def __aenter__(self) -> "BrowserSession":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.stop()

    @property
    def is_running(self) -> bool:
        return self.browser is not None

    async def start(self) -> None:
        """Start Playwright and launch the browser.

        Raises:
            RuntimeError: If the browser fails to launch; Playwright is
                stopped again first
        """
        if self.is_running:
            return

        self.playwright = await async_playwright().start()
        try:
            launcher = getattr(self.playwright, self.browser_type.value)
            self.browser = await launcher.launch(**self.options.to_playwright())
        except Exception as e:
            logger.error(f"Failed to launch {self.browser_type.value} browser: {e}")
            await self.playwright.stop()
            self.playwright = None
            raise RuntimeError(f"Browser launch failed: {e}")

        logger.info(f"Browser session started ({self.browser_type.value})")

    async def stop(self) -> None:
        """Close the browser, then stop Playwright.

        Playwright is stopped even when closing the browser fails; the close
        error is re-raised afterwards.
        """
        browser, playwright = self.browser, self.playwright
        self.browser = None
        self.playwright = None

        try:
            if browser is not None:
                await browser.close()
                logger.debug(f"Closed browser: {self.browser_type.value}")
        finally:
            if playwright is not None:
                await playwright.stop()
                logger.info("Browser session stopped")

    def _require_browser(self) -> Browser:
        if self.browser is None:
            raise RuntimeError("Browser session is not started")
        return self.browser

    async def new_page(self) -> Page:
        """Open a page in a fresh default context. The caller closes it."""
        return await self._require_browser().new_page()

    async def new_context(
        self, options: Optional[ContextOptions] = None, **overrides
    ) -> BrowserContext:
        """Open a browser context. The caller closes it.

        Args:
            options: Context options record
            **overrides: Raw Playwright keyword arguments merged over ``options``
        """
        kwargs = options.to_playwright() if options else {}
        kwargs.update(overrides)
        return await self._require_browser().new_context(**kwargs)
