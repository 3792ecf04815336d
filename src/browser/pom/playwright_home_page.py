"""Page Object for the playwright.dev home page.

Locators are properties that build a fresh Locator on every access, so the
page object keeps working when the DOM re-renders between calls.
"""

from typing import Optional

from playwright.async_api import Locator, Page


class PlaywrightHomePage:
    """Navigation and queries for https://playwright.dev.

    The page is owned by the caller; this wrapper never closes it.
    """

    URL = "https://playwright.dev"
    EXPECTED_TITLE = "Playwright"

    def __init__(self, page: Page):
        self._page = page

    # Locators

    @property
    def get_started_button(self) -> Locator:
        return self._page.get_by_role("link", name="Get started")

    @property
    def docs_link(self) -> Locator:
        return self._page.get_by_role("link", name="Docs")

    @property
    def api_link(self) -> Locator:
        return self._page.get_by_role("link", name="API")

    @property
    def search_button(self) -> Locator:
        return self._page.locator("button[aria-label='Search']")

    @property
    def main_heading(self) -> Locator:
        return self._page.locator("h1").first

    @property
    def navigation_bar(self) -> Locator:
        return self._page.locator("nav")

    # Navigation

    async def navigate(self) -> None:
        await self._page.goto(self.URL)

    async def click_get_started(self) -> None:
        await self.get_started_button.click()
        await self._page.wait_for_load_state("networkidle")

    async def click_docs(self) -> None:
        await self.docs_link.click()
        await self._page.wait_for_load_state("networkidle")

    async def click_api(self) -> None:
        await self.api_link.click()
        await self._page.wait_for_load_state("networkidle")

    # Queries

    async def get_main_heading_text(self) -> Optional[str]:
        return await self.main_heading.text_content()

    async def get_page_title(self) -> str:
        return await self._page.title()

    def get_current_url(self) -> str:
        return self._page.url

    async def is_get_started_visible(self) -> bool:
        return await self.get_started_button.is_visible()

    async def is_navigation_bar_visible(self) -> bool:
        return await self.navigation_bar.is_visible()

    async def has_loaded_correctly(self) -> bool:
        """True when the title, the Get started link and the nav bar all check out."""
        title = await self.get_page_title()
        is_get_started_visible = await self.is_get_started_visible()
        is_nav_visible = await self.is_navigation_bar_visible()

        return self.EXPECTED_TITLE in title and is_get_started_visible and is_nav_visible

    # Waits

    async def wait_for_page_load(self) -> None:
        await self._page.wait_for_load_state("networkidle")

    async def wait_for_navigation_bar(self, timeout: int = 5000) -> None:
        await self.navigation_bar.wait_for(state="visible", timeout=timeout)
