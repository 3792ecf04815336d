"""Page Objects wrapping locators and actions for individual pages."""

from src.browser.pom.playwright_home_page import PlaywrightHomePage

__all__ = [
    "PlaywrightHomePage",
]
