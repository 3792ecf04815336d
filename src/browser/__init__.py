"""Browser automation layer for the Playwright end-to-end suite.

This package provides:
- A browser session owned by a test class or a whole run
- Page helpers (screenshots, visibility waits, scrolling, form filling)
- Random test data
- Network request tracking and mocking
- Page Objects
"""

from src.browser.browser_session import BrowserSession
from src.browser.data_generator import TestDataGenerator
from src.browser.network_interceptor import NetworkInterceptor
from src.browser import helpers

__all__ = [
    "BrowserSession",
    "TestDataGenerator",
    "NetworkInterceptor",
    "helpers",
]
