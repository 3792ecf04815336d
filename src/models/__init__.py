"""Models package for the end-to-end suite."""

from .browser_models import (
    BrowserType,
    Viewport,
    VideoSize,
    HttpCredentials,
    Geolocation,
    BrowserCookie,
    LaunchOptions,
    ContextOptions,
    NetworkMock,
)

__all__ = [
    "BrowserType",
    "Viewport",
    "VideoSize",
    "HttpCredentials",
    "Geolocation",
    "BrowserCookie",
    "LaunchOptions",
    "ContextOptions",
    "NetworkMock",
]
