"""Browser option records for the Playwright end-to-end suite.

This module defines the immutable Pydantic models handed to Playwright when
launching browsers and creating contexts, plus the network mock record used
by the interceptor. Records compare by value and never hold live handles.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Any, Optional, Tuple
from enum import Enum


class BrowserType(str, Enum):
    """Supported browser engines."""

    CHROMIUM = "chromium"
    FIREFOX = "firefox"
    WEBKIT = "webkit"


class Viewport(BaseModel):
    """Browser viewport size."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=1280, description="Viewport width")
    height: int = Field(default=720, description="Viewport height")


class VideoSize(BaseModel):
    """Recorded video frame size."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(description="Frame width")
    height: int = Field(description="Frame height")


class HttpCredentials(BaseModel):
    """HTTP basic authentication credentials."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str


class Geolocation(BaseModel):
    """Emulated geolocation."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    accuracy: Optional[float] = Field(default=None, description="Accuracy in meters")


class BrowserCookie(BaseModel):
    """Cookie added to a browser context."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    domain: str
    path: str = "/"
    http_only: bool = False
    secure: bool = False

    def to_playwright(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "domain": self.domain,
            "path": self.path,
            "httpOnly": self.http_only,
            "secure": self.secure,
        }


class LaunchOptions(BaseModel):
    """Options for launching a browser process."""

    model_config = ConfigDict(frozen=True)

    headless: bool = Field(default=True, description="Run without a window")
    args: Tuple[str, ...] = Field(
        default=(), description="Extra browser process arguments"
    )
    slow_mo: Optional[int] = Field(
        default=None, description="Delay between actions in milliseconds"
    )
    devtools: bool = Field(default=False, description="Auto-open developer tools")

    def to_playwright(self) -> Dict[str, Any]:
        """Build keyword arguments for ``BrowserType.launch``.

        Unset values are omitted so Playwright keeps its own defaults.
        """
        kwargs: Dict[str, Any] = {"headless": self.headless}
        if self.args:
            kwargs["args"] = list(self.args)
        if self.slow_mo:
            kwargs["slow_mo"] = self.slow_mo
        if self.devtools:
            kwargs["devtools"] = True
        return kwargs


class ContextOptions(BaseModel):
    """Options for creating an isolated browser context."""

    model_config = ConfigDict(frozen=True)

    viewport: Optional[Viewport] = None
    ignore_https_errors: bool = False
    record_video_dir: Optional[str] = None
    record_video_size: Optional[VideoSize] = None
    http_credentials: Optional[HttpCredentials] = None
    geolocation: Optional[Geolocation] = None
    permissions: Tuple[str, ...] = ()
    user_agent: Optional[str] = None
    locale: Optional[str] = None

    def to_playwright(self) -> Dict[str, Any]:
        """Build keyword arguments for ``Browser.new_context``."""
        kwargs: Dict[str, Any] = {}

        if self.viewport:
            kwargs["viewport"] = self.viewport.model_dump()
        if self.ignore_https_errors:
            kwargs["ignore_https_errors"] = True
        if self.record_video_dir:
            kwargs["record_video_dir"] = self.record_video_dir
        if self.record_video_size:
            kwargs["record_video_size"] = self.record_video_size.model_dump()
        if self.http_credentials:
            kwargs["http_credentials"] = self.http_credentials.model_dump()
        if self.geolocation:
            kwargs["geolocation"] = self.geolocation.model_dump(exclude_none=True)
        if self.permissions:
            kwargs["permissions"] = list(self.permissions)
        if self.user_agent:
            kwargs["user_agent"] = self.user_agent
        if self.locale:
            kwargs["locale"] = self.locale

        return kwargs


class NetworkMock(BaseModel):
    """Synthetic response served for intercepted requests."""

    model_config = ConfigDict(frozen=True)

    url_pattern: str = Field(description="Glob pattern to match")
    method: str = Field(default="GET", description="HTTP method")

    # Response
    status: int = Field(default=200, description="Response status code")
    content_type: str = Field(
        default="application/json", description="Response content type"
    )
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Extra response headers"
    )
    body: Optional[Any] = Field(default=None, description="Response body")

    # Behavior
    delay_ms: int = Field(default=0, description="Response delay")
    abort: bool = Field(default=False, description="Abort request")
    times: Optional[int] = Field(default=None, description="Number of times to mock")
