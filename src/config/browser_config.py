"""Browser configuration presets and environment-driven settings."""

import os
from typing import Any, Dict

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..models.browser_models import (
    BrowserType,
    ContextOptions,
    LaunchOptions,
    VideoSize,
    Viewport,
)

# Load environment variables from .env file
load_dotenv()

VIDEOS_DIR = "videos/"
DEFAULT_MOBILE_DEVICE = "iPhone 12"


class Timeouts:
    """Recommended timeouts in milliseconds."""

    DEFAULT_TIMEOUT = 30000
    NAVIGATION_TIMEOUT = 60000
    SHORT_TIMEOUT = 5000


def get_ci_launch_options() -> LaunchOptions:
    """Headless launch for containers without an OS sandbox."""
    return LaunchOptions(
        headless=True,
        args=("--no-sandbox", "--disable-setuid-sandbox"),
    )


def get_debug_launch_options() -> LaunchOptions:
    """Headed launch with slowed actions and devtools for local debugging."""
    return LaunchOptions(headless=False, slow_mo=500, devtools=True)


def get_test_context_options() -> ContextOptions:
    """Full HD context that tolerates bad certificates and records video."""
    return ContextOptions(
        viewport=Viewport(width=1920, height=1080),
        ignore_https_errors=True,
        record_video_dir=VIDEOS_DIR,
        record_video_size=VideoSize(width=1920, height=1080),
    )


def get_mobile_device(playwright: Any, name: str = DEFAULT_MOBILE_DEVICE) -> Dict[str, Any]:
    """Return a Playwright device descriptor, e.g. for ``new_context(**device)``.

    Raises:
        KeyError: If Playwright does not know the device name
    """
    return playwright.devices[name]


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class BrowserSettings(BaseModel):
    """Runtime settings for the end-to-end suite."""

    browser: BrowserType = Field(
        default_factory=lambda: BrowserType(os.getenv("E2E_BROWSER", "chromium")),
        description="Browser engine to launch",
    )
    launch_preset: str = Field(
        default_factory=lambda: os.getenv("E2E_LAUNCH_PRESET", "ci"),
        description="Launch preset: ci or debug",
    )
    headless: bool = Field(
        default_factory=lambda: _env_bool("E2E_HEADLESS", "true"),
        description="Run browsers headless (ci preset only)",
    )
    slow_mo: int = Field(
        default_factory=lambda: int(os.getenv("E2E_SLOW_MO", "0")),
        description="Delay between actions in milliseconds (ci preset only)",
    )
    screenshots_dir: str = Field(
        default_factory=lambda: os.getenv("E2E_SCREENSHOTS_DIR", "screenshots"),
        description="Root directory for screenshots",
    )
    log_level: str = Field(
        default_factory=lambda: os.getenv("E2E_LOG_LEVEL", "INFO"),
        description="Logging level",
    )
    run_e2e: bool = Field(
        default_factory=lambda: _env_bool("E2E_ENABLED", "false"),
        description="Run tests marked e2e",
    )

    def launch_options(self) -> LaunchOptions:
        """Resolve the launch preset with environment overrides applied.

        Raises:
            ValueError: If the preset name is unknown
        """
        if self.launch_preset == "debug":
            return get_debug_launch_options()
        if self.launch_preset != "ci":
            raise ValueError(f"Unknown launch preset: {self.launch_preset}")

        base = get_ci_launch_options()
        return base.model_copy(
            update={"headless": self.headless, "slow_mo": self.slow_mo or None}
        )
