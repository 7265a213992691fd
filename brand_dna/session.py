"""Browser lifecycle: launch strategies, request filtering and scoped sessions."""

from __future__ import annotations

import logging
import tempfile
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, List, Optional

from playwright.async_api import (
    Browser,
    Error as PlaywrightError,
    Page,
    Playwright,
    Route,
)

from .config import DeploymentMode, ScrapeConfig
from .errors import BrowserLaunchError

logger = logging.getLogger("brand_dna")

BLOCKED_RESOURCE_TYPES = frozenset(
    {"media", "texttrack", "object", "beacon", "csp_report", "imageset"}
)

SERVERLESS_ARGS = [
    "--no-sandbox",
    "--single-process",
    "--no-zygote",
    "--disable-gpu",
    "--disable-dev-shm-usage",
    "--hide-scrollbars",
    "--mute-audio",
]

HOST_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--window-size=1920,1080",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
    "--disable-gpu",
]


class RenderStrategy:
    """Deployment-specific browser launch and screenshot storage."""

    mode: DeploymentMode
    ignore_https_errors = False

    def __init__(self, config: ScrapeConfig) -> None:
        self.config = config

    def launch_args(self) -> List[str]:
        raise NotImplementedError

    def executable_path(self) -> Optional[str]:
        return self.config.chromium_executable

    async def launch(self, playwright: Playwright) -> Browser:
        """Start a headless Chromium; failures surface as ``BrowserLaunchError``."""
        logger.info("Launching browser (%s mode)", self.mode.value)
        try:
            return await playwright.chromium.launch(
                headless=True,
                args=self.launch_args(),
                executable_path=self.executable_path(),
            )
        except PlaywrightError as exc:
            raise BrowserLaunchError(f"Unable to launch browser: {exc}") from exc

    def persist_screenshot(self, data: bytes) -> Path:
        """Write screenshot bytes somewhere the quantizer can read them."""
        raise NotImplementedError

    def discard_screenshot(self, path: Path) -> None:
        """Remove a persisted screenshot once it is no longer needed."""


class ServerlessStrategy(RenderStrategy):
    """Compact browser, scratch-space screenshots; for ephemeral filesystems."""

    mode = DeploymentMode.SERVERLESS
    ignore_https_errors = True

    def launch_args(self) -> List[str]:
        return list(SERVERLESS_ARGS)

    def persist_screenshot(self, data: bytes) -> Path:
        path = Path(tempfile.gettempdir()) / f"screenshot_{time.time_ns()}.jpg"
        path.write_bytes(data)
        return path

    def discard_screenshot(self, path: Path) -> None:
        try:
            path.unlink()
        except OSError as exc:
            logger.debug("Could not remove %s: %s", path, exc)


class HostStrategy(RenderStrategy):
    """Full browser with container-friendly flags; screenshots kept on disk."""

    mode = DeploymentMode.HOST

    def launch_args(self) -> List[str]:
        return list(HOST_ARGS)

    def persist_screenshot(self, data: bytes) -> Path:
        directory = self.config.screenshot_dir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"site_{time.time_ns() // 1_000_000}.jpg"
        path.write_bytes(data)
        logger.info("Screenshot saved to %s", path)
        return path


def select_strategy(config: ScrapeConfig) -> RenderStrategy:
    if config.mode is DeploymentMode.SERVERLESS:
        return ServerlessStrategy(config)
    return HostStrategy(config)


async def block_low_value_resources(route: Route) -> None:
    """Abort media and tracking requests; everything else, fonts included, proceeds."""
    if route.request.resource_type in BLOCKED_RESOURCE_TYPES:
        await route.abort()
    else:
        await route.continue_()


@asynccontextmanager
async def render_session(
    playwright: Playwright,
    strategy: RenderStrategy,
) -> AsyncIterator[Page]:
    """Yield a desktop-sized page; the browser is closed on every exit path."""
    browser = await strategy.launch(playwright)
    logger.info("Browser launched")
    try:
        width, height = strategy.config.viewport
        page = await browser.new_page(
            viewport={"width": width, "height": height},
            ignore_https_errors=strategy.ignore_https_errors,
        )
        await page.route("**/*", block_low_value_resources)
        yield page
    finally:
        try:
            await browser.close()
        except PlaywrightError as exc:
            logger.debug("Browser close failed: %s", exc)
        else:
            logger.debug("Browser closed")
