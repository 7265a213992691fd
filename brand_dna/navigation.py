"""Page loading helpers: navigation, lazy-content scrolling and idle waits."""

from __future__ import annotations

import logging

from playwright.async_api import (
    Error as PlaywrightError,
    Page,
    TimeoutError as PlaywrightTimeoutError,
)

from .errors import NavigationError, NavigationTimeout

logger = logging.getLogger("brand_dna")

# Resolves once the scrolled distance covers the document or passes the cap.
_AUTO_SCROLL_SCRIPT = """
async ({ step, interval, cap }) => {
    await new Promise((resolve) => {
        let covered = 0;
        const timer = setInterval(() => {
            const scrollHeight = document.body ? document.body.scrollHeight : 0;
            window.scrollBy(0, step);
            covered += step;
            if (covered >= scrollHeight || covered > cap) {
                clearInterval(timer);
                resolve();
            }
        }, interval);
    });
}
"""


async def navigate(page: Page, url: str, timeout: float = 30.0) -> None:
    """Load ``url`` until DOMContentLoaded, failing after ``timeout`` seconds."""
    logger.info("Loading %s", url)
    try:
        await page.goto(url, wait_until="domcontentloaded", timeout=timeout * 1000)
    except PlaywrightTimeoutError as exc:
        raise NavigationTimeout(url, f"Page did not load within {timeout:g}s") from exc
    except PlaywrightError as exc:
        raise NavigationError(url, f"Navigation failed ({exc.message})") from exc
    logger.info("Page loaded (domcontentloaded)")


async def auto_scroll(
    page: Page,
    step: int = 800,
    interval_ms: int = 100,
    cap: int = 8000,
) -> None:
    """Scroll down in fixed increments to trigger lazy-load observers."""
    logger.info("Starting auto-scroll for lazy loading")
    await page.evaluate(
        _AUTO_SCROLL_SCRIPT, {"step": step, "interval": interval_ms, "cap": cap}
    )
    logger.info("Auto-scroll complete")


async def await_network_idle(page: Page, timeout: float = 1.5) -> None:
    """Best-effort wait for network quiescence; never raises for Playwright errors."""
    try:
        await page.wait_for_load_state("networkidle", timeout=timeout * 1000)
    except PlaywrightError as exc:
        logger.debug("Network idle wait ended early: %s", exc)
