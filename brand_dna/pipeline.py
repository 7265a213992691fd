"""High-level orchestration turning a URL into a :class:`BrandReport`."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from playwright.async_api import Page, async_playwright

from . import progress as stages
from .assets import collect_images
from .config import ScrapeConfig, default_config
from .content import extract_favicons, extract_metadata
from .logo import identify_logo
from .models import BrandAssets, BrandReport, ScrapeRequest
from .navigation import auto_scroll, await_network_idle, navigate
from .palette import capture_screenshot, extract_palette, to_data_uri
from .progress import ProgressCallback, ProgressReporter
from .session import RenderStrategy, render_session, select_strategy
from .typography import extract_fonts

logger = logging.getLogger("brand_dna")


async def extract_report(
    page: Page,
    request: ScrapeRequest,
    strategy: RenderStrategy,
) -> BrandReport:
    """Run every extraction stage against an open page."""
    config = strategy.config
    url = request.target_url
    reporter = request.progress

    reporter.stage(stages.NAVIGATING)
    await navigate(page, url, config.navigation_timeout)

    reporter.stage(stages.SCROLLING)
    await auto_scroll(page, config.scroll_step, config.scroll_interval_ms, config.scroll_cap)

    reporter.stage(stages.NETWORK_IDLE)
    await await_network_idle(page, config.network_idle_timeout)

    reporter.stage(stages.METADATA)
    html = await page.content()
    meta = extract_metadata(html, url)
    logger.info("Identified brand name: %s", meta.brand)

    reporter.stage(stages.SCREENSHOT)
    screenshot = await capture_screenshot(
        page, config.settle_delay, config.capture_viewport, config.screenshot_quality
    )

    reporter.stage(stages.ASSETS)
    images = await collect_images(page, url, config.max_images)
    favicons = extract_favicons(html, url)

    reporter.stage(stages.LOGO)
    logo = await identify_logo(page, url)

    reporter.stage(stages.COLORS)
    colors = await extract_palette(screenshot, strategy, config.palette_size)

    reporter.stage(stages.TYPOGRAPHY)
    fonts = await extract_fonts(page)

    reporter.stage(stages.FINALIZING)
    return BrandReport(
        url=url,
        meta=meta,
        assets=BrandAssets(
            logo=logo,
            screenshot=to_data_uri(screenshot),
            images=images,
            favicons=favicons,
        ),
        colors=colors,
        fonts=fonts,
    )


async def run(
    target_url: str,
    on_progress: Optional[ProgressCallback] = None,
    config: Optional[ScrapeConfig] = None,
) -> BrandReport:
    """Render ``target_url`` and build its visual identity report.

    Browser launch and navigation failures propagate as ``BrandDnaError``
    subclasses; the browser is closed on every path.
    """
    config = config or default_config()
    request = ScrapeRequest(target_url=target_url, progress=ProgressReporter(on_progress))
    strategy = select_strategy(config)

    request.progress.stage(stages.INITIALIZING)
    logger.info("Starting analysis for %s", target_url)
    try:
        async with async_playwright() as playwright:
            async with render_session(playwright, strategy) as page:
                report = await extract_report(page, request, strategy)
    except Exception:
        logger.exception("Analysis failed for %s", target_url)
        raise
    logger.info("Analysis complete for %s", target_url)
    return report


def run_sync(
    target_url: str,
    on_progress: Optional[ProgressCallback] = None,
    config: Optional[ScrapeConfig] = None,
) -> BrandReport:
    """Blocking wrapper around :func:`run` for synchronous callers."""
    return asyncio.run(run(target_url, on_progress, config))
