"""Computed font-family lookup for body and heading text."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from playwright.async_api import Page

from .models import FontReport

logger = logging.getLogger("brand_dna")

HEADING_SELECTORS = ("h1", "h2", "h3")

_FONT_FAMILY_SCRIPT = """
(selector) => {
    const el = document.querySelector(selector);
    return el ? window.getComputedStyle(el).fontFamily : null;
}
"""


def primary_family(font_family: Optional[str]) -> Optional[str]:
    """First family of a CSS ``font-family`` list, without quotes."""
    if font_family is None:
        return None
    return font_family.split(",")[0].replace('"', "").replace("'", "").strip()


async def read_font(page: Page, selector: str) -> Optional[str]:
    return primary_family(await page.evaluate(_FONT_FAMILY_SCRIPT, selector))


async def read_first_font(page: Page, selectors: Sequence[str]) -> Optional[str]:
    for selector in selectors:
        font = await read_font(page, selector)
        if font:
            return font
    return None


async def extract_fonts(page: Page) -> FontReport:
    logger.info("Extracting fonts")
    return FontReport(
        body=await read_font(page, "body"),
        heading=await read_first_font(page, HEADING_SELECTORS),
    )
