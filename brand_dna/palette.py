"""Screenshot capture and dominant colour extraction."""

from __future__ import annotations

import asyncio
import base64
import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from colorthief import ColorThief
from filetype import guess
from playwright.async_api import Page

from .config import CAPTURE_VIEWPORT, FALLBACK_PALETTE
from .session import RenderStrategy

logger = logging.getLogger("brand_dna")

DEFAULT_MIME = "image/jpeg"


def rgb_to_hex(rgb: Sequence[int]) -> str:
    """Format an RGB triple as lowercase ``#rrggbb``."""
    r, g, b = (int(channel) for channel in rgb[:3])
    value = ((1 << 24) | (r << 16) | (g << 8) | b) & 0xFFFFFF
    return f"#{value:06x}"


def to_data_uri(data: bytes) -> str:
    """Embed image bytes as a base64 data URI, sniffing the MIME type."""
    kind = guess(data)
    mime = kind.mime if kind and kind.mime.startswith("image/") else DEFAULT_MIME
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


async def capture_screenshot(
    page: Page,
    settle_delay: float = 0.5,
    viewport: Tuple[int, int] = CAPTURE_VIEWPORT,
    quality: int = 50,
) -> bytes:
    """Scroll to the top, let the header settle and grab a small viewport JPEG."""
    logger.info("Taking screenshot")
    await page.evaluate("window.scrollTo(0, 0)")
    await page.wait_for_timeout(int(settle_delay * 1000))
    width, height = viewport
    await page.set_viewport_size({"width": width, "height": height})
    return await page.screenshot(full_page=False, type="jpeg", quality=quality)


def quantize(path: Path, color_count: int) -> List[Tuple[int, int, int]]:
    """Cluster the pixels of the image at ``path`` into ``color_count`` swatches."""
    palette = ColorThief(str(path)).get_palette(color_count=color_count)
    if len(palette) < color_count:
        raise ValueError(
            f"Quantizer returned {len(palette)} colours, expected {color_count}"
        )
    return palette[:color_count]


def format_palette(palette: Iterable[Sequence[int]]) -> List[str]:
    return [rgb_to_hex(rgb) for rgb in palette]


async def extract_palette(
    data: bytes,
    strategy: RenderStrategy,
    color_count: int = 6,
) -> List[str]:
    """Return ``color_count`` hex colours, or the neutral fallback on any failure."""
    logger.info("Extracting colors")
    try:
        path = strategy.persist_screenshot(data)
    except OSError as exc:
        logger.warning("Could not write screenshot for colour extraction: %s", exc)
        return list(FALLBACK_PALETTE)
    try:
        palette = await asyncio.to_thread(quantize, path, color_count)
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Color extraction failed, using defaults: %s", exc)
        return list(FALLBACK_PALETTE)
    finally:
        strategy.discard_screenshot(path)
    return format_palette(palette)
