"""Candidate image discovery over the rendered DOM."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from playwright.async_api import Page

from .models import ImageCandidate
from .utils import resolve_url

logger = logging.getLogger("brand_dna")

ACCEPTED_PREFIXES = ("http", "//", "/")
CSS_URL_PATTERN = re.compile(r"""url\(['"]?(.*?)['"]?\)""")

_COLLECT_SCRIPT = """
() => {
    const images = Array.from(document.querySelectorAll('img')).map((img) => ({
        currentSrc: img.currentSrc || '',
        src: img.src || '',
        dataSrc: img.getAttribute('data-src') || '',
        srcset: img.srcset || img.getAttribute('data-srcset') || '',
    }));
    const backgrounds = [];
    document.querySelectorAll('*').forEach((el) => {
        const value = window.getComputedStyle(el).backgroundImage;
        if (value && value !== 'none' && value.startsWith('url')) {
            backgrounds.push(value);
        }
    });
    return { images, backgrounds };
}
"""


def parse_srcset(srcset: str) -> List[ImageCandidate]:
    """Split a ``srcset`` value into candidates; missing widths count as 0."""
    candidates: List[ImageCandidate] = []
    for entry in srcset.split(","):
        parts = entry.strip().split()
        if not parts:
            continue
        width = 0
        if len(parts) > 1:
            match = re.match(r"\d+", parts[1])
            if match:
                width = int(match.group(0))
        candidates.append(ImageCandidate(url=parts[0], width=width))
    return candidates


def pick_largest(candidates: Iterable[ImageCandidate]) -> Optional[ImageCandidate]:
    """Widest candidate; the first listed wins a tie."""
    best: Optional[ImageCandidate] = None
    for candidate in candidates:
        if best is None or candidate.width > best.width:
            best = candidate
    return best


def extract_css_url(value: str) -> Optional[str]:
    """First ``url(...)`` reference in a computed ``background-image`` value."""
    match = CSS_URL_PATTERN.search(value)
    if match and match.group(1):
        return match.group(1)
    return None


def is_acceptable(src: Optional[str]) -> bool:
    return bool(src) and not src.startswith("data:") and src.startswith(ACCEPTED_PREFIXES)


def raw_image_sources(
    images: Iterable[Dict[str, Any]],
    backgrounds: Iterable[str],
) -> List[str]:
    """Accepted, de-duplicated sources in discovery order."""
    sources: Dict[str, None] = {}

    def add(src: Optional[str]) -> None:
        if is_acceptable(src):
            sources.setdefault(src, None)

    for image in images:
        srcset = image.get("srcset") or ""
        if srcset:
            largest = pick_largest(parse_srcset(srcset))
            if largest:
                add(largest.url)
        add(image.get("currentSrc") or image.get("src") or image.get("dataSrc"))

    for value in backgrounds:
        add(extract_css_url(value))
    return list(sources)


def normalize_images(sources: Iterable[str], base_url: str, limit: int = 50) -> List[str]:
    """Resolve against the page URL, drop ``data:`` results, dedupe and cap."""
    resolved: Dict[str, None] = {}
    for src in sources:
        absolute = resolve_url(src, base_url)
        if absolute.startswith("data:"):
            continue
        resolved.setdefault(absolute, None)
    return list(resolved)[:limit]


async def collect_images(page: Page, base_url: str, limit: int = 50) -> List[str]:
    """Gather content-image URLs from ``img`` tags and CSS backgrounds."""
    logger.info("Extracting assets (images, backgrounds)")
    data = await page.evaluate(_COLLECT_SCRIPT)
    sources = raw_image_sources(data.get("images", []), data.get("backgrounds", []))
    images = normalize_images(sources, base_url, limit)
    logger.info("Found %d unique images", len(images))
    return images
