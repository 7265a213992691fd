"""HTML metadata parsing utilities."""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup

from .models import PageMetadata
from .utils import brand_from_host, try_resolve_url

TITLE_SEPARATORS = (" | ", " - ", ": ")
MAX_BRAND_CHARS = 20


def _meta_content(soup: BeautifulSoup, **attrs: str) -> Optional[str]:
    tag = soup.find("meta", attrs=attrs)
    if tag and tag.get("content"):
        return tag["content"]
    return None


def extract_title(soup: BeautifulSoup) -> str:
    """Document title, then ``og:title``, then an empty string."""
    if soup.title and soup.title.get_text():
        return soup.title.get_text()
    return _meta_content(soup, property="og:title") or ""


def resolve_brand_name(title: str, site_name: Optional[str], url: str) -> str:
    """Pick a short brand name from ``og:site_name``, the title or the host."""
    site_name = (site_name or "").strip()
    if site_name:
        return site_name
    brand: Optional[str] = None
    for separator in TITLE_SEPARATORS:
        if separator in title:
            brand = title.split(separator, 1)[0]
            break
    if not brand or len(brand) > MAX_BRAND_CHARS:
        brand = brand_from_host(url)
    return brand


def extract_metadata(html: str, url: str) -> PageMetadata:
    """Read title, brand, description and keywords from rendered HTML."""
    soup = BeautifulSoup(html, "html.parser")
    title = extract_title(soup)
    description = _meta_content(soup, name="description") or _meta_content(
        soup, property="og:description"
    )
    keywords = _meta_content(soup, name="keywords")
    brand = resolve_brand_name(title, _meta_content(soup, property="og:site_name"), url)
    return PageMetadata(
        title=title,
        brand=brand,
        description=description,
        keywords=keywords,
    )


def extract_favicons(html: str, url: str) -> List[str]:
    """Absolute hrefs of every ``link[rel*=icon]``; unresolvable ones are dropped."""
    soup = BeautifulSoup(html, "html.parser")
    favicons: List[str] = []
    for link in soup.select('link[rel*="icon"]'):
        href = link.get("href")
        if not href:
            continue
        resolved = try_resolve_url(href, url)
        if resolved and resolved not in favicons:
            favicons.append(resolved)
    return favicons
