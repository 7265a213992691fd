"""Utility helpers for URL handling and string normalization."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin, urlparse


def try_resolve_url(value: str, base_url: str) -> Optional[str]:
    """Resolve ``value`` against ``base_url``; ``None`` when it cannot be parsed."""
    try:
        resolved = urljoin(base_url, value.strip())
        parsed = urlparse(resolved)
    except ValueError:
        return None
    if not parsed.scheme:
        return None
    return resolved


def resolve_url(value: str, base_url: str) -> str:
    """Resolve ``value`` against ``base_url``, keeping the raw value on failure."""
    resolved = try_resolve_url(value, base_url)
    return resolved if resolved is not None else value


def brand_from_host(url: str) -> str:
    """Derive a display name from the host: ``https://www.example.com`` -> ``Example``."""
    try:
        hostname = urlparse(url).hostname or ""
    except ValueError:
        hostname = ""
    if hostname.startswith("www."):
        hostname = hostname[4:]
    label = hostname.split(".")[0]
    if not label:
        return "Site"
    return label[0].upper() + label[1:]
