"""Shared fixtures: stand-ins for Playwright objects."""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from brand_dna import assets, logo, typography
from brand_dna.config import DeploymentMode, ScrapeConfig, default_config

PAGE_URL = "https://www.example.com/"

PAGE_HTML = """
<html>
  <head>
    <title>Acme | Home</title>
    <meta name="description" content="Widgets for everyone">
    <meta name="keywords" content="widgets, gadgets">
    <link rel="icon" href="/favicon.ico">
    <link rel="apple-touch-icon" href="https://cdn.example.com/touch.png">
    <link rel="stylesheet" href="/site.css">
  </head>
  <body><h1>Acme</h1></body>
</html>
"""

# Minimal JPEG signature followed by filler bytes.
FAKE_JPEG = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 64


class FakePage:
    """Page double answering the in-page scripts the pipeline evaluates."""

    def __init__(
        self,
        html: str = PAGE_HTML,
        images: Optional[List[Dict[str, Any]]] = None,
        backgrounds: Optional[List[str]] = None,
        snapshots: Optional[List[Dict[str, Any]]] = None,
        fonts: Optional[Dict[str, Optional[str]]] = None,
    ) -> None:
        self.html = html
        self.images = images if images is not None else []
        self.backgrounds = backgrounds if backgrounds is not None else []
        self.snapshots = snapshots if snapshots is not None else []
        self.fonts = fonts if fonts is not None else {}
        self.goto = AsyncMock()
        self.content = AsyncMock(return_value=html)
        self.route = AsyncMock()
        self.wait_for_load_state = AsyncMock()
        self.wait_for_timeout = AsyncMock()
        self.set_viewport_size = AsyncMock()
        self.screenshot = AsyncMock(return_value=FAKE_JPEG)
        self.evaluate = AsyncMock(side_effect=self._evaluate)

    async def _evaluate(self, script: str, arg: Any = None) -> Any:
        if script == assets._COLLECT_SCRIPT:
            return {"images": self.images, "backgrounds": self.backgrounds}
        if script == logo._SNAPSHOT_SCRIPT:
            return self.snapshots
        if script == typography._FONT_FAMILY_SCRIPT:
            return self.fonts.get(arg)
        return None


class FakePlaywrightManager:
    """Replacement for ``async_playwright()`` yielding a mocked driver."""

    def __init__(self, playwright: MagicMock) -> None:
        self.playwright = playwright

    async def __aenter__(self) -> MagicMock:
        return self.playwright

    async def __aexit__(self, *exc_info: Any) -> bool:
        return False


def make_playwright(page: Any) -> MagicMock:
    browser = MagicMock()
    browser.new_page = AsyncMock(return_value=page)
    browser.close = AsyncMock()
    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)
    return playwright


@pytest.fixture(autouse=True)
def fresh_default_config():
    default_config.cache_clear()
    yield
    default_config.cache_clear()


@pytest.fixture
def host_config(tmp_path) -> ScrapeConfig:
    return ScrapeConfig(mode=DeploymentMode.HOST, screenshot_dir=tmp_path / "screenshots")


@pytest.fixture
def serverless_config() -> ScrapeConfig:
    return ScrapeConfig(mode=DeploymentMode.SERVERLESS)


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()
