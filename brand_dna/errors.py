"""Exceptions raised by the extraction pipeline."""

from __future__ import annotations


class BrandDnaError(RuntimeError):
    """Base class for failures that abort a pipeline run."""


class BrowserLaunchError(BrandDnaError):
    """The headless browser could not be started."""


class NavigationError(BrandDnaError):
    """The target page could not be loaded."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{message}: {url}")
        self.url = url


class NavigationTimeout(NavigationError):
    """The page did not reach DOMContentLoaded within the navigation budget."""
