"""Extract a visual identity report (metadata, assets, palette, logo, fonts) from a web page."""

from .config import DeploymentMode, ScrapeConfig
from .errors import BrandDnaError, BrowserLaunchError, NavigationError, NavigationTimeout
from .models import BrandReport
from .pipeline import run, run_sync

__all__ = [
    "BrandDnaError",
    "BrandReport",
    "BrowserLaunchError",
    "DeploymentMode",
    "NavigationError",
    "NavigationTimeout",
    "ScrapeConfig",
    "run",
    "run_sync",
]
