"""Configuration objects and constants for the extraction pipeline."""

from __future__ import annotations

import enum
import os
from functools import lru_cache
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping, Optional, Tuple

DESKTOP_VIEWPORT = (1920, 1080)
CAPTURE_VIEWPORT = (800, 600)
FALLBACK_PALETTE = ("#000000", "#ffffff", "#333333", "#666666")
SERVERLESS_ENV_MARKERS = ("VERCEL", "AWS_LAMBDA_FUNCTION_VERSION")


class DeploymentMode(str, enum.Enum):
    """Where the pipeline runs; selects launch arguments and screenshot storage."""

    SERVERLESS = "serverless"
    HOST = "host"


def detect_deployment_mode(environ: Optional[Mapping[str, str]] = None) -> DeploymentMode:
    """Derive the deployment mode from the process environment."""
    env = os.environ if environ is None else environ
    override = (env.get("BRAND_DNA_MODE") or "").strip().lower()
    if override:
        return DeploymentMode(override)
    if any(env.get(marker) for marker in SERVERLESS_ENV_MARKERS):
        return DeploymentMode.SERVERLESS
    return DeploymentMode.HOST


@dataclass
class ScrapeConfig:
    """Top-level settings that control rendering and extraction behaviour."""

    mode: DeploymentMode = DeploymentMode.HOST
    navigation_timeout: float = 30.0
    network_idle_timeout: float = 1.5
    settle_delay: float = 0.5
    viewport: Tuple[int, int] = DESKTOP_VIEWPORT
    capture_viewport: Tuple[int, int] = CAPTURE_VIEWPORT
    scroll_step: int = 800
    scroll_interval_ms: int = 100
    scroll_cap: int = 8000
    max_images: int = 50
    palette_size: int = 6
    screenshot_quality: int = 50
    screenshot_dir: Path = field(default_factory=lambda: Path("public") / "screenshots")
    chromium_executable: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScrapeConfig":
        """Build a config whose deployment mode is read once from the environment."""
        env = os.environ if environ is None else environ
        config = cls(mode=detect_deployment_mode(env))
        if env.get("BRAND_DNA_SCREENSHOT_DIR"):
            config.screenshot_dir = Path(env["BRAND_DNA_SCREENSHOT_DIR"])
        if env.get("BRAND_DNA_CHROMIUM_PATH"):
            config.chromium_executable = env["BRAND_DNA_CHROMIUM_PATH"]
        return config


@lru_cache(maxsize=None)
def default_config() -> ScrapeConfig:
    """Process-wide config; the environment is read on first use only."""
    return ScrapeConfig.from_env()


def copy_default_config() -> ScrapeConfig:
    """Mutable copy of :func:`default_config` for callers that override fields."""
    return replace(default_config())
