"""Command-line entry point for the brand extractor."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

from .config import DeploymentMode, ScrapeConfig, copy_default_config
from .errors import BrandDnaError
from .pipeline import run

logger = logging.getLogger("brand_dna.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render a website via Playwright and report its logo, colours, fonts and assets.",
    )
    parser.add_argument("url", help="URL of the page to analyse")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the JSON report to this file instead of STDOUT",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Navigation timeout in seconds",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in DeploymentMode],
        default=None,
        help="Override the deployment mode detected from the environment",
    )
    parser.add_argument(
        "--screenshot-dir",
        type=Path,
        default=None,
        help="Directory for screenshots kept in host mode",
    )
    parser.add_argument(
        "--no-screenshot-data",
        action="store_true",
        help="Omit the base64 screenshot from the printed report",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ScrapeConfig:
    config = copy_default_config()
    config.navigation_timeout = args.timeout
    if args.mode:
        config.mode = DeploymentMode(args.mode)
    if args.screenshot_dir:
        config.screenshot_dir = args.screenshot_dir.resolve()
    return config


def _log_progress(stage: str, percent: int) -> None:
    logger.info("[%3d%%] %s", percent, stage)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = build_config(args)
    overall_start = time.perf_counter()
    try:
        report = asyncio.run(run(args.url, _log_progress, config))
    except BrandDnaError as exc:
        logger.error("Analysis failed: %s", exc)
        return 1
    _log_progress("Done", 100)
    logger.info("Finished in %.2fs", time.perf_counter() - overall_start)

    payload = report.to_dict()
    if args.no_screenshot_data:
        payload["assets"]["screenshot"] = None
    text = json.dumps(payload, indent=2)
    if args.output:
        args.output.write_text(text + "\n", encoding="utf-8")
        logger.info("Saved report to %s", args.output)
    else:
        sys.stdout.write(text + "\n")
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
