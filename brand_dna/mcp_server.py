"""MCP server exposing the brand extractor as a tool."""

from __future__ import annotations

import logging
from typing import Any, Dict

from mcp.server.fastmcp import FastMCP

from .config import default_config
from .pipeline import run

logger = logging.getLogger("brand_dna.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="brand-dna")


@mcp.tool()
async def analyze(url: str) -> Dict[str, Any]:
    """Render a web page with Playwright and return its visual identity report."""
    report = await run(url, config=default_config())
    return report.to_dict()


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
