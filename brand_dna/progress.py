"""Progress reporting for long-running extractions."""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Optional

logger = logging.getLogger("brand_dna")

ProgressCallback = Callable[[str, int], None]


class Stage(NamedTuple):
    label: str
    percent: int


INITIALIZING = Stage("Initializing browser...", 0)
NAVIGATING = Stage("Navigating to website...", 10)
SCROLLING = Stage("Scanning for lazy-loaded assets...", 20)
NETWORK_IDLE = Stage("Waiting for network idle...", 40)
METADATA = Stage("Extracting metadata...", 50)
SCREENSHOT = Stage("Capturing screenshot...", 60)
ASSETS = Stage("Extracting visual assets...", 70)
LOGO = Stage("Identifying main logo...", 84)
COLORS = Stage("Analyzing color palette...", 85)
TYPOGRAPHY = Stage("Identifying typography...", 90)
FINALIZING = Stage("Finalizing DNA report...", 98)

PIPELINE_STAGES = (
    INITIALIZING,
    NAVIGATING,
    SCROLLING,
    NETWORK_IDLE,
    METADATA,
    SCREENSHOT,
    ASSETS,
    LOGO,
    COLORS,
    TYPOGRAPHY,
    FINALIZING,
)


class ProgressReporter:
    """One-way sink for ``(label, percent)`` events.

    Percentages are clamped to 0-100 and never go backwards, so consumers can
    render them directly. Errors raised by the callback are logged and
    discarded; a broken progress stream does not abort the extraction.
    """

    def __init__(self, callback: Optional[ProgressCallback] = None) -> None:
        self._callback = callback
        self._last = 0

    @property
    def last_percent(self) -> int:
        return self._last

    def emit(self, label: str, percent: int) -> None:
        percent = max(self._last, min(100, int(percent)))
        self._last = percent
        logger.debug("Progress %d%%: %s", percent, label)
        if self._callback is None:
            return
        try:
            self._callback(label, percent)
        except Exception:  # pylint: disable=broad-except
            logger.exception("Progress callback failed at %s", label)

    def stage(self, stage: Stage) -> None:
        self.emit(stage.label, stage.percent)
