"""Heuristic logo identification.

Every ``img`` and inline ``svg`` on the page is measured once inside the
browser and turned into a :class:`LogoSnapshot`. Inline SVGs have no URL, so
their markup is carried as a ``data:image/svg+xml`` source. Scoring happens in Python
against :data:`LOGO_RUBRIC`, a list of independent ``(predicate, weight)``
signals whose weights are summed. The highest total wins; on a tie the
element that appears first in document order is kept.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from playwright.async_api import Page

from .models import LogoCandidate, LogoSnapshot
from .utils import resolve_url

logger = logging.getLogger("brand_dna")

Predicate = Callable[[LogoSnapshot], bool]

MIN_LOGO_SIDE = 20
HOME_HREFS = ("/", ".")

_SNAPSHOT_SCRIPT = """
() => Array.from(document.querySelectorAll('img, svg')).map((el) => {
    const rect = el.getBoundingClientRect();
    const tag = el.tagName.toLowerCase();
    const link = el.closest('a');
    return {
        tag,
        src: tag === 'svg'
            ? 'data:image/svg+xml;charset=utf-8,' + encodeURIComponent(el.outerHTML)
            : el.currentSrc || el.src || '',
        alt: el.getAttribute('alt') || '',
        className: el.getAttribute('class') || '',
        id: el.getAttribute('id') || '',
        top: rect.top,
        left: rect.left,
        width: rect.width,
        height: rect.height,
        parentHref: link ? link.getAttribute('href') : null,
        origin: window.location.origin,
    };
})
"""


def _links_home(snapshot: LogoSnapshot) -> bool:
    href = snapshot.parent_href
    if href is None:
        return False
    return href in HOME_HREFS or (bool(snapshot.origin) and href == snapshot.origin)


LOGO_RUBRIC: Sequence[Tuple[Predicate, int]] = (
    (lambda s: "logo" in s.filename, 5),
    (lambda s: "logo" in s.class_name.lower(), 3),
    (lambda s: "logo" in s.element_id.lower(), 3),
    (lambda s: "logo" in s.alt.lower(), 3),
    (lambda s: s.top < 150 and s.left < 500, 5),
    (_links_home, 3),
)


def score_snapshot(
    snapshot: LogoSnapshot,
    rubric: Sequence[Tuple[Predicate, int]] = LOGO_RUBRIC,
) -> int:
    return sum(weight for predicate, weight in rubric if predicate(snapshot))


def is_eligible(snapshot: LogoSnapshot, score: int) -> bool:
    return snapshot.width > MIN_LOGO_SIDE and snapshot.height > MIN_LOGO_SIDE and score > 0


def rank_candidates(snapshots: Iterable[LogoSnapshot]) -> List[LogoCandidate]:
    """Eligible candidates in document order."""
    candidates: List[LogoCandidate] = []
    for snapshot in snapshots:
        score = score_snapshot(snapshot)
        if is_eligible(snapshot, score):
            candidates.append(LogoCandidate(src=snapshot.src, score=score))
    return candidates


def select_logo(snapshots: Iterable[LogoSnapshot]) -> Optional[LogoCandidate]:
    """Highest-scoring candidate, first in document order on ties."""
    best: Optional[LogoCandidate] = None
    for candidate in rank_candidates(snapshots):
        if best is None or candidate.score > best.score:
            best = candidate
    return best


async def identify_logo(page: Page, base_url: str) -> Optional[str]:
    """Return the absolute source of the most likely logo, or ``None``."""
    raw = await page.evaluate(_SNAPSHOT_SCRIPT)
    snapshots = [LogoSnapshot.from_dict(item) for item in raw]
    best = select_logo(snapshots)
    if best is None or not best.src:
        logger.info("No logo candidate found among %d elements", len(snapshots))
        return None
    logger.info("Selected logo %s (score %d)", best.src, best.score)
    return resolve_url(best.src, base_url)
