"""Data models used throughout the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .progress import ProgressReporter


@dataclass
class ScrapeRequest:
    """One invocation of the pipeline."""

    target_url: str
    progress: ProgressReporter = field(default_factory=ProgressReporter)


@dataclass
class ImageCandidate:
    """One variant listed in a responsive ``srcset`` attribute."""

    url: str
    width: int = 0


@dataclass
class LogoCandidate:
    """Scored logo element kept while ranking candidates."""

    src: str
    score: int


@dataclass
class LogoSnapshot:
    """Measurements of an ``img`` or ``svg`` element taken inside the page."""

    tag: str
    src: str
    alt: str = ""
    class_name: str = ""
    element_id: str = ""
    top: float = 0.0
    left: float = 0.0
    width: float = 0.0
    height: float = 0.0
    parent_href: Optional[str] = None
    origin: str = ""

    @property
    def filename(self) -> str:
        if not self.src or self.src.startswith("data:"):
            return ""
        return self.src.split("/")[-1].lower()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogoSnapshot":
        return cls(
            tag=str(data.get("tag") or "").lower(),
            src=data.get("src") or "",
            alt=data.get("alt") or "",
            class_name=data.get("className") or "",
            element_id=data.get("id") or "",
            top=float(data.get("top") or 0),
            left=float(data.get("left") or 0),
            width=float(data.get("width") or 0),
            height=float(data.get("height") or 0),
            parent_href=data.get("parentHref"),
            origin=data.get("origin") or "",
        )


@dataclass
class PageMetadata:
    """Identity fields recovered from the rendered markup."""

    title: str
    brand: str
    description: Optional[str] = None
    keywords: Optional[str] = None


@dataclass
class BrandAssets:
    """Visual assets discovered on the page."""

    logo: Optional[str]
    screenshot: str
    images: List[str]
    favicons: List[str]


@dataclass
class FontReport:
    """Primary font families for representative text roles."""

    body: Optional[str] = None
    heading: Optional[str] = None


@dataclass(frozen=True)
class BrandReport:
    """Final visual identity report for one URL."""

    url: str
    meta: PageMetadata
    assets: BrandAssets
    colors: List[str]
    fonts: FontReport

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serialisable report; absent meta fields are omitted."""
        meta: Dict[str, Any] = {"title": self.meta.title, "brand": self.meta.brand}
        if self.meta.description is not None:
            meta["description"] = self.meta.description
        if self.meta.keywords is not None:
            meta["keywords"] = self.meta.keywords
        return {
            "url": self.url,
            "meta": meta,
            "assets": {
                "logo": self.assets.logo,
                "screenshot": self.assets.screenshot,
                "images": list(self.assets.images),
                "favicons": list(self.assets.favicons),
            },
            "colors": list(self.colors),
            "fonts": {"body": self.fonts.body, "heading": self.fonts.heading},
        }
