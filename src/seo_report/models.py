"""Data models for SEO analysis.

Every record is produced once per analysis run and never mutated afterwards.
``to_dict`` produces the camelCase JSON shape consumed by the exporters and
the report store; ``from_dict`` reads it back.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class HeadingStatus(str, Enum):
    """Status of a single heading."""
    GOOD = "Good"
    WARNING = "Warning"
    ERROR = "Error"


class ImageStatus(str, Enum):
    """Alt text quality of a single image."""
    DESCRIPTIVE = "Descriptive"
    TOO_GENERIC = "Too generic"
    MISSING = "Missing"


class KeywordStatus(str, Enum):
    """Density classification of a single keyword."""
    GOOD = "Good"
    OVER_OPTIMIZED = "Over-optimized"
    UNDER_OPTIMIZED = "Under-optimized"


class Severity(str, Enum):
    """Priority of a recommendation."""
    CRITICAL = "critical"
    MODERATE = "moderate"
    SUGGESTION = "suggestion"


@dataclass(frozen=True)
class AnalysisInput:
    """A validated absolute URL handed to the engine."""

    url: str


@dataclass(frozen=True)
class MetaTagFindings:
    """Meta tags extracted from the page head."""

    title: str = ""
    description: str = ""
    keywords: tuple[str, ...] = ()
    canonical: str = ""

    @property
    def title_length(self) -> int:
        return len(self.title)

    @property
    def description_length(self) -> int:
        return len(self.description)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords),
            "canonical": self.canonical,
            "titleLength": self.title_length,
            "descriptionLength": self.description_length,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MetaTagFindings":
        return cls(
            title=data.get("title", ""),
            description=data.get("description", ""),
            keywords=tuple(data.get("keywords", [])),
            canonical=data.get("canonical", ""),
        )


@dataclass(frozen=True)
class HeadingFinding:
    """One heading element and its structural status."""

    level: str  # "H1".."H6"
    content: str
    status: HeadingStatus = HeadingStatus.GOOD
    message: Optional[str] = None

    @property
    def depth(self) -> int:
        """Numeric heading level (1-6)."""
        return int(self.level[1:])

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "content": self.content,
            "status": self.status.value,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HeadingFinding":
        return cls(
            level=data["level"],
            content=data.get("content", ""),
            status=HeadingStatus(data.get("status", HeadingStatus.GOOD.value)),
            message=data.get("message"),
        )


@dataclass(frozen=True)
class ImageFinding:
    """One image and the quality of its alt text."""

    filename: str
    alt_text: str
    status: ImageStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "filename": self.filename,
            "altText": self.alt_text,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImageFinding":
        return cls(
            filename=data.get("filename", ""),
            alt_text=data.get("altText", ""),
            status=ImageStatus(data["status"]),
        )


@dataclass(frozen=True)
class KeywordFinding:
    """Frequency-based density of one body-text token."""

    keyword: str
    density: float  # percentage, one decimal
    status: KeywordStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "keyword": self.keyword,
            "density": self.density,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KeywordFinding":
        return cls(
            keyword=data["keyword"],
            density=float(data["density"]),
            status=KeywordStatus(data["status"]),
        )


@dataclass(frozen=True)
class UrlFindings:
    """Structural facts derived from the URL string alone."""

    length: int
    contains_underscores: bool
    https_enabled: bool
    mobile_friendly: bool  # placeholder, not measured
    www_redirect_note: str  # placeholder, not measured

    def to_dict(self) -> dict[str, Any]:
        return {
            "length": self.length,
            "containsUnderscores": self.contains_underscores,
            "httpsEnabled": self.https_enabled,
            "mobileFriendly": self.mobile_friendly,
            "wwwRedirectNote": self.www_redirect_note,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UrlFindings":
        return cls(
            length=int(data["length"]),
            contains_underscores=bool(data["containsUnderscores"]),
            https_enabled=bool(data["httpsEnabled"]),
            mobile_friendly=bool(data["mobileFriendly"]),
            www_redirect_note=data.get("wwwRedirectNote", ""),
        )


@dataclass(frozen=True)
class PageSpeedFindings:
    """Page speed estimated from static markup signals."""

    desktop_speed: int
    mobile_speed: int
    critical_issues: tuple[str, ...] = ()
    moderate_issues: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "desktopSpeed": self.desktop_speed,
            "mobileSpeed": self.mobile_speed,
            "criticalIssues": list(self.critical_issues),
            "moderateIssues": list(self.moderate_issues),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageSpeedFindings":
        return cls(
            desktop_speed=int(data["desktopSpeed"]),
            mobile_speed=int(data["mobileSpeed"]),
            critical_issues=tuple(data.get("criticalIssues", [])),
            moderate_issues=tuple(data.get("moderateIssues", [])),
        )


@dataclass(frozen=True)
class CategoryScores:
    """Category scores, each an integer in [0, 100]."""

    overall: int
    meta_tags: int
    content_structure: int
    page_speed: int
    image_optimization: int

    def to_dict(self) -> dict[str, int]:
        return {
            "overall": self.overall,
            "metaTags": self.meta_tags,
            "contentStructure": self.content_structure,
            "pageSpeed": self.page_speed,
            "imageOptimization": self.image_optimization,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CategoryScores":
        return cls(
            overall=int(data["overall"]),
            meta_tags=int(data["metaTags"]),
            content_structure=int(data["contentStructure"]),
            page_speed=int(data["pageSpeed"]),
            image_optimization=int(data["imageOptimization"]),
        )


@dataclass(frozen=True)
class Recommendation:
    """A severity-tagged, human-readable suggestion."""

    severity: Severity
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"severity": self.severity.value, "message": self.message}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recommendation":
        return cls(severity=Severity(data["severity"]), message=data["message"])


@dataclass(frozen=True)
class AnalysisReport:
    """Complete SEO report for one URL. The engine's sole output."""

    url: str
    domain: str
    generated_at: str
    scores: CategoryScores
    meta_tags: MetaTagFindings
    headings: tuple[HeadingFinding, ...] = ()
    images: tuple[ImageFinding, ...] = ()
    keywords: tuple[KeywordFinding, ...] = ()
    url_analysis: Optional[UrlFindings] = None
    page_speed: Optional[PageSpeedFindings] = None
    recommendations: tuple[Recommendation, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "domain": self.domain,
            "generatedAt": self.generated_at,
            "scores": self.scores.to_dict(),
            "metaTags": self.meta_tags.to_dict(),
            "headings": [h.to_dict() for h in self.headings],
            "images": [i.to_dict() for i in self.images],
            "keywords": [k.to_dict() for k in self.keywords],
            "urlAnalysis": self.url_analysis.to_dict() if self.url_analysis else None,
            "pageSpeed": self.page_speed.to_dict() if self.page_speed else None,
            "recommendations": [r.to_dict() for r in self.recommendations],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisReport":
        return cls(
            url=data["url"],
            domain=data.get("domain", ""),
            generated_at=data.get("generatedAt", ""),
            scores=CategoryScores.from_dict(data["scores"]),
            meta_tags=MetaTagFindings.from_dict(data.get("metaTags", {})),
            headings=tuple(HeadingFinding.from_dict(h) for h in data.get("headings", [])),
            images=tuple(ImageFinding.from_dict(i) for i in data.get("images", [])),
            keywords=tuple(KeywordFinding.from_dict(k) for k in data.get("keywords", [])),
            url_analysis=UrlFindings.from_dict(data["urlAnalysis"]) if data.get("urlAnalysis") else None,
            page_speed=PageSpeedFindings.from_dict(data["pageSpeed"]) if data.get("pageSpeed") else None,
            recommendations=tuple(
                Recommendation.from_dict(r) for r in data.get("recommendations", [])
            ),
        )


@dataclass(frozen=True)
class FetchedPage:
    """Raw result of fetching a page."""

    url: str
    html: str
    status_code: int = 200
    final_url: Optional[str] = None
    elapsed: float = 0.0
