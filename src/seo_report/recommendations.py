"""Recommendation generation from analyzer findings."""

from typing import List, Optional, Sequence

from seo_report.config import AnalysisThresholds, default_thresholds
from seo_report.constants import (
    ADD_DESCRIPTION_MESSAGE,
    ADD_H1_MESSAGE,
    ADD_TITLE_MESSAGE,
    FIX_HIERARCHY_MESSAGE,
    GENERIC_ALT_MESSAGE,
    IMPROVE_SPEED_MESSAGE,
    REDUCE_DENSITY_MESSAGE,
    SHORTEN_DESCRIPTION_MESSAGE,
    SHORTEN_TITLE_MESSAGE,
    SINGLE_H1_MESSAGE,
    SOCIAL_TAGS_SUGGESTION,
    STRUCTURED_DATA_SUGGESTION,
)
from seo_report.models import (
    HeadingFinding,
    HeadingStatus,
    ImageFinding,
    ImageStatus,
    KeywordFinding,
    KeywordStatus,
    MetaTagFindings,
    PageSpeedFindings,
    Recommendation,
    Severity,
)


class RecommendationGenerator:
    """Maps findings to an ordered list of recommendations.

    Emission order is the display order: meta tags, headings, images,
    keywords, page speed, then two fixed suggestions. Nothing is sorted or
    de-duplicated afterwards.
    """

    def __init__(self, thresholds: Optional[AnalysisThresholds] = None):
        self.thresholds = thresholds or default_thresholds

    def generate(
        self,
        meta_tags: MetaTagFindings,
        headings: Sequence[HeadingFinding],
        images: Sequence[ImageFinding],
        keywords: Sequence[KeywordFinding],
        page_speed: PageSpeedFindings,
    ) -> List[Recommendation]:
        recommendations: List[Recommendation] = []
        recommendations.extend(self._meta_tag_recommendations(meta_tags))
        recommendations.extend(self._heading_recommendations(headings))
        recommendations.extend(self._image_recommendations(images))
        recommendations.extend(self._keyword_recommendations(keywords))
        recommendations.extend(self._page_speed_recommendations(page_speed))

        recommendations.append(Recommendation(Severity.SUGGESTION, SOCIAL_TAGS_SUGGESTION))
        recommendations.append(Recommendation(Severity.SUGGESTION, STRUCTURED_DATA_SUGGESTION))
        return recommendations

    def _meta_tag_recommendations(self, meta_tags: MetaTagFindings) -> List[Recommendation]:
        t = self.thresholds
        recs = []

        if not meta_tags.title:
            recs.append(Recommendation(Severity.CRITICAL, ADD_TITLE_MESSAGE))
        elif meta_tags.title_length > t.title_max:
            recs.append(Recommendation(
                Severity.MODERATE,
                SHORTEN_TITLE_MESSAGE.format(limit=t.title_max, length=meta_tags.title_length),
            ))

        if not meta_tags.description:
            recs.append(Recommendation(Severity.CRITICAL, ADD_DESCRIPTION_MESSAGE))
        elif meta_tags.description_length > t.description_max:
            recs.append(Recommendation(
                Severity.MODERATE,
                SHORTEN_DESCRIPTION_MESSAGE.format(length=meta_tags.description_length),
            ))

        return recs

    def _heading_recommendations(self, headings: Sequence[HeadingFinding]) -> List[Recommendation]:
        recs = []

        h1_count = sum(1 for h in headings if h.level == "H1")
        if h1_count == 0:
            recs.append(Recommendation(Severity.CRITICAL, ADD_H1_MESSAGE))
        elif h1_count > 1:
            recs.append(Recommendation(Severity.MODERATE, SINGLE_H1_MESSAGE))

        if any(
            h.status == HeadingStatus.WARNING and h.message and "Skipped" in h.message
            for h in headings
        ):
            recs.append(Recommendation(Severity.MODERATE, FIX_HIERARCHY_MESSAGE))

        return recs

    def _image_recommendations(self, images: Sequence[ImageFinding]) -> List[Recommendation]:
        recs = []

        missing = sum(1 for i in images if i.status == ImageStatus.MISSING)
        if missing:
            plural = missing > 1
            recs.append(Recommendation(
                Severity.CRITICAL,
                f"Add alt text to {missing} image{'s' if plural else ''} "
                f"that {'are' if plural else 'is'} missing it",
            ))

        if any(i.status == ImageStatus.TOO_GENERIC for i in images):
            recs.append(Recommendation(Severity.MODERATE, GENERIC_ALT_MESSAGE))

        return recs

    def _keyword_recommendations(self, keywords: Sequence[KeywordFinding]) -> List[Recommendation]:
        over_optimized = [k for k in keywords if k.status == KeywordStatus.OVER_OPTIMIZED]
        if not over_optimized:
            return []

        listed = ", ".join(f'"{k.keyword}" ({k.density:g}%)' for k in over_optimized)
        return [Recommendation(Severity.MODERATE, REDUCE_DENSITY_MESSAGE.format(keywords=listed))]

    def _page_speed_recommendations(self, page_speed: PageSpeedFindings) -> List[Recommendation]:
        recs = []

        if page_speed.desktop_speed < self.thresholds.slow_page_speed:
            recs.append(Recommendation(Severity.CRITICAL, IMPROVE_SPEED_MESSAGE))

        recs.extend(Recommendation(Severity.CRITICAL, issue) for issue in page_speed.critical_issues)
        recs.extend(Recommendation(Severity.MODERATE, issue) for issue in page_speed.moderate_issues)

        return recs
