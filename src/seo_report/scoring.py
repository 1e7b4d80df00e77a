"""Category scoring: reduce analyzer findings to 0-100 integers."""

from typing import Optional, Sequence

from seo_report.config import AnalysisThresholds, default_thresholds
from seo_report.constants import (
    ERROR_HEADING_PENALTY,
    FEW_HEADINGS_PENALTY,
    GENERIC_ALT_WEIGHT,
    LONG_DESCRIPTION_PENALTY,
    LONG_TITLE_PENALTY,
    MAX_SCORE,
    MIN_SCORE,
    MISSING_ALT_WEIGHT,
    MISSING_CANONICAL_PENALTY,
    MISSING_DESCRIPTION_PENALTY,
    MISSING_H1_PENALTY,
    MISSING_KEYWORDS_PENALTY,
    MISSING_TITLE_PENALTY,
    MULTIPLE_H1_PENALTY,
    SHORT_DESCRIPTION_PENALTY,
    SHORT_TITLE_PENALTY,
    WARNING_HEADING_PENALTY,
)
from seo_report.models import (
    CategoryScores,
    HeadingFinding,
    HeadingStatus,
    ImageFinding,
    ImageStatus,
    MetaTagFindings,
    PageSpeedFindings,
)
from seo_report.utils import clamp, round_half_up


class Scorer:
    """Pure, deterministic reductions from findings to category scores."""

    def __init__(self, thresholds: Optional[AnalysisThresholds] = None):
        self.thresholds = thresholds or default_thresholds

    def score(
        self,
        meta_tags: MetaTagFindings,
        headings: Sequence[HeadingFinding],
        images: Sequence[ImageFinding],
        page_speed: PageSpeedFindings,
    ) -> CategoryScores:
        """Compute all category scores and the overall average.

        Returns:
            CategoryScores with every value in [0, 100]
        """
        meta_tags_score = self.meta_tags_score(meta_tags)
        content_structure_score = self.content_structure_score(headings)
        image_score = self.image_optimization_score(images)
        page_speed_score = self.page_speed_score(page_speed)

        overall = self.overall_score(
            meta_tags_score, content_structure_score, image_score, page_speed_score
        )

        return CategoryScores(
            overall=overall,
            meta_tags=meta_tags_score,
            content_structure=content_structure_score,
            page_speed=page_speed_score,
            image_optimization=image_score,
        )

    def meta_tags_score(self, meta_tags: MetaTagFindings) -> int:
        t = self.thresholds
        score = MAX_SCORE

        if not meta_tags.title:
            score -= MISSING_TITLE_PENALTY
        else:
            if meta_tags.title_length < t.title_min:
                score -= SHORT_TITLE_PENALTY
            if meta_tags.title_length > t.title_max:
                score -= LONG_TITLE_PENALTY

        if not meta_tags.description:
            score -= MISSING_DESCRIPTION_PENALTY
        else:
            if meta_tags.description_length < t.description_min:
                score -= SHORT_DESCRIPTION_PENALTY
            if meta_tags.description_length > t.description_max:
                score -= LONG_DESCRIPTION_PENALTY

        if not meta_tags.keywords:
            score -= MISSING_KEYWORDS_PENALTY

        if not meta_tags.canonical:
            score -= MISSING_CANONICAL_PENALTY

        return max(MIN_SCORE, score)

    def content_structure_score(self, headings: Sequence[HeadingFinding]) -> int:
        score = MAX_SCORE

        h1_count = sum(1 for h in headings if h.level == "H1")
        if h1_count == 0:
            score -= MISSING_H1_PENALTY
        if h1_count > 1:
            score -= MULTIPLE_H1_PENALTY

        score -= WARNING_HEADING_PENALTY * sum(1 for h in headings if h.status == HeadingStatus.WARNING)
        score -= ERROR_HEADING_PENALTY * sum(1 for h in headings if h.status == HeadingStatus.ERROR)

        if len(headings) < self.thresholds.min_heading_count:
            score -= FEW_HEADINGS_PENALTY

        return max(MIN_SCORE, score)

    def image_optimization_score(self, images: Sequence[ImageFinding]) -> int:
        # A page without images is never penalized here
        if not images:
            return MAX_SCORE

        total = len(images)
        missing_percent = sum(1 for i in images if i.status == ImageStatus.MISSING) / total * 100
        generic_percent = sum(1 for i in images if i.status == ImageStatus.TOO_GENERIC) / total * 100

        score = MAX_SCORE - missing_percent * MISSING_ALT_WEIGHT - generic_percent * GENERIC_ALT_WEIGHT
        return round_half_up(max(MIN_SCORE, score))

    def page_speed_score(self, page_speed: PageSpeedFindings) -> int:
        return int(clamp(page_speed.desktop_speed, MIN_SCORE, MAX_SCORE))

    @staticmethod
    def overall_score(*category_scores: int) -> int:
        """Rounded arithmetic mean of the category scores."""
        return round_half_up(sum(category_scores) / len(category_scores))
