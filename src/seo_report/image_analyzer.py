"""Image alt text analyzer."""

from typing import List, Optional

from seo_report.config import AnalysisThresholds, default_thresholds
from seo_report.constants import GENERIC_ALT_WORDS
from seo_report.markup import AbstractMarkup
from seo_report.models import ImageFinding, ImageStatus


class ImageAnalyzer:
    """Classifies the alt text of every image on a page."""

    GENERIC_ALT_WORDS = GENERIC_ALT_WORDS

    def __init__(self, thresholds: Optional[AnalysisThresholds] = None):
        """Initialize analyzer with configurable settings.

        Args:
            thresholds: Analysis thresholds configuration
        """
        self.thresholds = thresholds or default_thresholds

    def analyze(self, document: AbstractMarkup) -> List[ImageFinding]:
        """Analyze every <img> element in document order.

        Args:
            document: Parsed markup

        Returns:
            One ImageFinding per image
        """
        findings = []
        for element in document.select("img"):
            src = document.attr(element, "src")
            alt = document.attr(element, "alt")
            findings.append(ImageFinding(
                filename=self._get_filename(src),
                alt_text=alt,
                status=self.classify_alt(alt),
            ))
        return findings

    def classify_alt(self, alt: str) -> ImageStatus:
        """Classify an alt text as missing, too generic or descriptive.

        The generic-word check is a case-sensitive substring match.
        """
        if not alt:
            return ImageStatus.MISSING
        if len(alt.strip()) < self.thresholds.generic_alt_min_length:
            return ImageStatus.TOO_GENERIC
        if any(word in alt for word in self.GENERIC_ALT_WORDS):
            return ImageStatus.TOO_GENERIC
        return ImageStatus.DESCRIPTIVE

    @staticmethod
    def _get_filename(src: str) -> str:
        """Last path segment of src, or src itself when that segment is empty."""
        return src.rsplit("/", 1)[-1] or src
